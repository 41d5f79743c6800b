"""Google Gemini generateContent 适配器。

- URL: .../v1beta/models/{model}:generateContent?key=<api_key>
- 系统提示词放在 system_instruction；
- 对话放在 contents，assistant 角色改名为 model，其余一律为 user；
- 回复文本在 candidates[0].content.parts[0].text。
"""

from typing import Any, Dict, Sequence

from blueprint_core.config.settings import settings
from blueprint_core.domain.json_value import str_at
from blueprint_core.domain.models import ConversationMessage, ProviderConfig
from blueprint_core.providers import http
from blueprint_core.providers.registry import DEFAULT_GENERATION, gemini_generate_url


class GeminiClient:
    """Gemini Provider 客户端实现。"""

    name = "gemini"
    label = "Gemini"

    def __init__(self, cfg=settings):
        self._settings = cfg

    def complete(
        self,
        config: ProviderConfig,
        system_prompt: str,
        messages: Sequence[ConversationMessage],
    ) -> str:
        # 密钥走查询参数，URL 本身不带密钥，日志里也就不会泄露
        data = http.post(
            self.label,
            gemini_generate_url(config.model),
            timeout=self._settings.http_timeout,
            headers={"Content-Type": "application/json"},
            params={"key": config.api_key},
            json_body=self._build_payload(system_prompt, messages),
        )
        return str_at(data, "candidates", 0, "content", "parts", 0, "text")

    def _build_payload(self, system_prompt: str, messages: Sequence[ConversationMessage]) -> Dict[str, Any]:
        return {
            "system_instruction": {"parts": [{"text": system_prompt}]},
            "contents": [
                {"role": self._map_role(m.role), "parts": [{"text": m.content}]}
                for m in messages
            ],
            "generationConfig": {
                "maxOutputTokens": DEFAULT_GENERATION.max_tokens,
                "temperature": DEFAULT_GENERATION.temperature,
            },
        }

    @staticmethod
    def _map_role(role: str) -> str:
        return "model" if role == "assistant" else "user"
