"""OpenAI 兼容 Provider 适配器。

覆盖公共 OpenAI 接口以及所有兼容 chat/completions 的自建服务：
- URL: {base_url}/v1/chat/completions
- 认证: Authorization: Bearer <api_key>（本地服务密钥为空时不带）
- 系统提示词作为第一条 role="system" 消息放进 messages。
"""

from typing import Any, Dict, List, Sequence

from blueprint_core.config.settings import settings
from blueprint_core.domain.json_value import str_at
from blueprint_core.domain.models import ConversationMessage, ProviderConfig
from blueprint_core.providers import http
from blueprint_core.providers.registry import CHAT_COMPLETIONS_PATH, DEFAULT_GENERATION


class OpenAICompatibleClient:
    """OpenAI 兼容 Provider 客户端实现。"""

    name = "openai"
    label = "AI"

    def __init__(self, cfg=settings):
        self._settings = cfg

    def complete(
        self,
        config: ProviderConfig,
        system_prompt: str,
        messages: Sequence[ConversationMessage],
    ) -> str:
        headers = {"Content-Type": "application/json"}
        if config.api_key:
            headers["Authorization"] = f"Bearer {config.api_key}"
        data = http.post(
            self.label,
            self.endpoint(config),
            timeout=self._settings.http_timeout,
            headers=headers,
            json_body=self._build_payload(config, system_prompt, messages),
        )
        return self._parse_response(data)

    def endpoint(self, config: ProviderConfig) -> str:
        """local 且配置了 base_url 时走自建端点，否则走公共 OpenAI。"""

        if config.is_local and config.base_url:
            return f"{config.base_url.rstrip('/')}{CHAT_COMPLETIONS_PATH}"
        return f"{self._settings.openai_base_url.rstrip('/')}{CHAT_COMPLETIONS_PATH}"

    def _build_payload(
        self,
        config: ProviderConfig,
        system_prompt: str,
        messages: Sequence[ConversationMessage],
    ) -> Dict[str, Any]:
        msgs: List[Dict[str, str]] = [{"role": "system", "content": system_prompt}]
        msgs.extend(m.to_dict() for m in messages)
        return {
            "model": config.model,
            "messages": msgs,
            "temperature": DEFAULT_GENERATION.temperature,
            "max_tokens": DEFAULT_GENERATION.max_tokens,
        }

    @staticmethod
    def _parse_response(data: Any) -> str:
        return str_at(data, "choices", 0, "message", "content")
