"""Anthropic Messages API 适配器。

与 OpenAI 的差异：
- 系统提示词放在顶层 system 字段，messages 里不出现 role="system"。
- 认证使用 x-api-key 头，并固定 anthropic-version。
- 回复文本在 content[0].text。
"""

from typing import Any, Dict, Sequence

from blueprint_core.config.settings import settings
from blueprint_core.domain.json_value import str_at
from blueprint_core.domain.models import ConversationMessage, ProviderConfig
from blueprint_core.providers import http
from blueprint_core.providers.registry import ANTHROPIC_MESSAGES_URL, ANTHROPIC_VERSION, DEFAULT_GENERATION


class AnthropicClient:
    """Anthropic Provider 客户端实现。"""

    name = "anthropic"
    label = "Anthropic"

    def __init__(self, cfg=settings):
        self._settings = cfg

    def complete(
        self,
        config: ProviderConfig,
        system_prompt: str,
        messages: Sequence[ConversationMessage],
    ) -> str:
        data = http.post(
            self.label,
            ANTHROPIC_MESSAGES_URL,
            timeout=self._settings.http_timeout,
            headers={
                "x-api-key": config.api_key,
                "anthropic-version": ANTHROPIC_VERSION,
                "Content-Type": "application/json",
            },
            json_body=self._build_payload(config, system_prompt, messages),
        )
        return str_at(data, "content", 0, "text")

    def _build_payload(
        self,
        config: ProviderConfig,
        system_prompt: str,
        messages: Sequence[ConversationMessage],
    ) -> Dict[str, Any]:
        return {
            "model": config.model,
            "system": system_prompt,
            "messages": [m.to_dict() for m in messages],
            "max_tokens": DEFAULT_GENERATION.max_tokens,
        }
