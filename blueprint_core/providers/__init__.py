"""LLM Provider 集成层。

该包下的模块负责：
- 定义 Provider 抽象接口 (base)。
- 维护端点与生成参数配置 (registry)。
- 提供各厂商的具体实现 (openai_client、anthropic_client、gemini_client、whisper_client)。
"""

from typing import Optional

from blueprint_core.config.settings import settings
from blueprint_core.providers.anthropic_client import AnthropicClient
from blueprint_core.providers.base import ProviderClient
from blueprint_core.providers.gemini_client import GeminiClient
from blueprint_core.providers.openai_client import OpenAICompatibleClient


def create_provider(name: Optional[str] = None, cfg=None) -> ProviderClient:
    """根据名称创建 Provider 实例。

    anthropic / gemini 走专用适配器，其余（openai、local、空值等）
    一律走 OpenAI 兼容适配器。
    """

    cfg = cfg or settings
    provider_name = (name or "").lower()
    if provider_name == "anthropic":
        return AnthropicClient(cfg)
    if provider_name == "gemini":
        return GeminiClient(cfg)
    return OpenAICompatibleClient(cfg)
