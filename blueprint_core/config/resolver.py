"""单次调用的 Provider 配置解析。

优先级（逐字段）：显式调用参数 > SettingsStore 持久化值 > 空字符串。
API Key 永远只从 SettingsStore 读取，不接受调用参数，
避免密钥与用户可控的自由文本走同一条通道。
"""

from typing import Optional

from blueprint_core.domain import settings_store as keys
from blueprint_core.domain.exceptions import MissingCredentialError
from blueprint_core.domain.models import LOCAL_PROVIDER, ProviderConfig
from blueprint_core.domain.settings_store import SettingsStore


def resolve_provider_config(
    store: SettingsStore,
    provider: Optional[str] = None,
    model: Optional[str] = None,
    base_url: Optional[str] = None,
) -> ProviderConfig:
    """合并调用参数与持久化配置，得到本次调用的 ProviderConfig。

    None 表示调用方未指定；空字符串视为显式指定的值。

    Raises:
        MissingCredentialError: 非 local Provider 且 API Key 为空。
    """

    resolved_provider = (provider if provider is not None else store.get(keys.AI_PROVIDER)).strip().lower()
    resolved_model = model if model is not None else store.get(keys.AI_MODEL)
    resolved_base_url = base_url if base_url is not None else store.get(keys.AI_BASE_URL)
    api_key = store.get(keys.AI_API_KEY)

    # 自建端点通常不需要密钥
    if not api_key and resolved_provider != LOCAL_PROVIDER:
        raise MissingCredentialError(provider=resolved_provider)

    return ProviderConfig(
        provider=resolved_provider,
        model=resolved_model,
        base_url=resolved_base_url,
        api_key=api_key,
    )
