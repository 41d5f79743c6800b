"""持久化键值配置的抽象。

核心层只读取配置；具体存储引擎（JSON 文件、内存字典等）
通过 SettingsStore 协议注入，便于替换和测试。
"""

from typing import Dict, Protocol


AI_PROVIDER = "ai_provider"
AI_MODEL = "ai_model"
AI_BASE_URL = "ai_base_url"
AI_API_KEY = "ai_api_key"
VOICE_PROVIDER = "voice_provider"
GROQ_API_KEY = "groq_api_key"

SECRET_KEYS = frozenset({AI_API_KEY, GROQ_API_KEY})

DEFAULT_SETTINGS: Dict[str, str] = {
    AI_PROVIDER: "openai",
    AI_MODEL: "gpt-4o-mini",
    AI_BASE_URL: "",
    AI_API_KEY: "",
    VOICE_PROVIDER: "openai",
    GROQ_API_KEY: "",
}


class SettingsStore(Protocol):
    """键值配置存储协议。

    get 在键不存在时返回空字符串；每次读取都是单个键的原子快照。
    """

    def get(self, key: str) -> str:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def all(self) -> Dict[str, str]:
        ...
