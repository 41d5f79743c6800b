"""对外 API 服务模块。

提供简化的函数接口供上层应用（窗口、托盘、快捷键等）调用。
返回值都是普通 dict/str，便于直接序列化给前端。
"""

from typing import Any, Dict, List, Optional

from blueprint_core.agents.assistant_agent import AssistantAgent
from blueprint_core.config.settings import settings
from blueprint_core.domain.models import MessageLike
from blueprint_core.domain.settings_store import SECRET_KEYS, SettingsStore
from blueprint_core.infrastructure.storage.json_store import JsonSettingsStore
from blueprint_core.speech.transcriber import Transcriber


_store: Optional[SettingsStore] = None


def get_default_store() -> SettingsStore:
    """获取默认的持久化配置存储（单例）。"""
    global _store
    if _store is None:
        _store = JsonSettingsStore(settings.settings_file)
    return _store


def chat_with_ai(
    messages: List[MessageLike],
    provider: Optional[str] = None,
    model: Optional[str] = None,
    base_url: Optional[str] = None,
) -> Dict[str, Any]:
    """运行一次助手对话。

    Args:
        messages: 对话历史，每项为 {"role": "user"|"assistant", "content": str}
        provider / model / base_url: 可选覆盖项（API Key 只能来自配置）

    Returns:
        {"content": str, "actions": [{"action": str, "data": ...}, ...]}

    Raises:
        各种 domain.exceptions 中定义的异常
    """
    agent = AssistantAgent(get_default_store())
    return agent.chat(messages, provider=provider, model=model, base_url=base_url).to_dict()


def transcribe_audio(audio_base64: str, provider: Optional[str] = None) -> str:
    """把 base64 编码的 webm 音频转写为文本。"""
    return Transcriber(get_default_store()).transcribe(audio_base64, provider)


def save_setting(key: str, value: str) -> None:
    get_default_store().set(key, value)


def get_settings() -> Dict[str, str]:
    """返回全部配置，密钥类字段不外传。"""
    return {k: v for k, v in get_default_store().all().items() if k not in SECRET_KEYS}
