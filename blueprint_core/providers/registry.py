"""Provider 端点与生成参数配置。

对话端点、语音转写端点以及各厂商共用的生成参数都集中在这里，
适配器代码里不出现硬编码 URL，便于后续切换或升级。
"""

from dataclasses import dataclass
from typing import Mapping

from blueprint_core.domain import settings_store as keys


@dataclass(frozen=True)
class GenerationConfig:
    """对话生成参数（各 Provider 统一）。"""

    max_tokens: int
    temperature: float


DEFAULT_GENERATION = GenerationConfig(max_tokens=4096, temperature=0.3)

CHAT_COMPLETIONS_PATH = "/v1/chat/completions"

ANTHROPIC_MESSAGES_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


def gemini_generate_url(model: str) -> str:
    return f"{GEMINI_BASE_URL}/models/{model}:generateContent"


@dataclass(frozen=True)
class SpeechProviderConfig:
    """某个语音转写 Provider 的配置。

    - endpoint: multipart 上传地址。
    - model: 固定的转写模型 ID。
    - api_key_setting: 从 SettingsStore 读取 API Key 使用的键名。
    - label: 错误信息中展示的名称。
    """

    name: str
    endpoint: str
    model: str
    api_key_setting: str
    label: str


OPENAI_SPEECH = SpeechProviderConfig(
    name="openai",
    endpoint="https://api.openai.com/v1/audio/transcriptions",
    model="whisper-1",
    api_key_setting=keys.AI_API_KEY,
    label="Whisper",
)

GROQ_SPEECH = SpeechProviderConfig(
    name="groq",
    endpoint="https://api.groq.com/openai/v1/audio/transcriptions",
    model="whisper-large-v3-turbo",
    api_key_setting=keys.GROQ_API_KEY,
    label="Whisper",
)

SPEECH_REGISTRY: Mapping[str, SpeechProviderConfig] = {
    "openai": OPENAI_SPEECH,
    "groq": GROQ_SPEECH,
}


def get_speech_config(name: str) -> SpeechProviderConfig:
    """根据名称获取语音 Provider 配置；未知名称回退到 OpenAI。"""

    return SPEECH_REGISTRY.get((name or "").lower(), OPENAI_SPEECH)
