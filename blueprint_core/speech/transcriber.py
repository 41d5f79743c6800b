"""语音转写流程。

1. 确定 Provider（调用参数 > voice_provider 配置 > openai）。
2. 从 SettingsStore 取对应的 API Key（Groq 用 groq_api_key，其余用 ai_api_key）。
3. 解码调用方传来的 base64 音频。
4. 交给 WhisperClient 上传并取回文本。
"""

import base64
import binascii
from typing import Optional

from blueprint_core.config.settings import settings
from blueprint_core.domain import settings_store as keys
from blueprint_core.domain.exceptions import DecodeError, MissingCredentialError
from blueprint_core.domain.settings_store import SettingsStore
from blueprint_core.infrastructure.logging.logger import logger
from blueprint_core.providers.registry import get_speech_config
from blueprint_core.providers.whisper_client import WhisperClient


def decode_audio(audio_base64: str) -> bytes:
    """严格解码标准 base64，非法输入抛 DecodeError。"""

    try:
        return base64.b64decode(audio_base64, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(code="DECODE_ERROR", message=f"Некорректные аудиоданные: {e}") from e


class Transcriber:
    """语音转写入口，store 只被读取。"""

    def __init__(self, store: SettingsStore, client: Optional[WhisperClient] = None, cfg=settings):
        self._store = store
        self._client = client or WhisperClient(cfg)

    def transcribe(self, audio_base64: str, provider: Optional[str] = None) -> str:
        name = provider or self._store.get(keys.VOICE_PROVIDER) or "openai"
        speech = get_speech_config(name)
        api_key = self._store.get(speech.api_key_setting)
        if not api_key:
            if speech.name == "groq":
                raise MissingCredentialError(
                    "Groq API ключ не настроен. Добавьте его в Настройки → Голосовой ввод.",
                    provider=speech.name,
                )
            raise MissingCredentialError("API ключ не настроен", provider=speech.name)

        audio = decode_audio(audio_base64)
        logger.info(
            "Transcription request",
            extra={"extra": {"provider": speech.name, "model": speech.model, "bytes": len(audio)}},
        )
        return self._client.transcribe(speech, api_key, audio)
