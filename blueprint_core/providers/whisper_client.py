"""Whisper 语音转写适配器（OpenAI / Groq）。

两家接口一致：multipart 上传 file + model + language，
Bearer 认证，响应 JSON 的 text 字段即转写结果。
"""

from blueprint_core.config.settings import settings
from blueprint_core.domain.json_value import str_at
from blueprint_core.providers import http
from blueprint_core.providers.registry import SpeechProviderConfig

AUDIO_FILENAME = "audio.webm"
AUDIO_MIME = "audio/webm"


class WhisperClient:
    """语音转写客户端。"""

    def __init__(self, cfg=settings):
        self._settings = cfg

    def transcribe(self, speech: SpeechProviderConfig, api_key: str, audio: bytes) -> str:
        data = http.post(
            speech.label,
            speech.endpoint,
            timeout=self._settings.transcription_timeout,
            headers={"Authorization": f"Bearer {api_key}"},
            data={"model": speech.model, "language": self._settings.transcription_language},
            files={"file": (AUDIO_FILENAME, audio, AUDIO_MIME)},
        )
        return str_at(data, "text")
