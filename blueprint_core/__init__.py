"""Blueprint 助手核心包。

该包把自由文本对话转换为结构化的动作列表，
包括配置解析、系统提示词构建、多家 Provider 适配、
动作提取以及语音转写等能力。
"""

from blueprint_core.api.service import chat_with_ai, transcribe_audio

__all__ = ["chat_with_ai", "transcribe_audio"]
