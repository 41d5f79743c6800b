"""动作目录定义。

这里列出的动作名必须与提示词模板 prompts/<locale>/assistant_system_<version>.md
中的目录保持一致；载荷结构只是文本约定，核心层不做校验，
由下游执行层负责解释 ActionEnvelope.data。
"""

from typing import Literal, Tuple

ACTION_SCHEMA_VERSION = "v1"

ActionKind = Literal["add_client", "add_service", "add_note", "complete_note", "mark_payment", "none"]

ACTION_KINDS: Tuple[str, ...] = (
    "add_client",
    "add_service",
    "add_note",
    "complete_note",
    "mark_payment",
    "none",
)
