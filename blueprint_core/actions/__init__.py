"""结构化动作：动作目录与从模型回复中提取动作。"""

from .definitions import ACTION_KINDS, ACTION_SCHEMA_VERSION, ActionKind
from .extractor import extract_actions

__all__ = ["ACTION_KINDS", "ACTION_SCHEMA_VERSION", "ActionKind", "extract_actions"]
