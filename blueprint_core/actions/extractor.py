"""从模型回复文本中提取动作。

模型被要求只输出 {"actions": [...], "message": "..."}，但实际回复可能是：
- 规范的 actions 数组；
- 旧式的单个顶层 action 字段；
- 根本不是 JSON 的普通聊天文本。

解析失败不是错误：普通聊天同样是合法回复，此时原文作为 content 返回。
"""

import json
from typing import Any, List

from blueprint_core.domain.json_value import JsonValue, as_list, as_str, dig, str_at
from blueprint_core.domain.models import NO_OP_ACTION, ActionEnvelope, ChatResult


def extract_actions(raw_text: str) -> ChatResult:
    """把原始回复文本解析为 ChatResult，永不抛异常。"""

    trimmed = (raw_text or "").strip()
    try:
        parsed = json.loads(trimmed)
    except (ValueError, RecursionError):
        # 嵌套过深同样按普通文本处理
        return ChatResult(content=trimmed, actions=[])

    content = str_at(parsed, "message", default=trimmed)
    return ChatResult(content=content, actions=_collect_actions(parsed))


def _collect_actions(parsed: JsonValue) -> List[ActionEnvelope]:
    items = as_list(dig(parsed, "actions"))
    if items is not None:
        return [_to_envelope(item) for item in items if _action_name(item) != NO_OP_ACTION]
    if _action_name(parsed) != NO_OP_ACTION:
        return [_to_envelope(parsed)]
    return []


def _action_name(item: Any) -> str:
    # 缺失或非字符串的 action 一律视为 "none"
    return as_str(dig(item, "action"), NO_OP_ACTION)


def _to_envelope(item: Any) -> ActionEnvelope:
    data = dig(item, "data")
    return ActionEnvelope(action=_action_name(item), data={} if data is None else data)
