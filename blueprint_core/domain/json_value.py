"""对已解析 JSON 值树的类型化访问。

响应 JSON 只解析一次，之后通过这里的访问函数按路径读取，
类型不符或路径缺失时返回调用方给定的默认值，而不是抛异常。
"""

from typing import Any, Dict, List, Optional, Union

JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]
PathKey = Union[str, int]


def dig(value: JsonValue, *path: PathKey) -> JsonValue:
    """沿路径取值；任一段缺失或类型不匹配时返回 None。"""

    current: Any = value
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or not 0 <= key < len(current):
                return None
            current = current[key]
        else:
            if not isinstance(current, dict) or key not in current:
                return None
            current = current[key]
    return current


def as_str(value: JsonValue, default: Optional[str] = None) -> Optional[str]:
    return value if isinstance(value, str) else default


def as_list(value: JsonValue) -> Optional[List[Any]]:
    return value if isinstance(value, list) else None


def str_at(value: JsonValue, *path: PathKey, default: str = "") -> str:
    """读取路径上的字符串，缺失或非字符串时返回 default。"""

    found = as_str(dig(value, *path))
    return default if found is None else found
