"""统一的对话与结果数据模型。

本模块定义了在 Provider 适配器、动作提取与调用方之间共享的标准数据结构：

- ConversationMessage: 调用方提供的一条对话消息（user/assistant）。
- ProviderConfig: 单次调用解析出的 Provider 配置，调用期间不可变。
- ActionEnvelope: 从模型回复中提取出的一个结构化动作。
- ChatResult: 一次对话编排的最终结果。

所有 Provider 适配器都只依赖这些模型，
并负责在各自的 API JSON 和这些模型之间做转换。
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Mapping, Union

from blueprint_core.domain.exceptions import ValidationError


# 对话消息角色（system 指令不属于对话历史，由 Prompt Builder 单独生成）
Role = Literal["user", "assistant"]
ROLES = ("user", "assistant")

LOCAL_PROVIDER = "local"

# 保留的空操作动作名，表示“只是聊天”
NO_OP_ACTION = "none"


@dataclass(frozen=True)
class ConversationMessage:
    """一条对话消息。"""

    role: Role
    content: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ConversationMessage":
        """从调用方传入的字典构造消息，只做基本形状校验。"""

        role = data.get("role")
        content = data.get("content")
        if role not in ROLES:
            raise ValidationError(code="VALIDATION_ERROR", message=f"Unsupported message role: {role!r}")
        if not isinstance(content, str):
            raise ValidationError(code="VALIDATION_ERROR", message="Message content must be a string")
        return cls(role=role, content=content)

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class ProviderConfig:
    """单次调用使用的 Provider 配置。

    - provider: 逻辑 Provider 名（空字符串表示未设置，按 OpenAI 兼容处理）。
    - model: 厂商模型 ID，例如 "gpt-4o-mini"。
    - base_url: 自建/本地部署的基础 URL，仅 provider="local" 时生效。
    - api_key: 只能来自持久化配置，不接受调用参数。
    """

    provider: str
    model: str
    base_url: str
    api_key: str = field(repr=False)

    @property
    def is_local(self) -> bool:
        return self.provider == LOCAL_PROVIDER


@dataclass
class ActionEnvelope:
    """一个结构化动作：动作类型 + 任意载荷。

    载荷的具体结构由下游执行层约定，这里不做校验。
    """

    action: str
    data: Any = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"action": self.action, "data": self.data}


@dataclass
class ChatResult:
    """一次对话编排的最终结果。

    - content: 给用户看的回复文本，永远非空缺（模型 message 字段或原始文本）。
    - actions: 按原始顺序排列的动作列表，不包含 "none"。
    """

    content: str
    actions: List[ActionEnvelope] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "actions": [a.to_dict() for a in self.actions],
        }


MessageLike = Union[ConversationMessage, Mapping[str, Any]]


def normalize_messages(messages: List[MessageLike]) -> List[ConversationMessage]:
    """把调用方的消息列表统一成 ConversationMessage，保持顺序。"""

    return [m if isinstance(m, ConversationMessage) else ConversationMessage.from_dict(m) for m in messages]
