"""Provider 抽象接口。

上层编排不直接依赖具体厂商的 HTTP 协议，而是依赖此协议：

- 每个厂商实现一个 ProviderClient（如 AnthropicClient）。
- 负责：把统一的消息列表 + 系统提示词转成该厂商的请求体，
  发起 HTTP 调用，并从响应 JSON 中取出原始回复文本。

回复文本的解析（动作提取）不在 Provider 层，见 blueprint_core.actions。
"""

from typing import Protocol, Sequence

from blueprint_core.domain.models import ConversationMessage, ProviderConfig


class ProviderClient(Protocol):
    """LLM Provider 客户端协议。

    实现者需要提供：
    - name: Provider 名称，用于日志与错误信息。
    - complete(...): 执行一次非流式对话调用，返回未解析的回复文本；
      回复字段缺失时返回空字符串而不是报错。
    """

    name: str

    def complete(
        self,
        config: ProviderConfig,
        system_prompt: str,
        messages: Sequence[ConversationMessage],
    ) -> str:
        ...
