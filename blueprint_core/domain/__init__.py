"""领域层模型与协议。

包含：
- models: ConversationMessage / ProviderConfig / ActionEnvelope / ChatResult。
- settings_store: 持久化键值配置的 SettingsStore 抽象及键名。
- json_value: 对已解析 JSON 的类型化访问函数。
- exceptions: 业务异常类型定义。
"""
