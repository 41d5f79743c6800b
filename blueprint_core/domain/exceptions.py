"""统一业务异常模型。

所有跨模块抛出的业务级错误都应该继承自 BusinessError，
便于在 API 层或 UI 层做统一捕获与用户提示。
str(error) 始终是可直接展示给用户的文本。
"""


class BusinessError(Exception):
    """业务异常基类。

    Attributes:
        code: 机器可读错误码（如 "STORE_READ_ERROR"）。
        message: 用户可读错误信息。
        http_status: 映射到 HTTP 时可用的状态码，默认 400。
        extra: 其他补充字段（例如 provider 等）。
    """

    def __init__(self, code: str, message: str, http_status: int = 400, **extra):
        self.code = code
        self.message = message
        self.http_status = http_status
        self.extra = extra
        super().__init__(message)


class MissingCredentialError(BusinessError):
    """非本地 Provider 缺少 API Key。"""

    def __init__(self, message: str = "API ключ не настроен. Перейди в Настройки и добавь ключ.", **extra):
        super().__init__(code="MISSING_API_KEY", message=message, **extra)


class NetworkError(BusinessError):
    """网络层错误，例如 DNS 失败、连接被拒绝等。"""


class RequestTimeoutError(NetworkError):
    """HTTP 调用超过超时上限。调用方可以自行决定是否手动重试。"""


class UpstreamError(BusinessError):
    """第三方 API 返回非 2xx 时抛出，原样携带状态码与响应体。"""

    def __init__(self, provider: str, status: int, body: str):
        super().__init__(
            code="UPSTREAM_ERROR",
            message=f"{provider} API ошибка {status}: {body}",
            http_status=status,
            provider=provider,
        )
        self.provider = provider
        self.status = status
        self.body = body


class DecodeError(BusinessError):
    """输入或响应无法解码（如非法 base64 音频）。"""


class ValidationError(BusinessError):
    """参数或配置校验失败。"""
