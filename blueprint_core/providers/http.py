"""Provider 共用的 HTTP 调用与错误映射。

每次调用都新建一个 httpx.Client，调用方只看到同步接口：
- 超时 -> RequestTimeoutError
- 其他传输错误 -> NetworkError
- 非 2xx -> UpstreamError(status, body)，不重试、不退避
- 2xx 但响应体不是 JSON -> DecodeError
"""

from typing import Any, Dict, Optional

import httpx

from blueprint_core.domain.exceptions import DecodeError, NetworkError, RequestTimeoutError, UpstreamError
from blueprint_core.infrastructure.logging.logger import logger


def post(
    provider: str,
    url: str,
    *,
    timeout: float,
    headers: Optional[Dict[str, str]] = None,
    params: Optional[Dict[str, str]] = None,
    json_body: Optional[Dict[str, Any]] = None,
    data: Optional[Dict[str, str]] = None,
    files: Optional[Dict[str, Any]] = None,
) -> Any:
    """发起一次 POST 并返回解析后的 JSON。

    provider 只用于错误信息与日志；url 不能带密钥（密钥放 headers/params）。
    """

    kwargs: Dict[str, Any] = {"headers": headers or {}}
    if params:
        kwargs["params"] = params
    if json_body is not None:
        kwargs["json"] = json_body
    if data is not None:
        kwargs["data"] = data
    if files is not None:
        kwargs["files"] = files

    try:
        with httpx.Client(timeout=timeout, trust_env=False) as client:
            resp = client.post(url, **kwargs)
    except httpx.TimeoutException as e:
        logger.warning("Provider request timed out", extra={"extra": {"provider": provider, "url": url}})
        raise RequestTimeoutError(
            code="TIMEOUT",
            message=f"{provider} API: превышено время ожидания ({timeout:g} с)",
            http_status=504,
            provider=provider,
        ) from e
    except httpx.RequestError as e:
        raise NetworkError(code="NETWORK_ERROR", message=str(e), provider=provider) from e

    if not 200 <= resp.status_code < 300:
        logger.warning(
            "Provider returned error status",
            extra={"extra": {"provider": provider, "url": url, "status": resp.status_code}},
        )
        raise UpstreamError(provider, resp.status_code, resp.text)

    try:
        return resp.json()
    except ValueError as e:
        raise DecodeError(code="DECODE_ERROR", message=f"{provider} API: ответ не является JSON", provider=provider) from e
