"""LLM 提供商错误类型模块。

调用方可见的失败分类：
- TransportError: 连接 / DNS / TLS / 超时 / 读取失败
- HTTPStatusError: 非 2xx 响应（携带状态码和响应体）
- StreamDecodeError: SSE data 行无法解析
- EncodingError: 请求体序列化失败

回调函数抛出的异常不包装，原样传递给调用方；
取消（asyncio.CancelledError）同样不包装。
"""

from si.errors import SiError


class LLMError(SiError):
    """LLM 调用失败的基类。"""


class TransportError(LLMError):
    """网络层失败：连接、DNS、TLS、超时或读取中断。"""


class HTTPStatusError(LLMError):
    """服务端返回非 2xx 状态码。

    Attributes:
        status_code: HTTP 状态码
        body: 完整响应体文本
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API request failed with status {status_code}: {body}")


class StreamDecodeError(LLMError):
    """SSE data 行不是合法的 chunk JSON。

    出现即中止整个流，不跳过坏行。
    """

    def __init__(self, payload: str, reason: str):
        self.payload = payload
        self.reason = reason
        preview = payload if len(payload) <= 200 else payload[:200] + "..."
        super().__init__(f"error parsing response chunk {preview!r}: {reason}")


class EncodingError(LLMError):
    """请求体无法序列化为 JSON。"""
