"""LLM 提供商模块。

提供统一的 LLM 接口：
- LLMProvider: 抽象基类，定义 stream / ask_stream / ask
- OpenAIProvider: OpenAI 兼容实现（标准 + Azure）
- create_provider: 根据配置创建提供商

底层组件：
- endpoint: 端点 URL 与认证头解析
- request: 请求体构建
- sse: SSE 流解码
"""

from si.providers.base import LLMProvider
from si.providers.errors import (
    EncodingError,
    HTTPStatusError,
    LLMError,
    StreamDecodeError,
    TransportError,
)
from si.providers.factory import create_provider
from si.providers.openai_provider import OpenAIProvider

__all__ = [
    "LLMProvider",
    "OpenAIProvider",
    "create_provider",
    "LLMError",
    "TransportError",
    "HTTPStatusError",
    "StreamDecodeError",
    "EncodingError",
]
