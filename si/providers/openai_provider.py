"""OpenAI 兼容提供商实现。

支持两种端点：
- 标准 OpenAI 兼容接口（含自建 / 代理服务）
- Azure OpenAI 部署

请求始终以流式方式发送；非流式的 ask() 由基类通过收集增量实现。

依赖：
- httpx: 异步 HTTP 客户端（流式读取响应体）
"""

from typing import AsyncIterator

import httpx
from loguru import logger

from si.config.schema import ProviderConfig
from si.providers.base import LLMProvider
from si.providers.endpoint import resolve_endpoint
from si.providers.errors import HTTPStatusError, TransportError
from si.providers.request import build_request, encode_request
from si.providers.sse import iter_deltas, iter_lines


class OpenAIProvider(LLMProvider):
    """OpenAI chat-completion 流式客户端。

    每次调用：
    1. 构建并序列化请求体
    2. 解析端点 URL 和认证头
    3. POST 请求，流式读取响应
    4. 非 2xx 时读取完整响应体并抛出 HTTPStatusError
    5. 逐行解码 SSE，产出文本增量

    响应体由 async with 管理，成功、解码错误、回调错误、取消时都会关闭。

    Attributes:
        config: 提供商配置（不可变）
    """

    def __init__(self, config: ProviderConfig, transport: httpx.AsyncBaseTransport | None = None):
        """初始化提供商。

        Args:
            config: 提供商配置
            transport: 自定义 httpx 传输层（测试时传入 httpx.MockTransport）
        """
        self.config = config
        self._transport = transport

    async def stream(self, question: str) -> AsyncIterator[str]:
        """发送问题并产出文本增量。

        Raises:
            EncodingError: 请求体无法序列化
            TransportError: 网络层失败，或端点 URL 非法
            HTTPStatusError: 非 2xx 响应
            StreamDecodeError: SSE data 行无法解析
        """
        body = encode_request(build_request(question, self.config.model_name))
        endpoint = resolve_endpoint(
            self.config.base_url,
            self.config.api_key,
            self.config.azure_deployment_name,
        )
        logger.debug(f"POST {endpoint.url} (model={self.config.model_name or 'default'})")

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.config.timeout) as client:
                async with client.stream("POST", endpoint.url, content=body, headers=endpoint.headers) as response:
                    logger.debug(f"Response status: {response.status_code}")
                    if not response.is_success:
                        await response.aread()
                        raise HTTPStatusError(response.status_code, response.text)

                    async for fragment in iter_deltas(iter_lines(response.aiter_text())):
                        yield fragment
        except httpx.TransportError as e:
            raise TransportError(f"request to {endpoint.url} failed: {e!r}") from e
        except httpx.InvalidURL as e:
            # 配置的 base_url 无法构成合法 URL
            raise TransportError(f"invalid endpoint URL {endpoint.url!r}: {e}") from e
