"""提供商工厂。"""

import httpx

from si.config.schema import Config
from si.providers.base import LLMProvider
from si.providers.openai_provider import OpenAIProvider


def create_provider(config: Config, transport: httpx.AsyncBaseTransport | None = None) -> LLMProvider:
    """根据配置创建提供商。

    目前只有 OpenAI 兼容实现（含 Azure）。
    """
    return OpenAIProvider(config.llm.openai, transport=transport)
