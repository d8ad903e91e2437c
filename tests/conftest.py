import json

import httpx
import pytest

from si.config.schema import ProviderConfig
from si.providers.openai_provider import OpenAIProvider


def sse_line(*contents, finish_reason=None) -> str:
    choices = [
        {"index": i, "delta": {"content": c}, "finish_reason": finish_reason}
        for i, c in enumerate(contents)
    ]
    chunk = {
        "id": "chatcmpl-123",
        "object": "chat.completion.chunk",
        "created": 1694268190,
        "model": "gpt-4",
        "choices": choices,
    }
    return f"data: {json.dumps(chunk)}\n\n"


def sse_body(*fragments: str) -> str:
    return "".join(sse_line(f) for f in fragments) + "data: [DONE]\n\n"


class ChunkedStream(httpx.AsyncByteStream):
    """Response body served one chunk per read; records reads and closing."""

    def __init__(self, chunks: list[str]):
        self.chunks = [c.encode("utf-8") for c in chunks]
        self.reads = 0
        self.closed = False

    async def __aiter__(self):
        for chunk in self.chunks:
            self.reads += 1
            yield chunk

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def provider_config():
    return ProviderConfig(base_url="https://api.openai.com/v1", api_key="test-api-key")


@pytest.fixture
def make_provider(provider_config):
    def _make(handler, config: ProviderConfig | None = None) -> OpenAIProvider:
        return OpenAIProvider(config or provider_config, transport=httpx.MockTransport(handler))
    return _make
