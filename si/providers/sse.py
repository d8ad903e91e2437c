"""SSE 流解码模块。

将 chat-completion 的流式响应体解码为文本增量（delta）序列。

响应体格式（逐行）：
    data: {"choices":[{"index":0,"delta":{"content":"Hel"},"finish_reason":null}]}
    data: {"choices":[{"index":0,"delta":{"content":"lo"},"finish_reason":null}]}
    data: [DONE]

解码规则：
- 只按 \\n 切分行，每行去除首尾空白（兼容 \\r\\n）
- 空行、非 data: 行跳过
- data: [DONE] 视为正常结束，之后的行不再读取
- data: 后的 JSON 解析失败即中止整个流（StreamDecodeError）
- 每个 choice 的非空 delta.content 按数组顺序产出
"""

from typing import AsyncIterable, AsyncIterator

from loguru import logger
from pydantic import BaseModel, ConfigDict, ValidationError

from si.providers.errors import StreamDecodeError

DATA_PREFIX = "data: "
DONE_LINE = "data: [DONE]"


class StreamDelta(BaseModel):
    """增量内容。role 只出现在首个 chunk。"""
    model_config = ConfigDict(extra="ignore")

    role: str | None = None
    content: str | None = None


class StreamChoice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    index: int = 0
    delta: StreamDelta | None = None
    finish_reason: str | None = None


class StreamChunk(BaseModel):
    """一个 SSE 事件反序列化后的结果。

    Azure 的首个 chunk 可能只有 prompt_filter_results、choices 为空，
    所以 choices 默认为空列表。
    """
    model_config = ConfigDict(extra="ignore")

    choices: list[StreamChoice] = []

    def deltas(self) -> list[str]:
        """按 choice 顺序返回所有非空文本增量。"""
        return [
            choice.delta.content
            for choice in self.choices
            if choice.delta is not None and choice.delta.content
        ]


def parse_chunk(payload: str) -> StreamChunk:
    """解析 data: 之后的 JSON 负载。

    Args:
        payload: 去掉前缀后的 JSON 文本

    Returns:
        StreamChunk 对象

    Raises:
        StreamDecodeError: JSON 非法或结构不符
    """
    try:
        return StreamChunk.model_validate_json(payload)
    except ValidationError as e:
        raise StreamDecodeError(payload, str(e)) from e


async def iter_lines(chunks: AsyncIterable[str]) -> AsyncIterator[str]:
    """按 \\n 把文本块切分为行，未结束的尾部留到下一块拼接。

    只认 \\n：JSON 字符串里可以直接出现 U+2028 / U+2029 / U+0085，
    str.splitlines 式的切分会把一个 data 行截断。
    行尾的 \\r 由 iter_deltas 去除。

    Args:
        chunks: 异步文本块迭代器（通常为 httpx.Response.aiter_text()）

    Yields:
        不含 \\n 的行；流结束时若有剩余内容也作为最后一行产出
    """
    pending = ""
    async for chunk in chunks:
        pending += chunk
        *lines, pending = pending.split("\n")
        for line in lines:
            yield line
    if pending:
        yield pending


async def iter_deltas(lines: AsyncIterable[str]) -> AsyncIterator[str]:
    """把响应行序列解码为文本增量序列。

    惰性、单次遍历：每产出一个增量后，直到调用方请求下一个才继续读取。

    Args:
        lines: 异步行迭代器（通常为 iter_lines(response.aiter_text())）

    Yields:
        非空文本增量

    Raises:
        StreamDecodeError: 某个 data 行无法解析
    """
    count = 0
    async for raw in lines:
        line = raw.strip()
        if not line:
            continue
        if line == DONE_LINE:
            logger.debug(f"Stream finished with [DONE] after {count} fragments")
            return
        if not line.startswith(DATA_PREFIX):
            continue

        chunk = parse_chunk(line[len(DATA_PREFIX):])
        for text in chunk.deltas():
            count += 1
            yield text

    logger.debug(f"Stream closed by server after {count} fragments")
