"""LLM 提供商抽象基类模块。

定义 LLM 提供商的统一接口，所有具体实现需继承 LLMProvider：
- ChunkCallback: 每个文本增量的回调（同步或异步）
- LLMProvider: 抽象基类，子类只需实现 stream()

设计模式：模板方法 + 策略模式
- stream(): 惰性文本增量序列（子类实现）
- ask_stream(): 基于 stream() 的回调接口
- ask(): 基于 ask_stream() 的缓冲接口，与流式路径看到完全相同的增量
"""

import inspect
from abc import ABC, abstractmethod
from contextlib import aclosing
from typing import Any, AsyncIterator, Callable

ChunkCallback = Callable[[str], Any]


class LLMProvider(ABC):
    """LLM 提供商抽象基类。

    实例不保存每次调用的可变状态，可以顺序复用；
    同一实例上的并发调用安全性取决于底层 HTTP 客户端。
    """

    @abstractmethod
    def stream(self, question: str) -> AsyncIterator[str]:
        """发送问题并以异步迭代器形式返回文本增量。

        Args:
            question: 用户问题

        Returns:
            非空文本增量的异步迭代器（单次遍历）
        """
        pass

    async def ask_stream(self, question: str, on_chunk: ChunkCallback) -> None:
        """发送问题，对每个文本增量按顺序调用 on_chunk。

        on_chunk 返回 awaitable 时会先 await 再读取下一个增量。
        on_chunk 抛出异常时立即停止解码、关闭响应，
        并将该异常原样抛给调用方。

        Args:
            question: 用户问题
            on_chunk: 增量回调
        """
        async with aclosing(self.stream(question)) as fragments:
            async for fragment in fragments:
                result = on_chunk(fragment)
                if inspect.isawaitable(result):
                    await result

    async def ask(self, question: str) -> str:
        """发送问题并返回完整回答。

        通过收集流式增量实现，不会请求非流式响应。

        Args:
            question: 用户问题

        Returns:
            所有增量按顺序拼接的结果
        """
        parts: list[str] = []
        await self.ask_stream(question, parts.append)
        return "".join(parts)
