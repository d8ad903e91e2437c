"""请求构建模块。

组装 chat-completion 请求体：固定的 system 指令 + 用户问题，
stream 恒为 true（ask 也复用流式路径）。
"""

from typing import Literal

from pydantic import BaseModel

from si.providers.errors import EncodingError

DEFAULT_MODEL = "gpt-4"

SYSTEM_PROMPT = (
    "You are an AI assistant being used from a terminal. "
    "Provide concise, direct responses optimized for command-line viewing. "
    "Prioritize brevity and clarity. Use markdown formatting when helpful for readability. "
    "Avoid unnecessary pleasantries or verbose explanations unless specifically requested."
)


class Message(BaseModel):
    """单条聊天消息。"""
    role: Literal["system", "user"]
    content: str


class ChatRequest(BaseModel):
    """chat-completion 请求体。

    Attributes:
        model: 模型名称（Azure 下由部署决定，但仍需发送）
        messages: 有序消息列表
        stream: 是否流式返回，恒为 True
    """
    model: str
    messages: list[Message]
    stream: bool = True


def build_request(question: str, model_name: str = "") -> ChatRequest:
    """构建请求：system 指令在前，用户问题原样在后。

    Args:
        question: 用户问题
        model_name: 模型名称，为空时使用 gpt-4

    Returns:
        新的 ChatRequest
    """
    return ChatRequest(
        model=model_name or DEFAULT_MODEL,
        messages=[
            Message(role="system", content=SYSTEM_PROMPT),
            Message(role="user", content=question),
        ],
        stream=True,
    )


def encode_request(request: ChatRequest) -> bytes:
    """序列化为 JSON 字节串。

    Raises:
        EncodingError: 内容无法编码（如孤立的代理字符）
    """
    try:
        return request.model_dump_json().encode("utf-8")
    except ValueError as e:
        # PydanticSerializationError 和 UnicodeEncodeError 都是 ValueError
        raise EncodingError(f"failed to marshal request: {e}") from e
