import json

import pytest

from si.providers.errors import StreamDecodeError
from si.providers.sse import StreamChunk, iter_deltas, iter_lines, parse_chunk

from tests.conftest import sse_line

# LINE SEPARATOR, PARAGRAPH SEPARATOR, NEXT LINE: legal raw inside JSON strings
UNICODE_LINE_BREAKS = [chr(0x2028), chr(0x2029), chr(0x85)]


async def alines(*lines):
    for line in lines:
        yield line


async def collect(*lines):
    return [text async for text in iter_deltas(alines(*lines))]


async def split_lines(*chunks):
    return [line async for line in iter_lines(alines(*chunks))]


@pytest.mark.asyncio
async def test_emits_deltas_in_order():
    out = await collect(sse_line("Hello"), sse_line(" world"), sse_line("!"), "data: [DONE]")
    assert out == ["Hello", " world", "!"]


@pytest.mark.asyncio
async def test_done_stops_reading():
    out = await collect(sse_line("a"), "data: [DONE]", sse_line("b"), "data: {not json")
    assert out == ["a"]


@pytest.mark.asyncio
async def test_end_of_stream_without_done():
    assert await collect(sse_line("a"), sse_line("b")) == ["a", "b"]


@pytest.mark.asyncio
async def test_crlf_and_blank_and_non_data_lines():
    out = await collect(
        "",
        ": keep-alive",
        "event: message",
        "  " + sse_line("x").strip() + "\r",
        "\r",
        "data:[DONE]",  # no space after the colon: not a data line
        "data: [DONE]\r",
    )
    assert out == ["x"]


@pytest.mark.asyncio
async def test_role_only_and_finish_only_chunks_are_silent():
    out = await collect(
        'data: {"choices":[{"index":0,"delta":{"role":"assistant"},"finish_reason":null}]}',
        sse_line("hi"),
        'data: {"choices":[{"index":0,"delta":{},"finish_reason":"stop"}]}',
        'data: {"choices":[{"index":0,"delta":null,"finish_reason":"stop"}]}',
        'data: {"choices":[],"prompt_filter_results":[]}',
        'data: {"choices":[{"index":0,"delta":{"content":""}}]}',
    )
    assert out == ["hi"]


@pytest.mark.asyncio
async def test_multiple_choices_emitted_in_array_order():
    assert await collect(sse_line("first", "", "third")) == ["first", "third"]


@pytest.mark.asyncio
async def test_malformed_json_aborts_after_earlier_fragments():
    out = []
    with pytest.raises(StreamDecodeError):
        async for text in iter_deltas(alines(sse_line("ok"), "data: {broken", sse_line("never"))):
            out.append(text)
    assert out == ["ok"]


@pytest.mark.parametrize("payload", ["{broken", "[1, 2]", '{"choices": "nope"}', ""])
def test_parse_chunk_rejects(payload):
    with pytest.raises(StreamDecodeError) as exc:
        parse_chunk(payload)
    assert exc.value.payload == payload


def test_parse_chunk_ignores_unknown_fields():
    chunk = parse_chunk('{"id":"x","usage":null,"choices":[{"index":0,"delta":{"content":"a","refusal":null},"logprobs":null}]}')
    assert isinstance(chunk, StreamChunk)
    assert chunk.deltas() == ["a"]


@pytest.mark.asyncio
async def test_iter_lines_joins_across_chunks():
    assert await split_lines('data: {"cho', 'ices":[]}\n\nda', "ta: [DONE]\n") == [
        'data: {"choices":[]}',
        "",
        "data: [DONE]",
    ]


@pytest.mark.asyncio
async def test_iter_lines_keeps_unterminated_tail():
    assert await split_lines("a\r\nb") == ["a\r", "b"]
    assert await split_lines() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("sep", UNICODE_LINE_BREAKS)
async def test_only_newline_breaks_lines(sep):
    chunk = {"choices": [{"index": 0, "delta": {"content": f"a{sep}b"}}]}
    body = f"data: {json.dumps(chunk, ensure_ascii=False)}\n\ndata: [DONE]\n\n"
    assert sep in body

    assert await split_lines(body) == [body.split("\n")[0], "", "data: [DONE]", ""]
    lines = iter_lines(alines(body))
    assert [text async for text in iter_deltas(lines)] == [f"a{sep}b"]
