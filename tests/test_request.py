import json

from si.providers.request import SYSTEM_PROMPT, build_request, encode_request


def test_build_request_messages():
    req = build_request("what is 2+2", "gpt-4o")
    assert req.model == "gpt-4o"
    assert req.stream is True
    assert [(m.role, m.content) for m in req.messages] == [
        ("system", SYSTEM_PROMPT),
        ("user", "what is 2+2"),
    ]


def test_empty_model_defaults_to_gpt4():
    assert build_request("hi").model == "gpt-4"
    assert build_request("hi", "").model == "gpt-4"


def test_encode_request_wire_shape():
    body = json.loads(encode_request(build_request("héllo\n`code`")))
    assert body == {
        "model": "gpt-4",
        "stream": True,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": "héllo\n`code`"},
        ],
    }
