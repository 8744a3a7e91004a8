import json

import pytest

from chat.normalizer import (
    ParsedReply,
    UnstructuredReply,
    normalize_reply,
    parse_model_reply,
    strip_code_fence,
)


def test_fenced_json_is_parsed():
    raw = '```json\n{"responseText":"hi","detectedEmotion":"neutral"}\n```'
    result = normalize_reply(raw)

    assert result.reply_text == "hi"
    assert result.emotion == "neutral"


def test_plain_text_falls_back_without_raising():
    result = normalize_reply("I'm not sure what you mean")

    assert result.reply_text == "I'm not sure what you mean"
    assert result.emotion == "neutral"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('{"a": 1}', '{"a": 1}'),
        ('  ```json\n{"a": 1}\n```  ', '{"a": 1}'),
        ('```\n{"a": 1}\n```', '{"a": 1}'),
        ('```JSON {"a": 1}```', '{"a": 1}'),
    ],
)
def test_strip_code_fence(raw, expected):
    assert strip_code_fence(raw) == expected


def test_sad_label_passes_through():
    reply = parse_model_reply(json.dumps({"responseText": "That sounds hard.", "detectedEmotion": "sad"}))
    assert reply == ParsedReply(reply_text="That sounds hard.", emotion="sad")


@pytest.mark.parametrize("label", ["happy", "angry", "", None, 3, "sad_or_neutral"])
def test_unknown_emotion_is_coerced_to_neutral(label):
    reply = parse_model_reply(json.dumps({"responseText": "ok", "detectedEmotion": label}))
    assert reply == ParsedReply(reply_text="ok", emotion="neutral")


def test_emotion_label_is_case_insensitive():
    reply = parse_model_reply('{"responseText": "ok", "detectedEmotion": " Sad "}')
    assert reply.emotion == "sad"


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "[1, 2, 3]",
        '"just a string"',
        '{"detectedEmotion": "sad"}',
        '{"responseText": 42, "detectedEmotion": "sad"}',
        '{"responseText": "cut off',
    ],
)
def test_unusable_output_keeps_raw_text(raw):
    reply = parse_model_reply(raw)

    assert reply == UnstructuredReply(raw_text=raw)
    assert normalize_reply(raw).reply_text == raw


def test_fallback_keeps_unstripped_text():
    raw = "```\nnot json at all\n```"
    assert normalize_reply(raw).reply_text == raw


def test_parse_failure_is_logged(caplog):
    with caplog.at_level("WARNING", logger="chat.normalizer"):
        parse_model_reply("nope")
    assert "nope" in caplog.text
