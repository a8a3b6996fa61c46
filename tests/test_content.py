from __future__ import annotations

import json

import pytest

from chatwire.content import Content, encode_content, surrogate_pair


def test_empty_input_encodes_to_empty_string() -> None:
    assert encode_content("") == ""


def test_mixed_segments_are_adjacent() -> None:
    assert encode_content("A\U0001F600B") == "A\\ud83d\\ude00B"


def test_only_supplementary_characters() -> None:
    assert encode_content("\U0001F600\U0001F603") == "\\ud83d\\ude00\\ud83d\\ude03"


def test_emoji_uses_lowercase_surrogates_not_long_escape() -> None:
    encoded = encode_content("\U0001F600")
    assert "\\ud83d\\ude00" in encoded
    assert "\\U" not in encoded


@pytest.mark.parametrize(
    "text",
    [
        "hi",
        "Say hello in one sentence.",
        "quotes \" and \\ backslash",
        "tab\tnewline\ncarriage\r",
        "\x00\x1f control",
        "café 中文 ©",
    ],
)
def test_bmp_text_matches_standard_ascii_quoting(text: str) -> None:
    assert encode_content(text) == json.dumps(text, ensure_ascii=True)[1:-1]


@pytest.mark.parametrize("code_point", [0x10000, 0x1F600, 0x1F9D1, 0x20000, 0xE0001, 0x10FFFF])
def test_supplementary_code_points_round_trip(code_point: int) -> None:
    text = chr(code_point)
    encoded = encode_content(text)
    assert encoded.isascii()
    assert json.loads(f'"{encoded}"') == text


def test_mixed_text_round_trips() -> None:
    text = "Hello \U0001F600! café \U0001F468‍\U0001F469 \"done\"\n"
    assert json.loads(f'"{encode_content(text)}"') == text


def test_lone_surrogate_does_not_raise() -> None:
    assert encode_content("a\ud800b") == "a\\ud800b"


def test_surrogate_pair_bounds() -> None:
    assert surrogate_pair(0x10000) == (0xD800, 0xDC00)
    assert surrogate_pair(0x1F600) == (0xD83D, 0xDE00)
    assert surrogate_pair(0x10FFFF) == (0xDBFF, 0xDFFF)


def test_surrogate_pair_rejects_bmp() -> None:
    with pytest.raises(ValueError):
        surrogate_pair(0xFFFF)


def test_content_to_json_adds_quotes() -> None:
    content = Content("A\U0001F600")
    assert content.to_json() == '"A\\ud83d\\ude00"'
    assert content == "A\U0001F600"
