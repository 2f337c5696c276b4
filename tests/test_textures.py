"""Tests for texture fill assignment."""

import base64

import pytest

from svgpie.compute.core.types import DataItem, PatternSpec
from svgpie.render.textures import (
    DATA_URI_PREFIX,
    TextureAssigner,
    decode_pattern_href,
    encode_pattern_href,
    parse_tile,
)

STRIPES = "<path d='M0 10L10 0' stroke='black'/>"


class TestTextureAssigner:
    """Test fills with and without patterns."""

    def test_flat_color_without_patterns(self):
        texture = TextureAssigner(use_patterns=False).assign(0, DataItem("red", 1))

        assert texture.fill == "red"
        assert texture.pattern_id is None
        assert texture.pattern_href is None

    def test_index_is_fallback_pattern_id(self):
        texture = TextureAssigner(use_patterns=True).assign(3, DataItem("red", 1))

        assert texture.pattern_id == "3"
        assert texture.fill == "url(#3)"
        assert texture.pattern_href.startswith(DATA_URI_PREFIX)

    def test_caller_pattern_id_wins(self):
        item = DataItem("red", 1, pattern=PatternSpec(id="stripes", body=STRIPES))
        texture = TextureAssigner(use_patterns=True).assign(0, item)

        assert texture.pattern_id == "stripes"
        assert texture.fill == "url(#stripes)"

    def test_pattern_without_id_falls_back_to_index(self):
        item = DataItem("red", 1, pattern={"pattern": STRIPES})
        texture = TextureAssigner(use_patterns=True).assign(2, item)

        assert texture.pattern_id == "2"
        assert STRIPES in decode_pattern_href(texture.pattern_href)


class TestPatternEncoding:
    """Test the embedded tile data URI."""

    def test_tile_contains_color_rect(self):
        svg = decode_pattern_href(encode_pattern_href("#123456"))

        assert svg == (
            "<svg xmlns='http://www.w3.org/2000/svg' width='10' height='10'>"
            "<rect width='10' height='10' fill='#123456'/>"
            "</svg>"
        )

    def test_round_trip_reproduces_color_and_fragment(self):
        href = encode_pattern_href("tomato", STRIPES)

        assert parse_tile(decode_pattern_href(href)) == ("tomato", STRIPES)

    def test_encoding_is_deterministic(self):
        assert encode_pattern_href("red", STRIPES) == encode_pattern_href("red", STRIPES)

    def test_href_is_plain_base64(self):
        href = encode_pattern_href("blue")
        payload = href[len(DATA_URI_PREFIX):]

        assert base64.b64encode(base64.b64decode(payload)).decode("ascii") == payload

    def test_decode_rejects_foreign_uri(self):
        with pytest.raises(ValueError):
            decode_pattern_href("data:image/png;base64,AAAA")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
