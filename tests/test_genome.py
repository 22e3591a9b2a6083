"""
Colour codec: shorthand expansion, channel perturbation bounds, soft failure.
"""

import random
import re

import pytest

from organism.genome import BASELINE_COLOR, mutate_color, normalize_hex, parse_rgb

HEX6 = re.compile(r"^#[0-9a-f]{6}$")


def test_normalize_expands_shorthand():
    assert normalize_hex("#abc") == "aabbcc"
    assert normalize_hex("abc") == "aabbcc"
    assert normalize_hex("#88c1ff") == "88c1ff"


def test_parse_rgb_channels():
    assert parse_rgb("#88c1ff") == (0x88, 0xC1, 0xFF)
    assert parse_rgb("#fff") == (255, 255, 255)


@pytest.mark.parametrize("code", ["#zzzzzz", "", "#", "not-a-color", "#-12345", "#12_345", " 123"])
def test_unparseable_codes_come_back_unchanged(code):
    assert parse_rgb(code) is None
    assert mutate_color(code, 0.5) == code


def test_zero_magnitude_only_normalizes():
    assert mutate_color("#abc", 0.0) == "#aabbcc"
    assert mutate_color("ABCDEF", 0.0) == "#abcdef"


def test_channels_move_at_most_magnitude():
    random.seed(3)
    limit = int(0.08 * 255)
    base = parse_rgb(BASELINE_COLOR)
    for _ in range(500):
        out = mutate_color(BASELINE_COLOR, 0.08)
        assert HEX6.match(out)
        for before, after in zip(base, parse_rgb(out)):
            assert abs(after - before) <= limit


def test_channels_clamped_to_byte_range():
    random.seed(5)
    for code in ("#000000", "#ffffff", "#00ff00"):
        for _ in range(200):
            out = mutate_color(code, 1.0)
            assert HEX6.match(out)
            assert all(0 <= c <= 255 for c in parse_rgb(out))
