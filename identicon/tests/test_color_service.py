"""Tests for services/color_service: affine map, GitHub and Identicon.js colors."""

import pytest

from identicon.models.mode_model import GitHub, IdenticonJS, IdenticonJSOptions
from identicon.services.color_service import (
    GITHUB_MIN_SOURCE,
    IDENTICON_JS_MIN_SOURCE,
    ColorService,
    SourceTooShortError,
    map_range,
)

service = ColorService()


def _github_source(b12=0, b13=0, b14=0, b15=0) -> bytes:
    return bytes(12) + bytes([b12, b13, b14, b15])


class TestMapRange:
    def test_bounds(self):
        assert map_range(0, 0, 100, 20, 120) == 20.0
        assert map_range(100, 0, 100, 20, 120) == 120.0

    def test_midpoint(self):
        assert map_range(50, 0, 100, 20, 120) == 70.0

    def test_monotonic(self):
        values = [map_range(v, 0, 255, 0, 20) for v in range(256)]
        assert values == sorted(values)
        assert values[0] == 0.0
        assert values[-1] == pytest.approx(20.0)

    def test_linear(self):
        step = map_range(1, 0, 4095, 0, 360)
        assert map_range(2048, 0, 4095, 0, 360) == pytest.approx(2048 * step, rel=1e-5)

    def test_returns_float(self):
        assert isinstance(map_range(3, 0, 10, 0, 1), float)


class TestGitHub:
    def test_zero_source_golden(self, zero_source):
        assert service.foreground(zero_source, GitHub()) == (233, 150, 150)

    def test_zero_source_hsl(self, zero_source):
        hsl = service.hsl(zero_source, GitHub())
        assert hsl.hue == 0.0
        assert hsl.saturation == 65.0
        assert hsl.luminance == 75.0

    def test_max_control_bytes(self):
        hsl = service.hsl(_github_source(b14=0xFF, b15=0xFF), GitHub())
        assert hsl.saturation == pytest.approx(45.0)
        assert hsl.luminance == pytest.approx(55.0)
        assert service.foreground(_github_source(b14=0xFF, b15=0xFF), GitHub()) == (192, 89, 89)

    def test_hue_uses_low_nibble_of_byte_12(self):
        # the high nibble of byte 12 is ignored
        assert service.hsl(_github_source(b12=0xF3, b13=0x21), GitHub()) == service.hsl(
            _github_source(b12=0x03, b13=0x21), GitHub()
        )
        assert service.hsl(_github_source(b12=0x0F, b13=0xFF), GitHub()).hue == pytest.approx(360.0, abs=1e-3)

    def test_only_bytes_12_to_15_matter(self):
        a = bytes(range(100, 112)) + bytes([1, 2, 3, 4])
        b = bytes(12) + bytes([1, 2, 3, 4])
        assert service.foreground(a, GitHub()) == service.foreground(b, GitHub())

    def test_ranges_are_muted(self, sample_sources):
        for source in sample_sources:
            hsl = service.hsl(source, GitHub())
            assert 0.0 <= hsl.hue <= 360.0
            assert 45.0 <= hsl.saturation <= 65.0
            assert 55.0 <= hsl.luminance <= 75.0

    def test_longer_source_reads_fixed_positions(self):
        source = _github_source(b13=0x80) + b"\xff" * 16
        assert service.hsl(source, GitHub()) == service.hsl(_github_source(b13=0x80), GitHub())

    def test_short_source_raises(self):
        with pytest.raises(SourceTooShortError) as exc_info:
            service.foreground(bytes(GITHUB_MIN_SOURCE - 1), GitHub())
        assert exc_info.value.required == 16
        assert exc_info.value.actual == 15
        assert isinstance(exc_info.value, ValueError)


class TestIdenticonJS:
    def test_zero_tail_default_options(self):
        assert service.foreground(bytes(16), IdenticonJS()) == (217, 38, 38)

    def test_saturation_and_luminance_come_from_options(self):
        hsl = service.hsl(bytes(4), IdenticonJS(IdenticonJSOptions(saturation=0.25, brightness=0.75)))
        assert hsl.saturation == pytest.approx(25.0)
        assert hsl.luminance == pytest.approx(75.0)

    def test_black_and_white(self):
        source = b"\x12\x34\x56\x78"
        assert service.foreground(source, IdenticonJS(IdenticonJSOptions(0.7, 0.0))) == (0, 0, 0)
        assert service.foreground(source, IdenticonJS(IdenticonJSOptions(0.7, 1.0))) == (255, 255, 255)

    def test_hue_from_last_28_bits(self):
        hsl = service.hsl(b"\xff\xff\xff\xff", IdenticonJS())
        assert hsl.hue == pytest.approx(360.0, abs=1e-3)
        # high nibble of the 4th-from-last byte is ignored
        assert service.hsl(b"\xf1\x00\x00\x00", IdenticonJS()) == service.hsl(b"\x01\x00\x00\x00", IdenticonJS())

    def test_tail_only_dependence(self):
        tail = b"\x3a\x9f\x01\xc4"
        short = tail
        long = bytes(range(60)) + tail
        other = b"\xee" * 28 + tail
        colors = {service.foreground(s, IdenticonJS()) for s in (short, long, other)}
        assert len(colors) == 1

    def test_minimum_length(self):
        service.foreground(bytes(IDENTICON_JS_MIN_SOURCE), IdenticonJS())
        with pytest.raises(SourceTooShortError):
            service.foreground(bytes(IDENTICON_JS_MIN_SOURCE - 1), IdenticonJS())

    def test_out_of_range_options_do_not_fail(self):
        r, g, b = service.foreground(b"\x00\x10\x20\x30", IdenticonJS(IdenticonJSOptions(2.0, 1.5)))
        assert all(0 <= c <= 255 for c in (r, g, b))


def test_unknown_mode_is_rejected():
    with pytest.raises(TypeError):
        service.foreground(bytes(16), "github")  # type: ignore[arg-type]
