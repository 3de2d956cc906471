"""Tests for services/identicon_service: configuration and the full pipeline."""

import numpy as np
import pytest

from identicon.models.mode_model import GitHub, IdenticonJS, IdenticonJSOptions
from identicon.services.color_service import SourceTooShortError
from identicon.services.identicon_service import DEFAULT_SIZE, Identicon
from identicon.services.pattern_service import CELL_COUNT


def test_defaults(zero_identicon):
    assert zero_identicon.size == DEFAULT_SIZE == 420
    assert zero_identicon.mode == GitHub()


def test_with_mode_returns_new_instance(zero_identicon):
    js = zero_identicon.with_mode(IdenticonJS())
    assert js.mode == IdenticonJS()
    assert zero_identicon.mode == GitHub()
    assert js.source == zero_identicon.source


def test_with_size(zero_identicon):
    assert zero_identicon.with_size(64).image().size == (64, 64)
    with pytest.raises(ValueError):
        zero_identicon.with_size(0)


def test_rejects_non_positive_size():
    with pytest.raises(ValueError):
        Identicon(bytes(16), size=-1)


def test_source_is_copied():
    raw = bytearray(16)
    identicon = Identicon(raw)
    raw[12:16] = b"\x0f\xff\xff\xff"
    assert identicon.source == bytes(16)
    assert identicon.foreground() == (233, 150, 150)


def test_github_golden_vector(zero_identicon):
    rendered = zero_identicon.render()
    assert rendered.foreground == (233, 150, 150)
    assert rendered.foreground_hex == "#E99696"
    assert rendered.pixels == (True,) * CELL_COUNT
    assert rendered.source_hex == "00" * 16
    assert (rendered.width, rendered.height) == (420, 420)
    assert rendered.pil_image.getpixel((35, 35)) == (233, 150, 150)
    assert rendered.pil_image.getpixel((10, 10)) == (240, 240, 240)


def test_image_is_deterministic(sample_sources):
    for source in sample_sources:
        for mode in (GitHub(), IdenticonJS(IdenticonJSOptions(0.4, 0.6))):
            first = Identicon(source, mode=mode).image()
            second = Identicon(source, mode=mode).image()
            assert first.tobytes() == second.tobytes()


def test_image_is_mirror_symmetric(sample_sources):
    for source in sample_sources:
        arr = np.asarray(Identicon(source).image())
        # at the default 420px the 35px margin surrounds the sprite on every side
        assert (arr == arr[:, ::-1]).all()


def test_identicon_js_tail_only(counting_source):
    long = bytes(range(200, 232)) + counting_source[-4:]
    a = Identicon(counting_source).with_mode(IdenticonJS())
    b = Identicon(long).with_mode(IdenticonJS())
    assert a.foreground() == b.foreground()


def test_identicon_js_accepts_short_source():
    image = Identicon(b"\x00\x00\x00\x00", mode=IdenticonJS()).image()
    assert image.size == (420, 420)


def test_short_source_fails_hard():
    identicon = Identicon(bytes(15))
    with pytest.raises(SourceTooShortError):
        identicon.image()
    with pytest.raises(SourceTooShortError):
        Identicon(b"\x01\x02\x03", mode=IdenticonJS()).render()


def test_pixels_do_not_depend_on_mode(counting_source):
    identicon = Identicon(counting_source)
    assert identicon.pixels() == identicon.with_mode(IdenticonJS()).pixels()
