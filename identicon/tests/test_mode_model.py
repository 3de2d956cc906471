"""Tests for models/mode_model: mode values and lookup by name."""

import pytest

from identicon.models.mode_model import GitHub, IdenticonJS, IdenticonJSOptions, mode_from_name


def test_identicon_js_defaults():
    options = IdenticonJSOptions()
    assert options.saturation == 0.7
    assert options.brightness == 0.5
    assert IdenticonJS().options == options


def test_modes_compare_by_value():
    assert GitHub() == GitHub()
    assert IdenticonJS(IdenticonJSOptions(0.1, 0.2)) == IdenticonJS(IdenticonJSOptions(0.1, 0.2))
    assert IdenticonJS() != GitHub()


@pytest.mark.parametrize("name", ["github", "GitHub", " github "])
def test_mode_from_name_github(name):
    assert mode_from_name(name) == GitHub()


@pytest.mark.parametrize("name", ["identiconjs", "Identicon.js", "identicon-js", "identicon_js"])
def test_mode_from_name_identicon_js(name):
    assert mode_from_name(name, saturation=0.3, brightness=0.9) == IdenticonJS(IdenticonJSOptions(0.3, 0.9))


def test_mode_from_name_unknown():
    with pytest.raises(ValueError, match="gravatar"):
        mode_from_name("gravatar")
