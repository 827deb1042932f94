"""
Unit tests for DialStrings and language resolution.
"""
from unittest.mock import patch

import pytest

from fancontroller.constants import i18n
from fancontroller.constants.i18n import DialStrings, resolve_language
from fancontroller.core.fan_speed import FanSpeed


def test_english_labels():
    strings = DialStrings("en_US")
    assert [strings.label(s) for s in FanSpeed] == ["Off", "1", "2", "3"]


def test_language_code_with_dash_is_normalized():
    strings = DialStrings("de-DE")
    assert strings.language == "de_DE"
    assert strings.label(FanSpeed.OFF) == "Aus"


@pytest.mark.parametrize("requested, expected", [
    ("fr_CA", "fr_FR"),
    ("pl", "pl_PL"),
    ("xx_XX", "en_US"),
    ("", "en_US"),
])
def test_resolve_language(requested, expected):
    with patch.object(i18n.locale, "getlocale", return_value=(None, None)):
        assert resolve_language(requested) == expected


def test_system_locale_is_used_when_no_language_given():
    with patch.object(i18n.locale, "getlocale", return_value=("es_ES", "UTF-8")):
        assert DialStrings().language == "es_ES"


def test_missing_key_falls_back_to_english():
    strings = DialStrings("nl_NL")
    strings._strings = {"FAN_OFF": "Uit"}
    assert strings.label(FanSpeed.HIGH) == "3"
    assert strings.label(FanSpeed.OFF) == "Uit"


def test_unknown_key_raises():
    strings = DialStrings("en_US")
    with pytest.raises(KeyError):
        strings.get("NOT_A_REAL_KEY")
    with pytest.raises(AttributeError):
        strings.NOT_A_REAL_KEY


def test_unreadable_catalog_uses_english():
    real_load = i18n.load_catalog
    with patch.object(i18n, "load_catalog", side_effect=lambda lang: {} if lang == "fr_FR" else real_load(lang)):
        strings = DialStrings("fr_FR")
    assert strings.label(FanSpeed.OFF) == "Off"


def test_missing_english_catalog_is_fatal():
    with patch.object(i18n, "load_catalog", return_value={}):
        with pytest.raises(RuntimeError):
            DialStrings("de_DE")


def test_instances_are_independent():
    german = DialStrings("de_DE")
    DialStrings("fr_FR")
    assert german.language == "de_DE"
    assert german.label(FanSpeed.OFF) == "Aus"
