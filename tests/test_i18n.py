"""Tests for locale resolution"""
import pytest

from signup_api.core.i18n import SUPPORTED_LANGUAGES, Translator, load_messages, resolve_language


@pytest.mark.parametrize("header,expected", [
    (None, "en"),
    ("", "en"),
    ("kr", "kr"),
    ("KR", "kr"),
    ("en", "en"),
    ("en-US", "en"),
    ("ko", "kr"),
    ("ko-KR,ko;q=0.9,en;q=0.8", "kr"),
    ("en;q=0.5,kr;q=0.9", "kr"),
    ("fr", "en"),
    ("fr,kr;q=0.3", "kr"),
    ("*", "en"),
])
def test_resolve_language(header, expected):
    assert resolve_language(header) == expected


def test_every_language_defines_the_same_keys():
    keys = set(load_messages("en"))
    for language in SUPPORTED_LANGUAGES:
        assert set(load_messages(language)) == keys


def test_translator_returns_localized_message():
    assert Translator("kr")("user_create_success") == "사용자가 생성 되었습니다."


def test_translator_returns_key_for_unknown_message():
    assert Translator("en")("no_such_key") == "no_such_key"
