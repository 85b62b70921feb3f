"""Unit tests for trashpanda.config."""

import logging

import pytest

from trashpanda import config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Start every test without TRASHPANDA_LOG_LEVEL set."""
    monkeypatch.delenv(config.LOG_LEVEL_ENV_VAR, raising=False)


def test_default_level_when_unset():
    """WARNING is used when the variable is unset."""
    assert config.get_log_level() == logging.WARNING


def test_default_level_when_blank(monkeypatch):
    """A blank value counts as unset."""
    monkeypatch.setenv(config.LOG_LEVEL_ENV_VAR, "  ")
    assert config.get_log_level() == logging.WARNING


@pytest.mark.parametrize(
    ("value", "expected"),
    [("debug", logging.DEBUG), ("INFO", logging.INFO), ("Error", logging.ERROR)],
)
def test_level_names_are_case_insensitive(monkeypatch, value, expected):
    """Level names parse regardless of case."""
    monkeypatch.setenv(config.LOG_LEVEL_ENV_VAR, value)
    assert config.get_log_level() == expected


def test_unknown_level_raises(monkeypatch):
    """An unknown name raises InvalidLogLevelError naming the value."""
    monkeypatch.setenv(config.LOG_LEVEL_ENV_VAR, "LOUD")
    with pytest.raises(config.InvalidLogLevelError, match="'LOUD'"):
        config.get_log_level()


@pytest.mark.parametrize(
    ("url", "absolute"),
    [
        ("http://a", True),
        ("https://a", True),
        ("HTTPS://a", True),
        ("/path", False),
        ("ftp://a", False),
        ("httpx://a", False),
    ],
)
def test_absolute_url_pattern(url, absolute):
    """Only http and https schemes count as absolute."""
    assert bool(config.ABSOLUTE_URL_PATTERN.match(url)) is absolute
