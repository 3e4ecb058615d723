"""Tests for logger configuration."""
import logging

from tinybasic.log import LOG_LEVEL_ENV, get_logger
from tinybasic.tests.utils import translate_text


def test_logger_handler_added_once():
    first = get_logger("tinybasic.test.once")
    second = get_logger("tinybasic.test.once")
    assert first is second
    assert len(first.handlers) == 1


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert get_logger("tinybasic.test.debug").level == logging.DEBUG


def test_unknown_level_falls_back_to_warning(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    assert get_logger("tinybasic.test.chatty").level == logging.WARNING


def test_translation_logs_declarations(caplog):
    caplog.set_level(logging.DEBUG, logger="tinybasic.parser.parser")
    translate_text("LET Q = 1\n")
    assert "declared Q" in caplog.text
