import logging

import pytest

from obj_utils import ObjectTypeError, Settings, clean_object, configure_logging, is_error, unwrap


def test_unwrap():
    payload = {"a": 1}
    assert unwrap(clean_object(payload, 1)) == {}
    with pytest.raises(TypeError):
        unwrap(clean_object(42, 1))
    assert not is_error(payload)
    assert is_error(ObjectTypeError("x"))


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("OBJ_UTILS_DEFAULT_CLEAN_EMPTY", "true")
    monkeypatch.setenv("OBJ_UTILS_SENTENCE_ENDINGS", "!?")
    cfg = Settings()
    assert cfg.default_clean_empty is True
    assert cfg.default_recursive is True
    assert cfg.sentence_endings == "!?"


def test_returned_errors_are_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="obj_utils")
    clean_object(42, 1)
    assert "TypeError" in caplog.text


def test_configure_logging_once():
    logger = configure_logging("debug")
    assert logger.name == "obj_utils"
    assert logger.level == logging.DEBUG
    handlers = list(logger.handlers)
    assert configure_logging(logging.WARNING) is logger
    assert logger.handlers == handlers
    assert logger.level == logging.WARNING
