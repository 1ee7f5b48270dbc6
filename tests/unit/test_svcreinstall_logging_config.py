"""Unit tests for svcreinstall.logging_config."""

import logging

from svcreinstall.logging_config import get_logger, setup_logging


def test_get_logger_namespaced():
    assert get_logger("reinstall").name == "svcreinstall.reinstall"


def test_setup_logging_writes_file(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    log_file = tmp_path / "logs" / "svcreinstall.log"

    setup_logging(level=logging.INFO, log_file=log_file)
    get_logger("test").info("hello")
    for handler in root.handlers:
        handler.flush()

    assert "svcreinstall.test - INFO - hello" in log_file.read_text()
    for handler in root.handlers:
        handler.close()
