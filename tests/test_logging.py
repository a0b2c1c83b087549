"""Tests for setup_logging."""

from __future__ import annotations

import logging

from product_catalog_api.app.core.logging_config import setup_logging


def _bare_root(monkeypatch) -> logging.Logger:
    """Empty the root logger's handlers for the rest of the test.

    Done inside the test body: pytest attaches its capture handlers at
    the start of every test phase.
    """
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    return root


def _close(root: logging.Logger) -> None:
    for handler in root.handlers:
        handler.close()


class TestSetupLogging:

    def test_console_only_by_default(self, monkeypatch):
        root = _bare_root(monkeypatch)
        setup_logging("debug")
        assert root.level == logging.DEBUG
        assert [type(h) for h in root.handlers] == [logging.StreamHandler]

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        root = _bare_root(monkeypatch)
        setup_logging("chatty")
        assert root.level == logging.INFO

    def test_log_file_directories_are_created(self, monkeypatch, tmp_path):
        root = _bare_root(monkeypatch)
        logfile = tmp_path / "logs" / "catalog.log"
        setup_logging("INFO", str(logfile))
        logging.getLogger("product_catalog_api.test").info("Created product 1 (X)")
        _close(root)
        assert "Created product 1 (X)" in logfile.read_text(encoding="utf-8")

    def test_second_call_is_a_no_op(self, monkeypatch):
        root = _bare_root(monkeypatch)
        setup_logging("INFO")
        setup_logging("INFO")
        assert len(root.handlers) == 1
