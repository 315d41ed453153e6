"""Tests for setup_logging."""

import logging

import pytest

from kasir_api.app.core.logging_config import (
    LOG_FORMAT,
    UVICORN_LOGGERS,
    installed_handlers,
    resolve_level,
    setup_logging,
)


def _drop_installed_handlers(root: logging.Logger) -> None:
    for handler in installed_handlers(root):
        root.removeHandler(handler)
        handler.close()


@pytest.fixture
def root_logger():
    """Root logger without handlers from earlier setup_logging calls.

    Handlers added by pytest's log capture are left in place.
    """
    root = logging.getLogger()
    saved_level = root.level
    saved_uvicorn = {
        name: (logging.getLogger(name).level, logging.getLogger(name).propagate, logging.getLogger(name).handlers[:])
        for name in UVICORN_LOGGERS
    }
    _drop_installed_handlers(root)
    yield root
    _drop_installed_handlers(root)
    root.setLevel(saved_level)
    for name, (level, propagate, handlers) in saved_uvicorn.items():
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.setLevel(level)
        uvicorn_logger.propagate = propagate
        uvicorn_logger.handlers = handlers


class TestSetupLogging:
    def test_adds_console_handler_and_level(self, root_logger):
        setup_logging("debug")
        assert root_logger.level == logging.DEBUG
        handlers = installed_handlers(root_logger)
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert handlers[0].formatter._fmt == LOG_FORMAT

    def test_foreign_handlers_do_not_block_setup(self, root_logger):
        foreign = logging.NullHandler()
        root_logger.addHandler(foreign)
        try:
            setup_logging("INFO")
            assert len(installed_handlers(root_logger)) == 1
        finally:
            root_logger.removeHandler(foreign)

    def test_adds_file_handler(self, root_logger, tmp_path):
        logfile = tmp_path / "kasir.log"
        setup_logging("INFO", str(logfile))
        assert any(isinstance(h, logging.FileHandler) for h in installed_handlers(root_logger))
        logging.getLogger("kasir_api.test").info("hello")
        for handler in installed_handlers(root_logger):
            handler.flush()
        assert "hello" in logfile.read_text(encoding="utf-8")

    def test_unknown_level_falls_back_to_info(self, root_logger):
        setup_logging("LOUD")
        assert root_logger.level == logging.INFO

    def test_configures_only_once(self, root_logger):
        setup_logging("INFO")
        setup_logging("DEBUG")
        assert len(installed_handlers(root_logger)) == 1
        assert root_logger.level == logging.INFO

    def test_uvicorn_loggers_use_root_handlers(self, root_logger):
        access = logging.getLogger("uvicorn.access")
        access.addHandler(logging.NullHandler())
        access.propagate = False
        setup_logging("WARNING")
        for name in UVICORN_LOGGERS:
            uvicorn_logger = logging.getLogger(name)
            assert uvicorn_logger.handlers == []
            assert uvicorn_logger.propagate is True
            assert uvicorn_logger.level == logging.WARNING


class TestResolveLevel:
    @pytest.mark.parametrize(
        "name, expected",
        [("debug", logging.DEBUG), (" Warning ", logging.WARNING), ("ERROR", logging.ERROR), ("noise", logging.INFO)],
    )
    def test_names(self, name, expected):
        assert resolve_level(name) == expected
