import logging

import pytest

from pitch_planner_api.app.core.logging_config import APP_LOGGER, setup_logging


@pytest.fixture
def bare_root(monkeypatch):
    root = logging.getLogger()
    app_logger = logging.getLogger(APP_LOGGER)
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setattr(app_logger, "level", app_logger.level)
    yield root
    for handler in root.handlers:
        handler.close()


def test_debug_level_applies_to_application_loggers_only(bare_root, tmp_path):
    logfile = tmp_path / "logs" / "api.log"

    setup_logging("debug", str(logfile))
    logging.getLogger("pitch_planner_api.app.api.endpoints.teams").debug("REST request to get Team : %s", 7)
    for handler in bare_root.handlers:
        handler.flush()

    assert logging.getLogger(APP_LOGGER).level == logging.DEBUG
    assert bare_root.level == logging.INFO
    assert len(bare_root.handlers) == 2
    assert "[DEBUG] pitch_planner_api.app.api.endpoints.teams: REST request to get Team : 7" in logfile.read_text(
        encoding="utf-8"
    )


def test_second_call_keeps_existing_handlers(bare_root):
    setup_logging("INFO")
    setup_logging("WARNING")

    assert len(bare_root.handlers) == 1
    assert logging.getLogger(APP_LOGGER).level == logging.WARNING
