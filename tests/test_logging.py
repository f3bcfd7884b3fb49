import logging

from menu_api.config import Settings
from menu_api.main import create_app
from menu_api.observability.logging import configure_logging


def test_configure_logging_reapplies_level_on_each_call() -> None:
    configure_logging("DEBUG")
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("uvicorn.access").level == logging.DEBUG

    configure_logging("WARNING")
    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("uvicorn").level == logging.WARNING
    assert len(logging.getLogger("uvicorn").handlers) == 1


def test_each_app_applies_its_own_log_level() -> None:
    create_app(Settings(log_level="ERROR"))
    assert logging.getLogger().level == logging.ERROR

    create_app(Settings(log_level="info"))
    assert logging.getLogger().level == logging.INFO
