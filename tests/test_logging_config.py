import logging

from bmicalculator.logging_config import PACKAGE_LOGGER, setup_logging


def test_package_logger_is_the_import_package():
    assert PACKAGE_LOGGER == "bmicalculator"


def test_setup_logging_does_not_duplicate_handlers(tmp_path):
    log_file = tmp_path / "app.log"
    setup_logging(level=logging.DEBUG)
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))

    try:
        assert logger is logging.getLogger("bmicalculator")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

        logging.getLogger("bmicalculator.app.state").debug("hello")
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized at DEBUG." in text
        assert "bmicalculator.app.state - DEBUG - hello" in text
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
