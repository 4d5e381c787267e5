import logging

from otpgate.utils.logger import setup_logger


def test_setup_logger_writes_under_logs_dir(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    logger = setup_logger(name="otpgate.logger_test", log_file="test.log", level=logging.DEBUG)
    try:
        assert logger.name == "otpgate.logger_test"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

        logger.info("OTP stored")
        for handler in logger.handlers:
            handler.flush()
        assert "OTP stored" in (tmp_path / "logs" / "test.log").read_text()

        # Second setup keeps the existing handlers
        assert setup_logger(name="otpgate.logger_test", log_file="test.log") is logger
        assert len(logger.handlers) == 2
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


def test_default_logger_is_package_logger(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    logger = setup_logger(log_file="default.log")
    try:
        assert logger is logging.getLogger("otpgate")
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
