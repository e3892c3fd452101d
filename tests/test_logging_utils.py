"""Tests logging functions in filmstrip_layout."""
import logging

import filmstrip_layout.logging_utils as fl_logging_utils


class TestLoggingUtils:
    def test_logger_singleton_behavior(self) -> None:
        """Test that logger instances are singleton per name."""
        logger1 = fl_logging_utils.setup_logger("test_logger")
        logger2 = fl_logging_utils.setup_logger("test_logger")
        assert logger1 is logger2
        assert len(logger1.handlers) == 1

    def test_logger_custom_formatter_and_handler(self) -> None:
        """Test custom formatter and handler are applied."""
        formatter = logging.Formatter("[CUSTOM] %(message)s")
        handler = logging.StreamHandler()
        logger = fl_logging_utils.setup_logger(
            "custom_logger",
            formatter=formatter,
            handler=handler,
        )
        assert logger.name == "custom_logger"
        assert len(logger.handlers) == 1
        assert logger.handlers[0].formatter._fmt.startswith("[CUSTOM]")

    def test_shared_logger_name(self) -> None:
        assert fl_logging_utils.logger.name == "filmstrip_layout"

    def test_shared_logger_format(self) -> None:
        handler = fl_logging_utils.logger.handlers[0]
        assert handler.formatter._fmt == fl_logging_utils.DEFAULT_FORMAT

    def test_set_verbosity_toggles_package_logger(self) -> None:
        log = fl_logging_utils.logger
        assert fl_logging_utils.set_verbosity(verbose=True) == logging.DEBUG
        assert log.level == logging.DEBUG
        assert fl_logging_utils.set_verbosity(verbose=False) == logging.INFO
        assert log.level == logging.INFO

    def test_set_verbosity_leaves_root_logger_alone(self) -> None:
        root_level = logging.getLogger().level
        other = fl_logging_utils.setup_logger("verbosity_target")
        fl_logging_utils.set_verbosity(verbose=True, log=other)
        assert other.level == logging.DEBUG
        assert logging.getLogger().level == root_level
