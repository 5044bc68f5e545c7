"""Tests for the logging system."""

import logging
import pytest
from sci_calc import add, neg, frac, literal, PI
from sci_calc.logging_system import LogLevel, configure_logging, get_logger, set_log_level


@pytest.fixture
def verbose_logging():
    logger = configure_logging(LogLevel.VERBOSE)
    yield logger
    configure_logging(LogLevel.MODERATE)


class TestLogging:
    """Level filtering and simplifier traces."""

    def test_simplifier_trace(self, verbose_logging, caplog):
        """Cancellations and folds are logged in verbose mode."""
        with caplog.at_level(logging.DEBUG, logger='sci_calc'):
            add(PI, 1, 2, neg(PI)).simplify()
        messages = [record.getMessage() for record in caplog.records]
        assert any("Cancelled 1 pair(s) of constant operands" in m for m in messages)
        assert any("Folded 2 literals into a 2-bit literal" in m for m in messages)

    def test_non_finite_evaluation_logged(self, verbose_logging, caplog):
        """Infinite results are reported."""
        with caplog.at_level(logging.DEBUG, logger='sci_calc'):
            frac(1, 0).evaluate()
        assert any("produced inf" in record.getMessage() for record in caplog.records)

    def test_quiet_by_default(self, caplog):
        """Debug traces are suppressed at the default level."""
        configure_logging(LogLevel.MODERATE)
        with caplog.at_level(logging.DEBUG, logger='sci_calc'):
            add(PI, neg(PI)).simplify()
        assert not caplog.records

    def test_set_log_level(self):
        """The global level can be changed in place."""
        logger = get_logger()
        set_log_level(LogLevel.SILENT)
        try:
            assert get_logger() is logger
            assert not logger.is_enabled(LogLevel.MINIMAL)
        finally:
            set_log_level(LogLevel.MODERATE)
        assert logger.is_enabled(LogLevel.MODERATE)

    def test_summaries_at_detailed_level(self, caplog):
        """Per-sum summaries appear from the detailed level, traces do not."""
        configure_logging(LogLevel.DETAILED)
        try:
            with caplog.at_level(logging.DEBUG, logger='sci_calc'):
                add(PI, 1, neg(PI)).simplify()
        finally:
            configure_logging(LogLevel.MODERATE)
        messages = [record.getMessage() for record in caplog.records]
        assert "Simplified a sum of 3 operands to 1" in messages
        assert not any("Cancelled" in m for m in messages)

    def test_huge_literals_in_verbose_mode(self, verbose_logging, caplog):
        """Traces never render literal digits, so huge literals are logged safely."""
        big = 10 ** 5000
        with caplog.at_level(logging.DEBUG, logger='sci_calc'):
            assert add(big, PI, neg(big)).simplify() == PI
            assert add(big, 1).simplify() == literal(big + 1)
            assert literal(big).evaluate() == float('inf')
        messages = [record.getMessage() for record in caplog.records]
        assert any("produced inf" in m for m in messages)
        assert any("Folded 2 literals into a 16610-bit literal" in m for m in messages)
