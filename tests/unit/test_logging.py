#!/usr/bin/env python3
"""
Unit tests for eikonal_fmm/utils/fmm_logging

Tests logging infrastructure including:
- Logger caching and naming
- File logging configuration
- LoggedOperation timing and failure reporting
- Run start/completion helpers
"""

import logging

import pytest

from eikonal_fmm.utils.fmm_logging import (
    FMMFormatter,
    LoggedOperation,
    configure_logging,
    get_logger,
    log_marching_completion,
    log_marching_start,
)


@pytest.fixture
def log_file(tmp_path):
    """Route logging to a temporary file, restoring defaults afterwards."""
    path = tmp_path / "logs" / "run.log"
    configure_logging(level="DEBUG", log_to_file=True, log_file_path=path, use_colors=False)
    yield path
    configure_logging()


@pytest.mark.unit
def test_get_logger_is_cached():
    """Test the same logger object is returned for the same name."""
    assert get_logger("eikonal_fmm.test_cache") is get_logger("eikonal_fmm.test_cache")


@pytest.mark.unit
def test_get_logger_defaults_to_caller_module():
    """Test get_logger() without a name uses the calling module."""
    assert get_logger().name == __name__


@pytest.mark.unit
def test_formatter_without_colors():
    """Test plain formatting includes level and message."""
    formatter = FMMFormatter(use_colors=False, include_location=True)
    record = logging.LogRecord("eikonal_fmm", logging.WARNING, "engine.py", 12, "front stalled", None, None)

    output = formatter.format(record)
    assert "WARNING" in output
    assert "front stalled" in output
    assert "engine.py:12" in output


@pytest.mark.unit
def test_file_logging(log_file):
    """Test messages reach the configured log file."""
    logger = get_logger("eikonal_fmm.test_file")
    logger.debug("debug message")
    logger.info("info message")

    content = log_file.read_text()
    assert "debug message" in content
    assert "info message" in content
    assert "\x1b[" not in content


@pytest.mark.unit
def test_marching_log_helpers(log_file):
    """Test run start and completion helpers write a summary."""
    logger = get_logger("eikonal_fmm.test_helpers")
    log_marching_start(logger, "FastMarching", {"margin": 1})
    log_marching_completion(logger, "FastMarching", 24, 3, 0.01, stopped_early=True)

    content = log_file.read_text()
    assert "Starting FastMarching" in content
    assert "'margin': 1" in content
    assert "STOPPED_EARLY" in content
    assert "24 cells frozen, 3 stale entries" in content


@pytest.mark.unit
def test_logged_operation_records_duration(log_file):
    """Test LoggedOperation times the block."""
    logger = get_logger("eikonal_fmm.test_operation")
    with LoggedOperation(logger, "warmup") as op:
        pass

    assert op.duration is not None
    assert op.duration >= 0.0
    assert "Completed warmup" in log_file.read_text()


@pytest.mark.unit
def test_logged_operation_propagates_errors(log_file):
    """Test exceptions are logged and re-raised."""
    logger = get_logger("eikonal_fmm.test_failure")
    with pytest.raises(RuntimeError), LoggedOperation(logger, "failing step"):
        raise RuntimeError("broken")

    assert "Failed failing step" in log_file.read_text()
