"""
Logging utilities for eikonal_fmm.

Usage:
    >>> from eikonal_fmm.utils.fmm_logging import get_logger, configure_logging
    >>> configure_logging(level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.info("Marching...")
"""

from __future__ import annotations

from .logger import (
    FMMFormatter,
    FMMLogger,
    LoggedOperation,
    configure_development_logging,
    configure_logging,
    configure_research_logging,
    get_logger,
    log_marching_completion,
    log_marching_start,
)

__all__ = [
    "FMMFormatter",
    "FMMLogger",
    "LoggedOperation",
    "configure_development_logging",
    "configure_logging",
    "configure_research_logging",
    "get_logger",
    "log_marching_completion",
    "log_marching_start",
]
