"""Logging utilities."""
from __future__ import annotations

import logging

LOGGER_NAME = "shuffleid"


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)
