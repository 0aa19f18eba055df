"""Operator scripts for creating keys and signing or verifying payloads."""

import logging

from signing.config import LOG_FORMAT, LOG_LEVEL


def setup_logging() -> None:
    logging.basicConfig(level=LOG_LEVEL.upper(), format=LOG_FORMAT)
