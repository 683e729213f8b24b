"""Lightweight logging utilities for matches and debugging."""

import logging

LOGGER = logging.getLogger("Jump61_AI")


def configure_logging(level="INFO"):
    """Send package logs to stderr with a [HH:MM:SS] timestamp."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="[%(asctime)s] %(message)s",
        datefmt="%H:%M:%S",
    )


def log_event(message):
    LOGGER.info(message)
