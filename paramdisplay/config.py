"""Application configuration objects."""

import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration for the parameter display service."""

    # -------------------------
    # Formatting
    # -------------------------
    # Cap on rendered fraction digits for numeric values
    MAX_FRACTION_DIGITS = int(os.getenv("PARAMDISPLAY_MAX_FRACTION_DIGITS", "20"))

    # Text shown for null values
    NULL_DISPLAY = os.getenv("PARAMDISPLAY_NULL_DISPLAY", "(empty)")

    # -------------------------
    # Logging
    # -------------------------
    LOG_LEVEL = os.getenv("PARAMDISPLAY_LOG_LEVEL", "INFO")


class TestingConfig(Config):
    TESTING = True
    LOG_LEVEL = "DEBUG"


__all__ = ["Config", "TestingConfig"]
