"""Centralized default configuration values."""

from __future__ import annotations

import configparser

from radius_vsa.radius.constants import MAX_RADIUS_PACKET_LENGTH

from .constants import (
    SECTION_LIMITS,
    SECTION_LOGGING,
    SECTION_TYPE_FORMATS,
    SECTION_VENDOR_FORMATS,
)

DEFAULT_LOG_LEVEL = "WARNING"  # library stays quiet unless asked
DEFAULT_MAX_VALUE_LENGTH = MAX_RADIUS_PACKET_LENGTH  # cap on a reassembled value


def populate_defaults(config: configparser.ConfigParser) -> None:
    """Fill ``config`` with default sections and values."""
    config[SECTION_LOGGING] = {"level": DEFAULT_LOG_LEVEL}
    config[SECTION_LIMITS] = {"max_value_length": str(DEFAULT_MAX_VALUE_LENGTH)}
    # vendor/type format tables start empty; DEFAULT_POLICY supplies built-ins
    config[SECTION_VENDOR_FORMATS] = {}
    config[SECTION_TYPE_FORMATS] = {}
