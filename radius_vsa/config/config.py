"""
Configuration management for radius_vsa

Thin orchestration layer: load (file → environment → defaults), validate
with the pydantic schema, and expose the results as immutable objects
(logging level, reassembly limit, format policy).
"""

import configparser
import os
from typing import IO, Any

from pydantic import ValidationError

from radius_vsa.exceptions import ConfigValidationError
from radius_vsa.radius.formats import DEFAULT_POLICY, FormatPolicy
from radius_vsa.utils.logger import configure as configure_logging
from radius_vsa.utils.logger import get_logger

from .constants import (
    ENV_RADIUS_VSA_CONFIG,
    SECTION_LIMITS,
    SECTION_LOGGING,
    SECTION_TYPE_FORMATS,
    SECTION_VENDOR_FORMATS,
)
from .defaults import populate_defaults
from .loader import load_config, new_parser
from .schema import RadiusVsaConfigSchema, validate_config_payload

logger = get_logger(__name__)


class VsaConfig:
    """radius_vsa configuration manager."""

    def __init__(self, config_file: str | None = None):
        """Initialize configuration manager.

        Args:
            config_file: Path to an INI file. ``RADIUS_VSA_CONFIG`` is used
                when omitted; with neither, defaults and environment apply.
        """
        self.config_source = config_file or os.environ.get(ENV_RADIUS_VSA_CONFIG)
        defaults = new_parser()
        populate_defaults(defaults)
        self.config: configparser.ConfigParser = load_config(
            self.config_source, defaults
        )
        self.schema: RadiusVsaConfigSchema = self._validate()
        self._policy: FormatPolicy | None = None

    def _section(self, name: str) -> dict[str, str]:
        if not self.config.has_section(name):
            return {}
        return {
            key: value
            for key, value in self.config.items(name, raw=True)
            if key not in self.config.defaults()
        }

    def _validate(self) -> RadiusVsaConfigSchema:
        payload: dict[str, Any] = {
            "logging": self._section(SECTION_LOGGING),
            "limits": self._section(SECTION_LIMITS),
            "formats": {
                "vendors": self._section(SECTION_VENDOR_FORMATS),
                "types": self._section(SECTION_TYPE_FORMATS),
            },
        }
        try:
            return validate_config_payload(payload)
        except ValidationError as exc:
            first = exc.errors()[0] if exc.errors() else {}
            field = ".".join(str(p) for p in first.get("loc", ()))
            logger.error(
                "Configuration validation failed",
                event="radius_vsa.config.invalid",
                source=self.config_source,
                field=field,
                error=str(exc),
            )
            raise ConfigValidationError(
                f"Invalid configuration: {first.get('msg', exc)}",
                field=field or None,
                value=first.get("input"),
            ) from exc

    @property
    def log_level(self) -> str:
        return self.schema.logging.level

    @property
    def max_value_length(self) -> int:
        return self.schema.limits.max_value_length

    def build_policy(self, base: FormatPolicy = DEFAULT_POLICY) -> FormatPolicy:
        """Layer configured format overrides on ``base``; built once and cached."""
        if self._policy is None:
            formats = self.schema.formats
            self._policy = (
                base.with_overrides(formats.vendors, formats.types)
                if formats.vendors or formats.types
                else base
            )
        return self._policy

    def setup_logging(self, stream: IO[str] | None = None) -> None:
        configure_logging(level=self.log_level, stream=stream)

    def get_config_summary(self) -> dict[str, Any]:
        policy = self.build_policy()
        return {
            "source": self.config_source,
            "logging": {"level": self.log_level},
            "limits": {"max_value_length": self.max_value_length},
            "vendor_formats": {
                str(vid): fmt.value for vid, fmt in sorted(policy.vendors.items())
            },
            "type_formats": {
                f"{vid}:{vtype}": fmt.value
                for (vid, vtype), fmt in sorted(policy.types.items())
            },
        }
