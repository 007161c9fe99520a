"""Unified configuration loading mechanism.

Load order: config file → environment variables → defaults. A value set in
the file wins over the environment; the environment only fills gaps.
"""

import configparser
import os

from radius_vsa.exceptions import ConfigError
from radius_vsa.utils.logger import get_logger

from .constants import ENV_OVERRIDABLE_KEYS, ENV_PREFIX

logger = get_logger(__name__)


def new_parser() -> configparser.ConfigParser:
    """ConfigParser that accepts ``vendor:type`` keys (``=`` is the only delimiter)."""
    return configparser.ConfigParser(interpolation=None, delimiters=("=",))


def apply_env_overrides(
    config: configparser.ConfigParser,
    section: str,
    key: str,
    env_var: str | None = None,
    file_keys: set[tuple[str, str]] | None = None,
) -> None:
    """Apply environment variable override to config value.

    Args:
        config: ConfigParser instance
        section: Section name
        key: Key name
        env_var: Optional custom environment variable name.
                If None, derives from RADIUS_VSA_SECTION_KEY pattern.
        file_keys: (section, key) pairs set by the config file; these are
                never overridden.
    """
    if env_var is None:
        env_var = f"{ENV_PREFIX}{section.upper()}_{key.upper()}"

    value = os.environ.get(env_var)
    if value is None:
        return
    if file_keys and (section, key) in file_keys:
        logger.debug(
            "Skipping environment override because config already defines the value",
            event="radius_vsa.config.loader.env_override_skipped",
            section=section,
            key=key,
        )
        return
    if not config.has_section(section):
        config.add_section(section)
    config.set(section, key, value)
    logger.debug(
        "Applied environment override for config key",
        event="radius_vsa.config.loader.env_override_applied",
        section=section,
        key=key,
        env_var=env_var,
    )


def apply_all_env_overrides(
    config: configparser.ConfigParser,
    file_keys: set[tuple[str, str]] | None = None,
) -> None:
    """Apply environment overrides for every overridable key.

    Environment variables follow the pattern RADIUS_VSA_SECTION_KEY, e.g.
    RADIUS_VSA_LOGGING_LEVEL or RADIUS_VSA_LIMITS_MAX_VALUE_LENGTH.
    """
    for section, keys in ENV_OVERRIDABLE_KEYS.items():
        for key in keys:
            apply_env_overrides(config, section, key, file_keys=file_keys)


def load_config(
    source: str | None,
    defaults: configparser.ConfigParser | None = None,
) -> configparser.ConfigParser:
    """Load configuration with defaults, file, and environment layered.

    Args:
        source: Path to an INI file, or None for defaults + environment only
        defaults: Parser pre-populated with default values

    Raises:
        ConfigError: if ``source`` is given but cannot be read or parsed
    """
    config = new_parser()
    if defaults is not None:
        config.read_dict(defaults)

    file_keys: set[tuple[str, str]] = set()
    if source:
        file_cfg = new_parser()
        try:
            with open(source, encoding="utf-8") as fh:
                file_cfg.read_file(fh, source=source)
        except (OSError, configparser.Error) as exc:
            logger.error(
                "Failed to read configuration file",
                event="radius_vsa.config.loader.read_failed",
                source=source,
                error=str(exc),
            )
            raise ConfigError(
                f"Cannot load configuration from {source}: {exc}", {"source": source}
            ) from exc
        for section in file_cfg.sections():
            if not config.has_section(section):
                config.add_section(section)
            for key, value in file_cfg.items(section, raw=True):
                config.set(section, key, value)
                file_keys.add((section, key))
        logger.debug(
            "Loaded configuration file",
            event="radius_vsa.config.loader.file_loaded",
            source=source,
            sections=file_cfg.sections(),
        )

    apply_all_env_overrides(config, file_keys)
    return config
