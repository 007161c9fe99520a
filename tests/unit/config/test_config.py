"""Tests for configuration loading, validation and policy construction."""

import io
import json
import logging
import textwrap

import pytest

from radius_vsa.config import VsaConfig, load_config
from radius_vsa.config.loader import new_parser
from radius_vsa.exceptions import ConfigError, ConfigValidationError
from radius_vsa.radius.constants import VENDOR_CISCO, VENDOR_WIMAX
from radius_vsa.radius.formats import DEFAULT_POLICY, VsaFormat


def _write_config(tmp_path, body: str) -> str:
    path = tmp_path / "radius_vsa.ini"
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return str(path)


def test_defaults_without_file():
    cfg = VsaConfig()
    assert cfg.log_level == "WARNING"
    assert cfg.max_value_length == 4096
    assert cfg.build_policy() is DEFAULT_POLICY


def test_file_values(tmp_path):
    path = _write_config(
        tmp_path,
        """
        [logging]
        level = debug

        [limits]
        max_value_length = 2048

        [vendor_formats]
        9 = 1,1,c

        [type_formats]
        24757:2 = standard
        """,
    )
    cfg = VsaConfig(path)
    assert cfg.log_level == "DEBUG"
    assert cfg.max_value_length == 2048

    policy = cfg.build_policy()
    assert policy.format_for(VENDOR_CISCO) is VsaFormat.CONTINUATION
    assert policy.format_for(VENDOR_WIMAX, 2) is VsaFormat.STANDARD
    assert policy.format_for(VENDOR_WIMAX, 1) is VsaFormat.CONTINUATION
    assert cfg.build_policy() is policy


def test_config_path_from_environment(tmp_path, monkeypatch):
    path = _write_config(tmp_path, "[limits]\nmax_value_length = 100\n")
    monkeypatch.setenv("RADIUS_VSA_CONFIG", path)
    cfg = VsaConfig()
    assert cfg.config_source == path
    assert cfg.max_value_length == 100


def test_env_override_fills_gaps(monkeypatch):
    monkeypatch.setenv("RADIUS_VSA_LOGGING_LEVEL", "info")
    monkeypatch.setenv("RADIUS_VSA_LIMITS_MAX_VALUE_LENGTH", "512")
    cfg = VsaConfig()
    assert cfg.log_level == "INFO"
    assert cfg.max_value_length == 512


def test_file_wins_over_env(tmp_path, monkeypatch):
    path = _write_config(tmp_path, "[logging]\nlevel = ERROR\n")
    monkeypatch.setenv("RADIUS_VSA_LOGGING_LEVEL", "DEBUG")
    assert VsaConfig(path).log_level == "ERROR"


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="Cannot load configuration"):
        load_config(str(tmp_path / "missing.ini"), new_parser())


def test_load_config_parse_error(tmp_path):
    path = _write_config(tmp_path, "no section header here\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_invalid_limit(tmp_path):
    path = _write_config(tmp_path, "[limits]\nmax_value_length = 0\n")
    with pytest.raises(ConfigValidationError) as exc_info:
        VsaConfig(path)
    assert exc_info.value.field == "limits.max_value_length"


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("RADIUS_VSA_LOGGING_LEVEL", "chatty")
    with pytest.raises(ConfigValidationError, match="Unknown log level"):
        VsaConfig()


@pytest.mark.parametrize(
    "section, line",
    [
        ("vendor_formats", "9 = 3,3"),
        ("vendor_formats", "0 = 1,1"),
        ("vendor_formats", "cisco = 1,1"),
        ("type_formats", "9 = 1,1"),
        ("type_formats", "9:256 = 1,1"),
    ],
)
def test_invalid_format_tables(tmp_path, section, line):
    path = _write_config(tmp_path, f"[{section}]\n{line}\n")
    with pytest.raises(ConfigValidationError):
        VsaConfig(path)


def test_wide_type_override(tmp_path):
    path = _write_config(tmp_path, "[type_formats]\n0x1AD:0x9008 = 4,0\n")
    policy = VsaConfig(path).build_policy()
    assert policy.format_for(429, 0x9008) is VsaFormat.TYPE4_LEN0


def test_config_summary(tmp_path):
    path = _write_config(tmp_path, "[vendor_formats]\n9 = 1,1,c\n")
    summary = VsaConfig(path).get_config_summary()
    assert summary["source"] == path
    assert summary["limits"] == {"max_value_length": 4096}
    assert summary["vendor_formats"]["9"] == "1,1,c"
    assert summary["vendor_formats"]["24757"] == "1,1,c"
    assert summary["vendor_formats"]["429"] == "4,0"


def test_setup_logging_uses_configured_level(tmp_path):
    path = _write_config(tmp_path, "[logging]\nlevel = INFO\n")
    pkg_logger = logging.getLogger("radius_vsa")
    saved = (pkg_logger.handlers[:], pkg_logger.level, pkg_logger.propagate)
    stream = io.StringIO()
    try:
        VsaConfig(path).setup_logging(stream=stream)
        assert pkg_logger.level == logging.INFO
        logging.getLogger("radius_vsa.config.test").info("configured")
        logging.getLogger("radius_vsa.config.test").debug("suppressed")
        (line,) = stream.getvalue().splitlines()
        assert json.loads(line)["message"] == "configured"
    finally:
        pkg_logger.handlers, pkg_logger.level, pkg_logger.propagate = saved
