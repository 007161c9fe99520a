"""Pydantic schema for radius_vsa configuration validation."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from radius_vsa.radius.constants import MAX_VENDOR_ID
from radius_vsa.radius.formats import VsaFormat


class LoggingConfigSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")
    level: str = Field(default="WARNING")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


class LimitsConfigSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")
    max_value_length: int = Field(default=4096, ge=1, le=65535)


class FormatTablesSchema(BaseModel):
    """Vendor and vendor-type format overrides.

    Keys arrive from the INI file as strings: ``"24757"`` for vendors and
    ``"24757:1"`` for vendor types.
    """

    vendors: dict[int, VsaFormat] = Field(default_factory=dict)
    types: dict[tuple[int, int], VsaFormat] = Field(default_factory=dict)

    @field_validator("vendors", mode="before")
    @classmethod
    def _parse_vendors(cls, v: dict) -> dict[int, VsaFormat]:
        parsed: dict[int, VsaFormat] = {}
        for key, fmt in dict(v).items():
            vendor_id = _parse_int(key, "vendor id")
            _check_vendor(vendor_id)
            parsed[vendor_id] = VsaFormat.parse(fmt)
        return parsed

    @field_validator("types", mode="before")
    @classmethod
    def _parse_types(cls, v: dict) -> dict[tuple[int, int], VsaFormat]:
        parsed: dict[tuple[int, int], VsaFormat] = {}
        for key, fmt in dict(v).items():
            if isinstance(key, tuple):
                vendor_part, type_part = key
            else:
                vendor_part, sep, type_part = str(key).partition(":")
                if not sep:
                    raise ValueError(f"Expected '<vendor_id>:<vendor_type>', got {key!r}")
            vendor_id = _parse_int(vendor_part, "vendor id")
            vendor_type = _parse_int(type_part, "vendor type")
            _check_vendor(vendor_id)
            resolved = VsaFormat.parse(fmt)
            if not 1 <= vendor_type <= resolved.max_vendor_type:
                raise ValueError(
                    f"Vendor type {vendor_type} out of range for format {resolved.value}"
                )
            parsed[(vendor_id, vendor_type)] = resolved
        return parsed


class RadiusVsaConfigSchema(BaseModel):
    logging: LoggingConfigSchema = Field(default_factory=LoggingConfigSchema)
    limits: LimitsConfigSchema = Field(default_factory=LimitsConfigSchema)
    formats: FormatTablesSchema = Field(default_factory=FormatTablesSchema)


def _parse_int(value: object, what: str) -> int:
    try:
        return int(str(value).strip(), 0)
    except ValueError as exc:
        raise ValueError(f"Invalid {what}: {value!r}") from exc


def _check_vendor(vendor_id: int) -> None:
    if not 1 <= vendor_id <= MAX_VENDOR_ID:
        raise ValueError(f"Vendor id {vendor_id} out of range")


def validate_config_payload(payload: dict) -> RadiusVsaConfigSchema:
    """Validate configuration payload with Pydantic schema."""

    return RadiusVsaConfigSchema(**payload)
