from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Protocol, cast

from radius_vsa.config.config import VsaConfig
from radius_vsa.exceptions import RadiusVsaError
from radius_vsa.radius.attribute import split_attributes
from radius_vsa.radius.builder import build_attribute, build_vsa, parse_attribute
from radius_vsa.radius.codec import ValueKind
from radius_vsa.radius.dictionary import DEFAULT_DICTIONARY
from radius_vsa.radius.formats import VsaFormat
from radius_vsa.radius.reassembly import decode_attribute_list


def _parse_value(kind: ValueKind, raw: str) -> Any:
    if kind is ValueKind.INTEGER:
        return int(raw, 0)
    if kind is ValueKind.OCTETS:
        return bytes.fromhex(raw)
    return raw


def _json_value(value: Any) -> Any:
    if isinstance(value, bytes):
        return value.hex()
    if isinstance(value, int):
        return value
    return str(value)


def _load_config(args: argparse.Namespace) -> VsaConfig:
    cfg = VsaConfig(args.config)
    cfg.setup_logging()
    return cfg


def cmd_encode(args: argparse.Namespace) -> int:
    cfg = _load_config(args)
    policy = cfg.build_policy()
    if args.name:
        buffers = build_attribute(args.name, _value_for_name(args), policy=policy)
    else:
        if args.vendor is None or args.type is None:
            print("--vendor and --type are required without --name", file=sys.stderr)
            return 2
        kind = ValueKind(args.kind)
        buffers = build_vsa(
            args.vendor,
            args.type,
            _parse_value(kind, args.value),
            args.format,
            kind=kind,
            policy=policy,
        )
    for buf in buffers:
        print(buf.hex())
    return 0


def _value_for_name(args: argparse.Namespace) -> Any:
    return _parse_value(DEFAULT_DICTIONARY.by_name(args.name).kind, args.value)


def cmd_decode(args: argparse.Namespace) -> int:
    cfg = _load_config(args)
    policy = cfg.build_policy()
    if args.format:
        if args.vendor is None:
            print("--format needs --vendor", file=sys.stderr)
            return 2
        policy = policy.with_overrides(vendors={args.vendor: VsaFormat.parse(args.format)})
    raw = b"".join(bytes.fromhex(h) for h in args.hex)
    vsas = decode_attribute_list(
        split_attributes(raw), policy, max_value_length=cfg.max_value_length
    )
    out = []
    for vsa in vsas:
        name, value = parse_attribute(vsa)
        out.append(
            {
                "name": name,
                "vendor_id": vsa.vendor_id,
                "vendor_type": vsa.vendor_type,
                "format": vsa.format.value,
                "value": _json_value(value),
            }
        )
    print(json.dumps(out, indent=2))
    return 0


def cmd_formats(args: argparse.Namespace) -> int:
    cfg = _load_config(args)
    print(json.dumps(cfg.get_config_summary(), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="radius-vsa", description="Encode and decode RADIUS Vendor-Specific Attributes"
    )
    p.add_argument(
        "--config",
        "-c",
        default=None,
        help="Path to config file (defaults to $RADIUS_VSA_CONFIG)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sub_enc = sub.add_parser("encode", help="Print the attribute TLVs for a value as hex")
    sub_enc.add_argument("--name", help="Dictionary attribute name, e.g. WiMAX-Release")
    sub_enc.add_argument("--vendor", type=int, help="Vendor-Id (IANA PEN)")
    sub_enc.add_argument("--type", type=int, help="Vendor-Type")
    sub_enc.add_argument(
        "--kind",
        choices=[k.value for k in ValueKind],
        default=ValueKind.OCTETS.value,
        help="Value kind (octets are given as hex)",
    )
    sub_enc.add_argument("--format", default=None, help="VSA format, e.g. 1,1 or 1,1,c")
    sub_enc.add_argument("value", help="Value to encode")
    sub_enc.set_defaults(func=cmd_encode)

    sub_dec = sub.add_parser("decode", help="Decode hex attribute TLVs")
    sub_dec.add_argument("--format", default=None, help="Format to assume for --vendor")
    sub_dec.add_argument("--vendor", type=int, default=None, help="Vendor-Id for --format")
    sub_dec.add_argument("hex", nargs="+", help="Hex-encoded attribute TLVs")
    sub_dec.set_defaults(func=cmd_decode)

    sub_fmt = sub.add_parser("formats", help="Show the effective format policy")
    sub_fmt.set_defaults(func=cmd_formats)

    return p


class _Cmd(Protocol):
    def __call__(self, args: argparse.Namespace) -> int: ...


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    func = cast(_Cmd, getattr(args, "func"))
    try:
        return func(args)
    except (RadiusVsaError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
