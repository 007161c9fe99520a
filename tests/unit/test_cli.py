import json

from radius_vsa.cli import main


def test_encode_integer(capsys):
    rc = main(["encode", "--vendor", "2637", "--type", "2", "--kind", "integer", "100"])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "1a0c00000a4d020600000064"


def test_encode_by_name(capsys):
    assert main(["encode", "--name", "WiMAX-Release", "1.0"]) == 0
    assert capsys.readouterr().out.strip() == "1a0c000060b5020600312e30"


def test_encode_fragments_one_line_per_attribute(capsys):
    assert main(["encode", "--name", "WiMAX-MSK", "ab" * 300]) == 0
    lines = capsys.readouterr().out.split()
    assert len(lines) == 2
    assert lines[0][16:18] == "80"


def test_encode_too_large(capsys):
    rc = main(["encode", "--vendor", "9", "--type", "1", "aa" * 248])
    assert rc == 1
    assert "VSA attribute too long" in capsys.readouterr().err


def test_encode_requires_ids(capsys):
    assert main(["encode", "abcd"]) == 2
    assert "--vendor and --type" in capsys.readouterr().err


def test_encode_ipv6_rejected(capsys):
    rc = main(["encode", "--name", "WiMAX-DHCPv4-Server-Address", "2001:db8::1"])
    assert rc == 1
    assert "Expected an IPv4" in capsys.readouterr().err


def test_decode(capsys):
    assert main(["decode", "1a0c00000a4d020600000064", "1a0c000060b5020600312e30"]) == 0
    decoded = json.loads(capsys.readouterr().out)
    assert decoded == [
        {
            "name": "Vendor-2637-Attr-2",
            "vendor_id": 2637,
            "vendor_type": 2,
            "format": "1,1",
            "value": "00000064",
        },
        {
            "name": "WiMAX-Release",
            "vendor_id": 24757,
            "vendor_type": 2,
            "format": "1,1,c",
            "value": "1.0",
        },
    ]


def test_decode_with_format_override(capsys):
    rc = main(["decode", "--vendor", "4242", "--format", "1,1,c", "1a0a00001092010400ff"])
    assert rc == 0
    (entry,) = json.loads(capsys.readouterr().out)
    assert entry["format"] == "1,1,c"
    assert entry["value"] == "ff"


def test_decode_incomplete_chain(capsys):
    assert main(["decode", "1a0a000060b5010480ff"]) == 1
    assert "Incomplete fragment chain" in capsys.readouterr().err


def test_formats(capsys, tmp_path):
    path = tmp_path / "cfg.ini"
    path.write_text("[vendor_formats]\n9 = 1,1,c\n", encoding="utf-8")
    assert main(["--config", str(path), "formats"]) == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary["vendor_formats"]["9"] == "1,1,c"
