import json

from firmware_catalog.cli import main, parse_args


def test_defaults():
    args = parse_args([])
    assert args.directory is None
    assert not args.stdout
    assert not args.verbose and not args.quiet


def test_writes_manifest(tmp_path, caplog):
    caplog.set_level("INFO")
    (tmp_path / "donglee_mg21_zigbee_stable_6.10.3_115200.gbl").write_bytes(b"")
    (tmp_path / "random.txt").write_text("")

    assert main([str(tmp_path)]) == 0

    data = json.loads((tmp_path / "FIRMWARE_LIST.json").read_text())
    assert [item["dongleType"] for item in data["firmwareList"]] == ["ZBDongle-E"]
    assert "Firmware info did not match pattern: random.txt" in caplog.text
    assert "Generated JSON file: FIRMWARE_LIST.json" in caplog.text


def test_stdout_does_not_write(tmp_path, capsys):
    (tmp_path / "unknownvendor_esp32_stable_1.0.0_921600.bin").write_bytes(b"")

    assert main([str(tmp_path), "--stdout"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["firmwareList"][0]["firmwareType"] == "Official"
    assert not (tmp_path / "FIRMWARE_LIST.json").exists()


def test_unreadable_directory_exits_nonzero(tmp_path, caplog):
    assert main([str(tmp_path / "missing")]) == 1
    assert "Failed to read firmware folder" in caplog.text
