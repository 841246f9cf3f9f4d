import pytest

from firmware_catalog.labels import DONGLE_TYPES, FIRMWARE_TYPES, map_dongle_type, map_firmware_type


@pytest.mark.parametrize(
    "code, label",
    [
        ("ihost", "iHost"),
        ("donglee", "ZBDongle-E"),
        ("donglep", "ZBDongle-P"),
        ("donglem", "Dongle-M"),
        ("donglelmg21", "Dongle-LMG21"),
        ("donglepmg24", "Dongle-PMG24"),
    ],
)
def test_known_dongle_types(code, label):
    assert map_dongle_type(code) == label


@pytest.mark.parametrize("code", ["unknownvendor", "DongleE", "DONGLEE", " donglee", "donglee ", "", None])
def test_unknown_dongle_types(code):
    assert map_dongle_type(code) == "unknown"


@pytest.mark.parametrize(
    "code, label",
    [
        ("zigbee", "Zigbee"),
        ("zigbeerouter", "Zigbee Router"),
        ("openthread", "OpenThread"),
        ("multipan", "MultiPAN"),
    ],
)
@pytest.mark.parametrize("chip", ["mg21", "cc2652p", "esp32", None])
def test_known_roles_ignore_chip_model(code, label, chip):
    assert map_firmware_type(code, chip) == label


@pytest.mark.parametrize("code", [None, "", "stable", "Zigbee"])
def test_esp32_without_known_role_is_official(code):
    assert map_firmware_type(code, "esp32") == "Official"


@pytest.mark.parametrize("chip", ["mg21", "ESP32", "esp32s3", "", None])
def test_other_chips_without_known_role_are_unknown(chip):
    assert map_firmware_type(None, chip) == "unknown"
    assert map_firmware_type("router", chip) == "unknown"


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        DONGLE_TYPES["new"] = "New"
    with pytest.raises(TypeError):
        FIRMWARE_TYPES["thread"] = "Thread"
