import pytest

from emulated_devices.descriptor import Descriptor, Viewport, decode
from emulated_devices.emit import emit, format_source, member_name, member_names, render
from emulated_devices.errors import FormatError, WriteError
from emulated_devices.info import Info
from emulated_devices.literal import extract, normalize


def load_generated(src):
    namespace = {"__name__": "generated_devices"}
    exec(compile(src, "devices.py", "exec"), namespace)
    return namespace


@pytest.fixture
def descriptors(sample_source):
    return decode(normalize(extract(sample_source)))


@pytest.mark.parametrize("name, expected", [
    ("Device A", "DeviceA"),
    ("Device-B 2", "DeviceB2"),
    ("iPhone X", "IPhoneX"),
    ("Galaxy S9+ landscape", "GalaxyS9landscape"),
    ("iPad (gen 6)", "IPadgen6"),
    ("under_score", "Under_score"),
])
def test_member_name(name, expected):
    assert member_name(name) == expected


@pytest.mark.parametrize("name", ["Device A", "Device-B 2", "iPhone X", "Nokia N9 landscape", "JioPhone 2"])
def test_member_name_is_idempotent(name):
    once = member_name(name)
    assert member_name(once) == once
    assert member_name(name) == once


def test_member_names_sample(descriptors):
    assert member_names(descriptors) == ["Reset", "DeviceA", "DeviceB2"]


@pytest.mark.parametrize("names", [
    ["!!!"],
    ["2 Fast"],
    ["Device A", "Device-A"],
    ["reset"],
    ["none"],
    ["true"],
    ["False"],
    ["__init__"],
    ["_generate_next_value_"],
    ["_x_"],
])
def test_member_names_rejects_unusable_names(names):
    with pytest.raises(FormatError):
        member_names([Descriptor(name=n) for n in names])


def test_generated_module_enumerates_reset_first(descriptors):
    namespace = load_generated(format_source(render(descriptors)))
    device = namespace["Device"]
    table = namespace["DEVICES"]

    assert [m.name for m in device] == ["Reset", "DeviceA", "DeviceB2"]
    assert [m.value for m in device] == [0, 1, 2]
    assert len(table) == len(descriptors) + 1
    assert table[0] == Info("", "", 0, 0, 0.0, False, False, False)


def test_generated_module_accessors(descriptors):
    namespace = load_generated(format_source(render(descriptors)))
    device = namespace["Device"]

    assert str(device.DeviceA) == "Device A"
    assert str(device.Reset) == ""
    assert device.DeviceB2.device() == Info(
        "Device-B 2",
        descriptors[1].user_agent,
        812,
        375,
        3.0,
        True,
        True,
        True,
    )
    assert device.DeviceA.device().device() is device.DeviceA.device()


def test_generated_source_carries_header(descriptors):
    src = format_source(render(descriptors))

    assert src.startswith("# Device emulation definitions")
    assert "# See: https://raw.githubusercontent.com/puppeteer/puppeteer/" in src
    assert "# Generated by gen.py. DO NOT EDIT." in src
    assert "# DeviceB2 is the 'Device-B 2' device." in src


def test_render_is_deterministic(descriptors):
    first = format_source(render(descriptors))
    second = format_source(render(list(descriptors)))

    assert first == second
    assert format_source(first) == first


def test_render_empty_list_has_only_reset():
    namespace = load_generated(format_source(render([])))

    assert [m.name for m in namespace["Device"]] == ["Reset"]
    assert len(namespace["DEVICES"]) == 1


def test_render_escapes_quotes_in_values():
    d = Descriptor(name="Quote's", user_agent='UA "x"', viewport=Viewport(1, 2, 1.5, True, False, False))
    namespace = load_generated(format_source(render([d])))

    info = namespace["Device"].Quotes.device()
    assert info.name == "Quote's"
    assert info.user_agent == 'UA "x"'


def test_format_source_rejects_invalid_python():
    with pytest.raises(FormatError):
        format_source("class Device(:\n")


def test_emit_writes_file(descriptors, tmp_path):
    out = tmp_path / "devices.py"

    src = emit(descriptors, out)

    assert out.read_text(encoding="utf-8") == src


def test_emit_write_failure(descriptors, tmp_path):
    with pytest.raises(WriteError):
        emit(descriptors, tmp_path / "missing" / "devices.py")


def test_member_names_allows_plain_underscore_prefix():
    assert member_names([Descriptor(name="_private")]) == ["Reset", "_private"]
