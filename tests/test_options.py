import pytest

from qlfront.options import OPTIONS, EmulatorOptions, OptionType, help_text


def _missing(tmp_path):
    return str(tmp_path / "absent.ini")


def test_defaults_without_ini(tmp_path):
    opts = EmulatorOptions()
    assert opts.parse(["-f", _missing(tmp_path)]) is False
    assert opts.string("kbd") == "US"
    assert opts.string("sysrom") == "MIN198.rom"
    assert opts.integer("ramtop") == 256
    assert opts.string("boot_cmd") == ""


def test_unknown_names(tmp_path):
    opts = EmulatorOptions()
    opts.parse(["-f", _missing(tmp_path)])
    assert opts.string("nothing") == ""
    assert opts.integer("nothing") == 0
    assert opts.integer("kbd") == 0


def test_ini_values_and_devices(tmp_path):
    (tmp_path / "mdv").mkdir()
    ini = tmp_path / "sqlux.ini"
    ini.write_text(
        "; comment\n"
        "[sqlux]\n"
        "RAMTOP = 1024\n"
        "kbd=DE\n"
        f"device = mdv1,{tmp_path / 'mdv'}\n"
        "unknown_key = 3\n"
    )
    opts = EmulatorOptions()
    assert opts.parse(["-f", str(ini)]) is True
    assert opts.integer("ramtop") == 1024
    assert opts.string("kbd") == "DE"
    assert opts.devices.find("mdv").mount_points[0] == f"{tmp_path / 'mdv'}/"


def test_load_ini_reports_unknown(tmp_path):
    ini = tmp_path / "a.ini"
    ini.write_text("foo = 1\nsound = 4 ; loud\n")
    opts = EmulatorOptions()
    assert opts.load_ini(ini) == ["foo"]
    assert opts.integer("sound") == 4


def test_load_ini_missing_raises(tmp_path):
    with pytest.raises(OSError):
        EmulatorOptions().load_ini(_missing(tmp_path))


def test_command_line_overrides_ini(tmp_path):
    ini = tmp_path / "a.ini"
    ini.write_text("ramtop = 1024\nwin_size = 2x\n")
    opts = EmulatorOptions()
    opts.parse(["--ramtop", "512", "-w", "3x", "-f", str(ini)])
    assert opts.integer("ramtop") == 512
    assert opts.string("win_size") == "3x"


def test_aliases_and_positionals(tmp_path):
    opts = EmulatorOptions()
    opts.parse(["-b", "lrun", "-f", _missing(tmp_path), "one", "two"])
    assert opts.string("boot_cmd") == "lrun"
    assert opts.args == ["one", "two"]


def test_device_on_command_line(tmp_path):
    opts = EmulatorOptions()
    opts.parse(["--device", "ram1,/nonexistent/r", "-f", _missing(tmp_path)])
    assert opts.devices.find("RAM").mount_points[0] == "/nonexistent/r/"


def test_help_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        EmulatorOptions().parse(["--help"])
    assert info.value.code == 0
    assert "--boot_device [mdv1]" in capsys.readouterr().out


def test_help_text_columns():
    text = help_text()
    assert text.startswith("\nUsage: sqlux [OPTIONS] [args...]\n")
    assert text.endswith("  --version                   version number\n")
    for spec in OPTIONS:
        line = next(l for l in text.splitlines() if f"--{spec.name}" in l)
        assert line.endswith(spec.help)
        prefix = line[: len(line) - len(spec.help)]
        assert len(prefix) >= 30
        if spec.type is OptionType.INT:
            assert f"[{spec.default}]" in prefix