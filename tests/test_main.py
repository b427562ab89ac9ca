import sys
from pathlib import Path

import pytest

import flagscan.__main__ as flagscan_main
from flagscan.__main__ import find_flagscan_config, get_scanner, main, run
from flagscan.parser import (
    ArgumentCatalog,
    ArgumentDefinition,
    ArgumentScanner,
    ConfigArguments,
    Error,
    Message,
    Parsed,
    get_config_scanner,
    get_templates_scanner,
)
from flagscan.version import __version__

CATALOG = """\
arguments:
  - name: --help
    action: help
    description: Show the custom help
  - name: --name
    shorthand: -n
    arity: 1
    required: true
"""


@pytest.fixture(autouse=True)
def fake_home(monkeypatch, tmp_path):
    """Redirect Path.home() and the cwd to temporary directories."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(work)
    monkeypatch.delenv("FLAGSCAN_CONFIG", raising=False)
    return home


def test_find_flagscan_config_none():
    assert find_flagscan_config() is None


def test_find_flagscan_config_in_cwd():
    config_file = Path("flagscan.toml").resolve()
    config_file.touch()
    assert find_flagscan_config() == config_file


def test_find_flagscan_config_prefers_yaml():
    Path("flagscan.toml").touch()
    Path("flagscan.yaml").touch()
    assert find_flagscan_config() == Path.cwd() / "flagscan.yaml"


def test_find_flagscan_config_from_env(monkeypatch, tmp_path):
    config_file = tmp_path / "custom.yaml"
    config_file.touch()
    monkeypatch.setenv("FLAGSCAN_CONFIG", str(config_file))
    assert find_flagscan_config() == config_file


def test_find_flagscan_config_global(fake_home):
    config_file = fake_home / ".config" / "flagscan" / "flagscan.yaml"
    config_file.parent.mkdir(parents=True)
    config_file.touch()
    assert find_flagscan_config() == config_file


def test_get_scanner_default():
    scanner = get_scanner(None)
    assert scanner.catalog == get_config_scanner().catalog


def test_get_scanner_from_file():
    Path("flagscan.yaml").write_text(CATALOG, encoding="UTF-8")
    scanner = get_scanner(find_flagscan_config())
    assert scanner.scan(["prog", "-n", "x"]) == Parsed({"name": "x"})


def test_run_parsed(capsys):
    assert run(Parsed(ConfigArguments("x.json"))) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_run_message(capsys):
    assert run(Message("hello\nworld")) == 0
    captured = capsys.readouterr()
    assert captured.out == "hello\nworld\n"


def test_run_error(capsys):
    assert run(Error("Unsupported argument: --bogus")) == 1
    captured = capsys.readouterr()
    assert "Unsupported argument: --bogus" in captured.err
    assert captured.out == ""


def test_main_help(capsys):
    assert main(["prog", "--help"]) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("Supported arguments:\n")
    assert "--config <path> Set custom path to the config file" in captured.out


def test_main_version(capsys):
    assert main(["prog", "--version"]) == 0
    assert capsys.readouterr().out == f"{__version__}\n"


def test_main_no_arguments(capsys):
    assert main(["prog"]) == 1
    assert "No arguments provided" in capsys.readouterr().err


def test_main_not_enough_arguments(capsys):
    assert main(["prog", "--config"]) == 1
    assert "Not enough arguments for --config" in capsys.readouterr().err


def test_main_parsed(capsys):
    assert main(["prog", "--config", "x.json"]) == 0
    assert capsys.readouterr().out == ""


def test_main_reads_sys_argv(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["prog", "--version"])
    assert main() == 0
    assert __version__ in capsys.readouterr().out


def test_main_with_scanner(capsys):
    scanner = get_templates_scanner()
    assert main(["prog", "-t", "T", "-d", "D"], scanner=scanner) == 0
    assert main(["prog", "-t", "T"], scanner=scanner) == 1
    assert "Missing required arguments: --definitions-path" in capsys.readouterr().err


def test_main_uses_catalog_file(capsys):
    Path("flagscan.yaml").write_text(CATALOG, encoding="UTF-8")
    assert main(["prog", "--help"]) == 0
    assert "Show the custom help" in capsys.readouterr().out
    assert main(["prog", "--config", "x.json"]) == 1
    assert "Unsupported argument: --config" in capsys.readouterr().err


def test_main_invalid_catalog_file(capsys):
    Path("flagscan.yaml").write_text("arguments: []\n", encoding="UTF-8")
    assert main(["prog", "--help"]) == 1
    assert "Invalid catalog" in capsys.readouterr().err


def test_cli_exits_with_code(monkeypatch):
    monkeypatch.setattr(flagscan_main, "setup_logging", lambda: None)
    monkeypatch.setattr(sys, "argv", ["prog", "--config", "x.json"])
    with pytest.raises(SystemExit) as exit_info:
        flagscan_main.cli()
    assert exit_info.value.code == 0

    monkeypatch.setattr(sys, "argv", ["prog", "--bogus"])
    with pytest.raises(SystemExit) as exit_info:
        flagscan_main.cli()
    assert exit_info.value.code == 1


def test_main_prints_emoji_codes_verbatim(capsys):
    assert main(["prog", ":smile:"]) == 1
    captured = capsys.readouterr()
    assert "Unsupported argument: :smile:" in captured.err
    assert "\U0001f604" not in captured.err


def test_main_help_keeps_emoji_codes(capsys):
    scanner = ArgumentScanner(
        ArgumentCatalog(
            [
                ArgumentDefinition("--help", action="help", description="Show :smile:"),
                ArgumentDefinition("--name", arity=1),
            ]
        )
    )
    assert main(["prog", "--help"], scanner=scanner) == 0
    captured = capsys.readouterr()
    assert "Show :smile:" in captured.out
    assert "\U0001f604" not in captured.out


def test_main_catalog_error_keeps_emoji_codes(capsys):
    Path("flagscan.yaml").write_text(
        "arguments:\n  - name: --name\n    shorthand: ':smile:'\n", encoding="UTF-8"
    )
    assert main(["prog", "--name"]) == 1
    captured = capsys.readouterr()
    assert "Shorthand ':smile:'" in captured.err
    assert "\U0001f604" not in captured.err


def test_main_undecodable_catalog_file(capsys):
    Path("flagscan.yaml").write_bytes(b"program: \xff\xfe\n")
    assert main(["prog", "--help"]) == 1
    assert "Could not parse" in capsys.readouterr().err
