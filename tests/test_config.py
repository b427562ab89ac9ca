from pathlib import Path

import pytest

from flagscan.config import CatalogConfig, RawArgumentDefinition, loader
from flagscan.exceptions import CatalogConfigError
from flagscan.parser import ArgumentAction, ArgumentScanner, Message, Parsed

YAML_CATALOG = """\
program: recoder
example: recoder --config ./config.json
version: 2.0.0
require_arguments: true
arguments:
  - name: --help
    shorthand: -h
    action: h
    description: Show this help
  - name: --version
    action: version
    description: Show the application version
  - name: --config
    shorthand: -c
    syntax: --config <path>
    description: Set custom path to the config file
    arity: 1
    dest: path_to_config
"""

TOML_CATALOG = """\
program = "generator"

[[arguments]]
name = "--help"
action = "help"
description = "Show this help"

[[arguments]]
name = "--templates-path"
shorthand = "-t"
syntax = "--templates-path, -t <path>"
arity = 1
required = true
"""


def write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="UTF-8")
    return path


def test_loader_yaml(tmp_path):
    catalog = loader(write(tmp_path, "flagscan.yaml", YAML_CATALOG))
    assert catalog.program == "recoder"
    assert catalog.version == "2.0.0"
    assert catalog.require_arguments is True
    assert catalog.help_definition.shorthand == "-h"
    assert catalog.lookup("-c").dest == "path_to_config"

    scanner = ArgumentScanner(catalog)
    assert scanner.scan(["prog", "-c", "x.json"]) == Parsed({"path_to_config": "x.json"})
    assert scanner.scan(["prog", "--version"]) == Message("2.0.0")
    assert scanner.scan(["prog"]).text.startswith("No arguments provided")


def test_loader_yml_suffix(tmp_path):
    catalog = loader(str(write(tmp_path, "catalog.yml", YAML_CATALOG)))
    assert len(catalog) == 3


def test_loader_toml(tmp_path):
    catalog = loader(write(tmp_path, "flagscan.toml", TOML_CATALOG))
    assert catalog.program == "generator"
    assert catalog.require_arguments is False
    assert [d.name for d in catalog.required_definitions] == ["--templates-path"]

    outcome = ArgumentScanner(catalog).scan(["prog"])
    assert outcome.text.startswith("Missing required arguments: --templates-path")


def test_loader_missing_file(tmp_path):
    with pytest.raises(CatalogConfigError, match="No such config file"):
        loader(tmp_path / "missing.yaml")


def test_loader_unsupported_format(tmp_path):
    with pytest.raises(CatalogConfigError, match="Unsupported config format: .json"):
        loader(write(tmp_path, "flagscan.json", "{}"))


def test_loader_rejects_non_path():
    with pytest.raises(TypeError):
        loader(42)  # type: ignore[arg-type]


def test_loader_rejects_non_mapping(tmp_path):
    with pytest.raises(CatalogConfigError, match="must contain a dictionary"):
        loader(write(tmp_path, "flagscan.yaml", "- --help\n- --version\n"))


def test_loader_rejects_unparsable_yaml(tmp_path):
    with pytest.raises(CatalogConfigError, match="Could not parse"):
        loader(write(tmp_path, "flagscan.yaml", "arguments: [unclosed\n"))


def test_loader_rejects_unparsable_toml(tmp_path):
    with pytest.raises(CatalogConfigError, match="Could not parse"):
        loader(write(tmp_path, "flagscan.toml", "arguments = ]\n"))


@pytest.mark.parametrize(
    "content",
    [
        "program: empty\narguments: []\n",
        "program: none\n",
        "arguments:\n  - name: --help\n    action: append\n",
        "arguments:\n  - name: --config\n    arity: -1\n",
        "arguments:\n  - name: --config\n  - name: --config\n",
        "arguments:\n  - name: config\n",
    ],
)
def test_loader_rejects_invalid_catalogs(tmp_path, content):
    with pytest.raises(CatalogConfigError, match="Invalid catalog"):
        loader(write(tmp_path, "flagscan.yaml", content))


def test_raw_argument_definition():
    raw = RawArgumentDefinition(name="--help", action="?")
    assert raw.action is ArgumentAction.HELP
    definition = raw.to_definition()
    assert definition.name == "--help"
    assert definition.syntax == "--help"
    assert definition.dest == "help"


def test_catalog_config_to_catalog():
    config = CatalogConfig(arguments=[{"name": "--config", "arity": 1}])
    catalog = config.to_catalog()
    assert catalog.program == "flagscan"
    assert catalog.lookup("--config").arity == 1


def test_loader_rejects_undecodable_file(tmp_path):
    path = tmp_path / "flagscan.yaml"
    path.write_bytes(b"program: \xff\xfe\n")
    with pytest.raises(CatalogConfigError, match="Could not parse"):
        loader(path)


def test_loader_wraps_os_errors(tmp_path, monkeypatch):
    path = write(tmp_path, "flagscan.toml", TOML_CATALOG)

    def deny(*args, **kwargs):
        raise PermissionError("Permission denied")

    monkeypatch.setattr(Path, "open", deny)
    with pytest.raises(CatalogConfigError, match="Permission denied"):
        loader(path)
