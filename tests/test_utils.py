import json
import logging

import pytest
from rich.logging import RichHandler

from flagscan.utils import dest_from_name, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    "name,expected",
    [
        ("--config", "config"),
        ("--templates-path", "templates_path"),
        ("--Results-Root-Path", "Results_Root_Path"),
        ("-v", "v"),
    ],
)
def test_dest_from_name(name, expected):
    assert dest_from_name(name) == expected


def test_setup_logging_cli_mode(restore_root_logger):
    setup_logging(mode="cli", console_log_level=logging.INFO)
    handlers = restore_root_logger.handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.INFO


def test_setup_logging_env_mode(restore_root_logger, monkeypatch):
    monkeypatch.setenv("FLAGSCAN_LOG_MODE", "json")
    setup_logging()
    handler = restore_root_logger.handlers[0]
    assert not isinstance(handler, RichHandler)
    assert isinstance(handler, logging.StreamHandler)


def test_setup_logging_json_file(restore_root_logger, tmp_path):
    log_file = tmp_path / "flagscan.log"
    setup_logging(mode="json", log_filename=str(log_file), json_log_to_file=True)
    logging.getLogger("flagscan").info("scanned %d tokens", 3)
    for handler in restore_root_logger.handlers:
        handler.flush()

    records = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert records[-1]["message"] == "scanned 3 tokens"
    assert records[-1]["name"] == "flagscan"
    assert records[-1]["levelname"] == "INFO"


def test_setup_logging_invalid_mode(restore_root_logger):
    with pytest.raises(ValueError, match="Invalid log mode: xml"):
        setup_logging(mode="xml")
