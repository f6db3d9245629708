import logging

import pytest

from simpleopt import OptionParser, flag
from simpleopt.utils import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    package_logger = logging.getLogger("simpleopt")
    handlers = list(root.handlers)
    level = root.level
    package_level = package_logger.level
    yield root
    package_logger.setLevel(package_level)
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = [
        handler
        for handler in handlers
        if not type(handler).__module__.startswith("_pytest")
    ]
    root.setLevel(level)


def test_setup_logging_cli_mode(tmp_path, restore_root_logger):
    log_file = tmp_path / "simpleopt.log"
    setup_logging(mode="cli", log_filename=str(log_file))
    names = [type(handler).__name__ for handler in restore_root_logger.handlers]
    assert names == ["RichHandler", "FileHandler"]

    logging.getLogger("simpleopt").debug("hello from the test")
    for handler in restore_root_logger.handlers:
        handler.flush()
    assert "hello from the test" in log_file.read_text()


def test_setup_logging_json_mode_without_file(restore_root_logger):
    setup_logging(mode="json", log_filename=None)
    assert len(restore_root_logger.handlers) == 1
    formatter = restore_root_logger.handlers[0].formatter
    assert type(formatter).__name__ == "JsonFormatter"


def test_setup_logging_reads_environment(monkeypatch, restore_root_logger):
    monkeypatch.setenv("SIMPLEOPT_LOG_MODE", "json")
    setup_logging(log_filename=None)
    assert type(restore_root_logger.handlers[0].formatter).__name__ == "JsonFormatter"


def test_setup_logging_invalid_mode(restore_root_logger):
    with pytest.raises(ValueError):
        setup_logging(mode="xml", log_filename=None)


def test_setup_logging_lowers_package_level_for_file(tmp_path, restore_root_logger):
    setup_logging(mode="cli", log_filename=str(tmp_path / "simpleopt.log"))
    assert logging.getLogger("simpleopt").level == logging.DEBUG


def test_setup_logging_console_only_shows_shorthand_warnings(
    restore_root_logger, capsys
):
    setup_logging(mode="json", log_filename=None)
    package_logger = logging.getLogger("simpleopt")
    assert package_logger.level == logging.WARNING
    assert not package_logger.isEnabledFor(logging.DEBUG)

    parser = OptionParser()
    parser.add_options(flag("verbose").build(), flag("version").build())
    captured = capsys.readouterr()
    assert "already used by 'verbose'" in captured.err
    assert "Registered option" not in captured.err
