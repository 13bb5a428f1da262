import os
import logging
import logging.handlers

import pytest

from bmsearch.config.config import (
    DEFAULT_CONFIG_FILE,
    LOGGER_NAME,
    Config,
    ConfigError,
    ConfigFileError,
    ConfigValidationError,
)


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("some searchable text\n")
    return str(path)


def test_default_config_file():
    """The bundled configuration loads as is"""
    config = Config(DEFAULT_CONFIG_FILE)
    assert config.search_algorithm == "boyermoore"
    assert config.alphabet_size == 256
    assert config.case_sensitive is True
    assert config.reread_on_query is False
    assert config.file_path is None
    assert config.trace_enabled is True
    assert config.show_alignment is True
    assert config.log_level == "INFO"
    assert config.log_file is None


def test_init_with_valid_config(write_config, data_file, tmp_path):
    log_file = os.path.join(str(tmp_path), "logs", "search.log")
    config = Config(write_config(
        algorithm="naive",
        alphabet_size="128",
        case_sensitive="no",
        reread_on_query="yes",
        file_path=data_file,
        trace_enabled="false",
        show_alignment="0",
        log_level="debug",
        log_file=log_file,
    ))

    assert config.search_algorithm == "naive"
    assert config.alphabet_size == 128
    assert config.case_sensitive is False
    assert config.reread_on_query is True
    assert config.file_path == data_file
    assert config.trace_enabled is False
    assert config.show_alignment is False
    assert config.log_level == "debug"
    assert config.log_file == log_file
    assert config.logger is not None


def test_logger_setup(write_config, tmp_path):
    log_file = os.path.join(str(tmp_path), "search.log")
    config = Config(write_config(log_level="WARNING", log_file=log_file))

    assert config.logger.name == LOGGER_NAME
    assert config.logger.level == logging.WARNING
    assert len(config.logger.handlers) == 2
    assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in config.logger.handlers)

    config.logger.warning("hello from the test")
    for handler in config.logger.handlers:
        handler.flush()
    with open(log_file, encoding="utf-8") as f:
        assert "[WARNING] BMSearch: hello from the test" in f.read()


def test_logger_handlers_not_duplicated(write_config):
    config_file = write_config()
    Config(config_file)
    config = Config(config_file)
    assert len(config.logger.handlers) == 1


def test_init_with_missing_file():
    with pytest.raises(ConfigFileError, match="Configuration file 'nonexistent.conf' not found"):
        Config("nonexistent.conf")


@pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root can read any file")
def test_init_with_unreadable_file(write_config):
    config_file = write_config()
    os.chmod(config_file, 0o000)
    try:
        with pytest.raises(ConfigFileError, match="is not readable"):
            Config(config_file)
    finally:
        os.chmod(config_file, 0o644)


def test_init_with_malformed_config(tmp_path):
    config_file = tmp_path / "malformed.conf"
    config_file.write_text("This is not a valid INI file\n[BROKEN")
    with pytest.raises(ConfigFileError, match="Failed to parse configuration file"):
        Config(str(config_file))


def test_missing_required_sections(tmp_path):
    config_file = tmp_path / "incomplete.conf"
    config_file.write_text("[SEARCH]\nALGORITHM = boyermoore\n")
    with pytest.raises(ConfigFileError, match=r"Missing required sections.*TRACE.*LOGGING"):
        Config(str(config_file))


def test_missing_required_key(tmp_path):
    config_file = tmp_path / "missing_key.conf"
    config_file.write_text(
        "[SEARCH]\nALGORITHM = boyermoore\nCASE_SENSITIVE = true\nREREAD_ON_QUERY = false\n"
        "[TRACE]\nENABLED = true\nSHOW_ALIGNMENT = true\n"
        "[LOGGING]\nLEVEL = INFO\n"
    )
    with pytest.raises(ConfigValidationError, match="Required configuration 'SEARCH.ALPHABET_SIZE' not found"):
        Config(str(config_file))


@pytest.mark.parametrize("overrides, message", [
    ({"alphabet_size": "lots"}, "Invalid integer value for 'SEARCH.ALPHABET_SIZE'"),
    ({"alphabet_size": ""}, "Required configuration 'SEARCH.ALPHABET_SIZE' is empty"),
    ({"alphabet_size": "0"}, "Alphabet size must be between 1 and 256"),
    ({"alphabet_size": "257"}, "Alphabet size must be between 1 and 256"),
    ({"case_sensitive": "maybe"}, "Invalid boolean value for 'SEARCH.CASE_SENSITIVE'"),
    ({"trace_enabled": "sometimes"}, "Invalid boolean value for 'TRACE.ENABLED'"),
    ({"algorithm": "regex"}, "Invalid search algorithm 'regex'"),
    ({"log_level": "VERBOSE"}, "Invalid log level 'VERBOSE'"),
    ({"file_path": "/nonexistent/data.txt"}, "Search file does not exist"),
    ({"log_file": "/nonexistent/deeper/dir/search.log"}, "Log file parent directory does not exist"),
])
def test_invalid_values(write_config, overrides, message):
    with pytest.raises(ConfigValidationError, match=message):
        Config(write_config(**overrides))


def test_file_path_must_be_a_file(write_config, tmp_path):
    with pytest.raises(ConfigValidationError, match="Search path is not a file"):
        Config(write_config(file_path=str(tmp_path)))


def test_validation_errors_are_config_errors(write_config):
    with pytest.raises(ConfigError):
        Config(write_config(algorithm="bogus"))


def test_get(write_config):
    config = Config(write_config())
    assert config.get("SEARCH", "ALGORITHM") == "boyermoore"
    assert config.get("SEARCH", "UNKNOWN") is None
    with pytest.raises(ConfigError, match="Configuration section 'SERVER' not found"):
        config.get("SERVER", "PORT")


def test_str(write_config):
    text = str(Config(write_config()))
    assert "algorithm='boyermoore'" in text
    assert "alphabet_size=256" in text


def test_save_creates_backup(write_config, tmp_path):
    config_file = write_config()
    config = Config(config_file)
    config.config["SEARCH"]["ALGORITHM"] = "naive"
    config.save()

    assert os.path.exists(f"{config_file}.backup")
    assert Config(config_file).search_algorithm == "naive"


def test_save_to_other_file(write_config, tmp_path):
    config = Config(write_config())
    target = os.path.join(str(tmp_path), "nested", "copy.conf")
    config.save(target)
    assert Config(target).search_algorithm == "boyermoore"


def test_reload(write_config):
    config_file = write_config()
    config = Config(config_file)
    write_config(algorithm="naive")
    config.reload()
    assert config.search_algorithm == "naive"


def test_reload_failure_restores_state(write_config):
    config_file = write_config()
    config = Config(config_file)
    write_config(algorithm="bogus")
    with pytest.raises(ConfigError, match="Failed to reload configuration"):
        config.reload()
    assert config.search_algorithm == "boyermoore"
    assert config.config_file == config_file
