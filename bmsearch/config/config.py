import os
import sys
import shutil
import configparser
from typing import Any, Optional
import logging
from logging.handlers import RotatingFileHandler

DEFAULT_CONFIG_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "search.conf")
LOGGER_NAME = "BMSearch"


class ConfigError(Exception):
    """Base exception for configuration-related errors."""
    pass


class ConfigValidationError(ConfigError):
    """Raised when configuration validation fails."""
    pass


class ConfigFileError(ConfigError):
    """Raised when there are issues with the configuration file."""
    pass


class Config:
    """Manages search configuration and logging setup.

    Reads settings from an INI file, validates them, and initializes a logger
    with both console and file handlers (if specified).

    Attributes:
        search_algorithm (str): Algorithm used for file searches.
        alphabet_size (int): Number of symbols in the search alphabet.
        case_sensitive (bool): Whether search is case-sensitive.
        reread_on_query (bool): Whether to re-read files on each query.
        file_path (Optional[str]): Default file to search (if specified).
        trace_enabled (bool): Whether to print the step-by-step trace.
        show_alignment (bool): Whether the trace draws alignment diagrams.
        log_level (str): Logging level (e.g., "INFO", "DEBUG").
        log_file (Optional[str]): Path to log file (if specified).
        logger (Optional[logging.Logger]): Configured logger instance.
    """

    VALID_LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
    VALID_ALGORITHMS = {'boyermoore', 'naive'}
    REQUIRED_SECTIONS = ('SEARCH', 'TRACE', 'LOGGING')
    MAX_ALPHABET_SIZE = 256

    def __init__(self, config_file: str = DEFAULT_CONFIG_FILE) -> None:
        """Initializes the configuration from a file.

        Args:
            config_file: Path to the configuration INI file.

        Raises:
            ConfigFileError: If the config file does not exist or cannot be read.
            ConfigValidationError: If required settings are missing or invalid.
        """
        self.config_file = config_file
        self.config = configparser.ConfigParser()
        self.logger: Optional[logging.Logger] = None

        try:
            self._load_config_file()
            self._parse_configuration()
            self._validate_config()
            self._initiate_logger()
        except ConfigError:
            raise
        except Exception as e:
            raise ConfigError(f"Unexpected error during configuration initialization: {e}") from e

    def _load_config_file(self) -> None:
        """Loads and parses the configuration file.

        Raises:
            ConfigFileError: If file doesn't exist, can't be read, or has parsing errors.
        """
        if not os.path.exists(self.config_file):
            raise ConfigFileError(f"Configuration file '{self.config_file}' not found")

        if not os.access(self.config_file, os.R_OK):
            raise ConfigFileError(f"Configuration file '{self.config_file}' is not readable")

        try:
            self.config.read(self.config_file, encoding="utf-8")
        except configparser.Error as e:
            raise ConfigFileError(f"Failed to parse configuration file '{self.config_file}': {e}") from e

        missing_sections = [section for section in self.REQUIRED_SECTIONS if section not in self.config]
        if missing_sections:
            raise ConfigFileError(f"Missing required sections in config file: {missing_sections}")

    def _get_raw(self, section: str, key: str) -> Optional[str]:
        if section not in self.config or key not in self.config[section]:
            return None
        value = self.config[section].get(key)
        if not value or not value.strip():
            return None
        return value.strip()

    def _get_required_str(self, section: str, key: str) -> str:
        """Retrieves a required string value from config.

        Raises:
            ConfigValidationError: If value is missing or empty.
        """
        if section not in self.config or key not in self.config[section]:
            raise ConfigValidationError(f"Required configuration '{section}.{key}' not found")
        value = self._get_raw(section, key)
        if value is None:
            raise ConfigValidationError(f"Required configuration '{section}.{key}' is empty")
        return value

    def _get_required_int(self, section: str, key: str) -> int:
        """Retrieves a required integer value from config.

        Raises:
            ConfigValidationError: If value is missing or cannot be converted to int.
        """
        value = self._get_required_str(section, key)
        try:
            return int(value)
        except ValueError as e:
            raise ConfigValidationError(f"Invalid integer value for '{section}.{key}': '{value}'") from e

    def _get_required_bool(self, section: str, key: str) -> bool:
        """Retrieves a required boolean value from config.

        Raises:
            ConfigValidationError: If value is missing or cannot be converted to bool.
        """
        value = self._get_required_str(section, key)
        try:
            return self.config[section].getboolean(key)
        except ValueError as e:
            raise ConfigValidationError(
                f"Invalid boolean value for '{section}.{key}': '{value}'. Use true/false, yes/no, or 1/0"
            ) from e

    def _parse_configuration(self) -> None:
        """Parses all configuration values with strict validation."""
        self.search_algorithm = self._get_required_str("SEARCH", "ALGORITHM").lower()
        self.alphabet_size = self._get_required_int("SEARCH", "ALPHABET_SIZE")
        self.case_sensitive = self._get_required_bool("SEARCH", "CASE_SENSITIVE")
        self.reread_on_query = self._get_required_bool("SEARCH", "REREAD_ON_QUERY")
        self.file_path = self._get_raw("SEARCH", "FILE_PATH")

        self.trace_enabled = self._get_required_bool("TRACE", "ENABLED")
        self.show_alignment = self._get_required_bool("TRACE", "SHOW_ALIGNMENT")

        self.log_level = self._get_required_str("LOGGING", "LEVEL")
        self.log_file = self._get_raw("LOGGING", "FILE")

    def _validate_config(self) -> None:
        """Validates all configuration settings strictly.

        Raises:
            ConfigValidationError: If any settings are invalid.
        """
        if self.search_algorithm not in self.VALID_ALGORITHMS:
            raise ConfigValidationError(
                f"Invalid search algorithm '{self.search_algorithm}'. "
                f"Valid options: {', '.join(sorted(self.VALID_ALGORITHMS))}"
            )

        if not (1 <= self.alphabet_size <= self.MAX_ALPHABET_SIZE):
            raise ConfigValidationError(
                f"Alphabet size must be between 1 and {self.MAX_ALPHABET_SIZE}, got: {self.alphabet_size}"
            )

        if self.file_path:
            if not os.path.exists(self.file_path):
                raise ConfigValidationError(f"Search file does not exist: '{self.file_path}'")
            if not os.path.isfile(self.file_path):
                raise ConfigValidationError(f"Search path is not a file: '{self.file_path}'")
            if not os.access(self.file_path, os.R_OK):
                raise ConfigValidationError(f"Search file is not readable: '{self.file_path}'")

        if self.log_level.upper() not in self.VALID_LOG_LEVELS:
            raise ConfigValidationError(
                f"Invalid log level '{self.log_level}'. "
                f"Valid options: {', '.join(sorted(self.VALID_LOG_LEVELS))}"
            )

        if self.log_file:
            log_dir = os.path.dirname(self.log_file)
            if log_dir and not os.path.exists(log_dir):
                parent_dir = os.path.dirname(log_dir)
                if parent_dir and not os.path.exists(parent_dir):
                    raise ConfigValidationError(f"Log file parent directory does not exist: '{parent_dir}'")

    def _create_log_file(self, log_path: str) -> None:
        """Creates a log file and its directory if needed.

        Raises:
            ConfigError: If log file or directory cannot be created or written.
        """
        try:
            directory = os.path.dirname(log_path)
            if directory:
                if not os.path.exists(directory):
                    os.makedirs(directory, mode=0o755)
                elif not os.access(directory, os.W_OK):
                    raise ConfigError(f"Log directory '{directory}' is not writable")

            if os.path.exists(log_path) and not os.access(log_path, os.W_OK):
                raise ConfigError(f"Log file '{log_path}' is not writable")
        except OSError as e:
            raise ConfigError(f"Failed to create log file or directory for '{log_path}': {e}") from e

    def _initiate_logger(self) -> None:
        """Initializes the logger with console and file handlers.

        Sets up:
            - Logging format.
            - Console handler (stderr).
            - File handler (if `log_file` is specified), rotated at 10MB with 3 backups.

        Raises:
            ConfigError: If logger setup fails.
        """
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        log_level = getattr(logging, self.log_level.upper())

        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(log_level)

        # Clear existing handlers to avoid duplicates
        if self.logger.hasHandlers():
            for handler in list(self.logger.handlers):
                handler.close()
            self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(log_level)
        self.logger.addHandler(console_handler)

        if self.log_file:
            try:
                self._create_log_file(self.log_file)
                file_handler = RotatingFileHandler(
                    self.log_file,
                    maxBytes=10 * 1024 * 1024,  # 10MB
                    backupCount=3,
                    encoding="utf-8",
                )
            except Exception as e:
                raise ConfigError(f"Failed to initialize file logging for '{self.log_file}': {e}") from e
            file_handler.setFormatter(formatter)
            file_handler.setLevel(log_level)
            self.logger.addHandler(file_handler)

    def get(self, section: str, key: str) -> Any:
        """Retrieves a raw value from the configuration.

        Raises:
            ConfigError: If section doesn't exist.
        """
        if section not in self.config:
            raise ConfigError(f"Configuration section '{section}' not found")
        return self.config[section].get(key)

    def __str__(self) -> str:
        return (
            f"Config(algorithm='{self.search_algorithm}', alphabet_size={self.alphabet_size}, "
            f"case_sensitive={self.case_sensitive}, reread_on_query={self.reread_on_query}, "
            f"file_path={self.file_path!r}, trace={self.trace_enabled}, log_level='{self.log_level}')"
        )

    def save(self, config_file: Optional[str] = None) -> None:
        """Saves the current configuration to a file.

        An existing target is first copied to `<target>.backup`.

        Raises:
            ConfigError: If file cannot be written.
        """
        target_file = config_file or self.config_file

        try:
            directory = os.path.dirname(target_file)
            if directory and not os.path.exists(directory):
                os.makedirs(directory, mode=0o755)

            if os.path.exists(target_file):
                try:
                    shutil.copy2(target_file, f"{target_file}.backup")
                except OSError as e:
                    if self.logger:
                        self.logger.warning("Failed to create backup of config file: %s", e)

            with open(target_file, "w", encoding="utf-8") as f:
                self.config.write(f)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration file '{target_file}': {e}") from e

        if self.logger:
            self.logger.info("Configuration saved to: %s", target_file)

    def reload(self) -> None:
        """Reloads configuration from the original file.

        The previous state is restored if the file no longer loads.

        Raises:
            ConfigError: If file cannot be reloaded or is now invalid.
        """
        previous = dict(self.__dict__)
        try:
            self.__init__(self.config_file)
        except ConfigError as e:
            self.__dict__.clear()
            self.__dict__.update(previous)
            raise ConfigError(f"Failed to reload configuration: {e}") from e

        if self.logger:
            self.logger.info("Configuration reloaded successfully")
