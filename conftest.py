import os

import pytest

CONFIG_TEMPLATE = """
[SEARCH]
ALGORITHM = {algorithm}
ALPHABET_SIZE = {alphabet_size}
CASE_SENSITIVE = {case_sensitive}
REREAD_ON_QUERY = {reread_on_query}
FILE_PATH = {file_path}

[TRACE]
ENABLED = {trace_enabled}
SHOW_ALIGNMENT = {show_alignment}

[LOGGING]
LEVEL = {log_level}
FILE = {log_file}
"""

CONFIG_DEFAULTS = {
    "algorithm": "boyermoore",
    "alphabet_size": "256",
    "case_sensitive": "true",
    "reread_on_query": "false",
    "file_path": "",
    "trace_enabled": "true",
    "show_alignment": "true",
    "log_level": "INFO",
    "log_file": "",
}


@pytest.fixture
def write_config(tmp_path):
    """Factory fixture writing a config file; keyword arguments override the defaults."""
    def _write(name="search.conf", **overrides):
        values = dict(CONFIG_DEFAULTS, **overrides)
        config_file = os.path.join(str(tmp_path), name)
        with open(config_file, 'w') as f:
            f.write(CONFIG_TEMPLATE.format(**values))
        return config_file
    return _write
