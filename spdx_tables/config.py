import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

try:
    import tomllib
except ImportError:
    import tomli as tomllib

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://raw.githubusercontent.com/spdx/license-list-data"
DEFAULT_OUTPUT = "identifiers.py"
DEFAULT_TIMEOUT = 30


class ConfigError(ValueError):
    pass


allowed_fields = {
    'output',
    'base-url',
    'imprecise-file',
    'timeout',
    'formatter',
}


@dataclass
class Config:
    output: Path = Path(DEFAULT_OUTPUT)
    base_url: str = DEFAULT_BASE_URL
    imprecise_file: Optional[Path] = None
    timeout: float = DEFAULT_TIMEOUT
    formatter: List[str] = field(default_factory=list)


def read_config(path):
    """Read the ``[tool.spdx-tables]`` table from a pyproject.toml file.

    A missing file or table gives the default settings. Relative paths are
    resolved against the directory containing the file.
    """
    path = Path(path)
    if path.is_file():
        log.debug("Reading config from %s", path)
        try:
            d = tomllib.loads(path.read_text('utf-8'))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Could not parse {path}: {e}") from e
    else:
        log.debug("No config file at %s, using defaults", path)
        d = {}
    return prep_toml_config(d, path)


def prep_toml_config(d, path):
    dtool = d.get('tool', {}).get('spdx-tables', {})
    unknown_keys = set(dtool) - allowed_fields
    if unknown_keys:
        raise ConfigError(
            "Unrecognised keys in [tool.spdx-tables]: {}".format(
                ', '.join(sorted(unknown_keys)))
        )

    base_dir = path.parent
    cfg = Config(output=base_dir / DEFAULT_OUTPUT)

    if 'output' in dtool:
        _check_type(dtool, 'output', str)
        cfg.output = base_dir / dtool['output']

    if 'base-url' in dtool:
        _check_type(dtool, 'base-url', str)
        cfg.base_url = dtool['base-url']

    if 'imprecise-file' in dtool:
        _check_type(dtool, 'imprecise-file', str)
        cfg.imprecise_file = base_dir / dtool['imprecise-file']

    if 'timeout' in dtool:
        timeout = dtool['timeout']
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) \
                or timeout <= 0:
            raise ConfigError(
                f"timeout field should be a positive number, not {timeout!r}"
            )
        cfg.timeout = timeout

    if 'formatter' in dtool:
        _check_list_of_str(dtool, 'formatter')
        cfg.formatter = dtool['formatter']

    if 'SPDX_TABLES_BASE_URL' in os.environ:
        cfg.base_url = os.environ['SPDX_TABLES_BASE_URL']
        log.debug("Using base URL %s from SPDX_TABLES_BASE_URL", cfg.base_url)

    cfg.base_url = cfg.base_url.rstrip('/')
    if not cfg.base_url.startswith(('http://', 'https://')):
        raise ConfigError(
            f"base-url {cfg.base_url!r} doesn't start with https:// or http://"
        )

    return cfg


def _check_type(d, field_name, cls):
    if not isinstance(d[field_name], cls):
        raise ConfigError(
            f"{field_name} field should be {cls}, not {type(d[field_name])}"
        )

def _check_list_of_str(d, field_name):
    if not isinstance(d[field_name], list) or not all(
        isinstance(e, str) for e in d[field_name]
    ):
        raise ConfigError(
            f"{field_name} field should be a list of strings"
        )
