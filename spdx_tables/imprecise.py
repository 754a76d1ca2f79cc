"""Load the hand-maintained table of imprecise license names"""

import logging
from pathlib import Path

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from .common import AliasEntry
from .config import ConfigError

log = logging.getLogger(__name__)

DEFAULT_IMPRECISE_FILE = Path(__file__).with_name('imprecise.toml')

SUPPORTED_FORMATS = {1}


def read_imprecise(path=None):
    """Read an imprecise names file, returning AliasEntry objects in file order
    """
    if path is None:
        path = DEFAULT_IMPRECISE_FILE
    path = Path(path)
    log.debug("Loading imprecise names from %s", path)
    try:
        content = path.read_text('utf-8')
    except OSError as e:
        raise ConfigError(f"Could not read {path}: {e}") from e
    try:
        d = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Could not parse {path}: {e}") from e
    return prep_imprecise(d, path)


def prep_imprecise(d, path='<imprecise names>'):
    fmt = d.get('format')
    if fmt not in SUPPORTED_FORMATS:
        raise ConfigError(
            f"{path}: unsupported imprecise names format {fmt!r}"
        )

    unknown_keys = set(d) - {'format', 'imprecise'}
    if unknown_keys:
        raise ConfigError(
            f"{path}: unrecognised keys {', '.join(sorted(unknown_keys))}"
        )

    tbl = d.get('imprecise')
    if not isinstance(tbl, dict):
        raise ConfigError(f"{path}: [imprecise] table is missing")

    entries = []
    for name, canonical in tbl.items():
        if not isinstance(canonical, str) or not canonical:
            raise ConfigError(
                f"{path}: {name!r} should map to a license ID, "
                f"not {canonical!r}"
            )
        entries.append(AliasEntry(name, canonical))

    log.debug("Read %d imprecise names", len(entries))
    return tuple(entries)


def check_targets(entries, license_table):
    """Warn about imprecise names which point at unknown license IDs"""
    known = {r.id for r in license_table.records}
    missing = [e for e in entries if e.canonical not in known]
    for e in missing:
        log.warning("Imprecise name %r maps to %r, which is not in the "
                    "license list", e.imprecise, e.canonical)
    return missing
