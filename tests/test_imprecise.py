import logging
from pathlib import Path

import pytest

from spdx_tables.common import AliasEntry
from spdx_tables.config import ConfigError
from spdx_tables.imprecise import (
    DEFAULT_IMPRECISE_FILE, check_targets, prep_imprecise, read_imprecise,
)
from spdx_tables.tables import build_license_table

samples_dir = Path(__file__).parent / 'samples' / 'imprecise'


def test_read_in_file_order():
    entries = read_imprecise(samples_dir / 'short.toml')
    assert entries == (
        AliasEntry('apache2', 'Apache-2.0'),
        AliasEntry('mit', 'MIT'),
        AliasEntry('gplv3', 'GPL-3.0-only'),
    )


def test_default_file():
    assert DEFAULT_IMPRECISE_FILE.is_file()
    entries = read_imprecise()
    assert entries[0] == AliasEntry('agpl-3.0', 'AGPL-3.0-only')
    assert AliasEntry('apache2', 'Apache-2.0') in entries


def test_default_file_shorter_names_come_later():
    # Names are matched as prefixes in order, so a shorter name listed first
    # would hide any longer name starting with it.
    names = [e.imprecise.lower() for e in read_imprecise()]
    for i, earlier in enumerate(names):
        for later in names[i + 1:]:
            assert not later.startswith(earlier), (earlier, later)


def test_bad_format():
    with pytest.raises(ConfigError, match='unsupported imprecise names format 2'):
        read_imprecise(samples_dir / 'bad-format.toml')


def test_bad_target():
    with pytest.raises(ConfigError, match="'mit' should map to a license ID"):
        read_imprecise(samples_dir / 'bad-target.toml')


def test_unparseable(tmp_path):
    p = tmp_path / 'names.toml'
    p.write_text('format = 1\n[imprecise\n', encoding='utf-8')
    with pytest.raises(ConfigError, match='Could not parse'):
        read_imprecise(p)


def test_prep_imprecise_structure():
    with pytest.raises(ConfigError, match=r'\[imprecise\] table is missing'):
        prep_imprecise({'format': 1})

    with pytest.raises(ConfigError, match='unrecognised keys extra'):
        prep_imprecise({'format': 1, 'imprecise': {}, 'extra': 'x'})

    assert prep_imprecise({'format': 1, 'imprecise': {}}) == ()


def test_check_targets(licenses_doc, caplog):
    table = build_license_table(licenses_doc)
    entries = read_imprecise(samples_dir / 'unknown-target.toml')
    with caplog.at_level(logging.WARNING):
        missing = check_targets(entries, table)
    assert missing == [AliasEntry('bsd0', 'BSD-0-Clause')]
    assert any("BSD-0-Clause" in r.getMessage() for r in caplog.records)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match='Could not read'):
        read_imprecise(tmp_path / 'nope.toml')
