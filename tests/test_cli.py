import logging

import pytest
import responses

from spdx_tables import fetch, main


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv('SPDX_TABLES_BASE_URL', raising=False)
    return tmp_path


def add_documents(tag, licenses_doc, exceptions_doc):
    responses.add(responses.GET, fetch.licenses_url(tag), json=licenses_doc)
    responses.add(responses.GET, fetch.exceptions_url(tag), json=exceptions_doc)


def test_help(capsys):
    with pytest.raises(SystemExit, match="^0$"):
        main(['--help'])
    out, err = capsys.readouterr()
    assert 'v3.23' in out
    assert '--debug' in out


@responses.activate
def test_tag(project_dir, licenses_doc, exceptions_doc):
    add_documents('v3.23', licenses_doc, exceptions_doc)
    main(['v3.23'])
    assert (project_dir / 'identifiers.py').is_file()


@responses.activate
def test_no_tag_warns(project_dir, licenses_doc, exceptions_doc, caplog):
    add_documents(fetch.DEFAULT_TAG, licenses_doc, exceptions_doc)
    with caplog.at_level(logging.WARNING):
        main([])
    assert any(r.levelno == logging.WARNING and 'consider specifying a tag'
               in r.getMessage() for r in caplog.records)
    assert (project_dir / 'identifiers.py').is_file()


@responses.activate
def test_config_output(project_dir, licenses_doc, exceptions_doc):
    (project_dir / 'pyproject.toml').write_text(
        '[tool.spdx-tables]\noutput = "lib/ids.py"\n', encoding='utf-8')
    add_documents('v3.23', licenses_doc, exceptions_doc)
    main(['-d', 'v3.23'])
    assert (project_dir / 'lib' / 'ids.py').is_file()


@pytest.mark.parametrize('argv', [['3.23'], ['--tag', 'v3.23'], ['v3.23', 'v3.24']])
@responses.activate
def test_usage_error(project_dir, argv, capsys):
    with pytest.raises(SystemExit) as e_info:
        main(argv)
    assert e_info.value.code == 2
    # Nothing is fetched
    assert len(responses.calls) == 0


@responses.activate
def test_fetch_error(project_dir):
    responses.add(responses.GET, fetch.licenses_url('v3.23'), status=404)
    with pytest.raises(SystemExit) as e_info:
        main(['v3.23'])
    assert str(e_info.value.code).startswith('error: Failed to download')
    assert not (project_dir / 'identifiers.py').exists()


@responses.activate
def test_malformed_document(project_dir, licenses_doc):
    del licenses_doc['licenseListVersion']
    responses.add(responses.GET, fetch.licenses_url('v3.23'), json=licenses_doc)
    with pytest.raises(SystemExit, match='lacks licenseListVersion'):
        main(['v3.23'])


def test_config_error(project_dir):
    (project_dir / 'pyproject.toml').write_text(
        '[tool.spdx-tables]\ntimeout = 0\n', encoding='utf-8')
    with pytest.raises(SystemExit, match='^error: timeout'):
        main(['v3.23'])


@responses.activate
def test_missing_imprecise_file(project_dir, licenses_doc, exceptions_doc):
    (project_dir / 'pyproject.toml').write_text(
        '[tool.spdx-tables]\nimprecise-file = "nope.toml"\n', encoding='utf-8')
    add_documents('v3.23', licenses_doc, exceptions_doc)
    with pytest.raises(SystemExit, match='^error: Could not read .*nope.toml'):
        main(['v3.23'])
    assert not (project_dir / 'identifiers.py').exists()


@responses.activate
def test_output_not_writable(project_dir, licenses_doc, exceptions_doc):
    (project_dir / 'pyproject.toml').write_text(
        '[tool.spdx-tables]\noutput = "blocker/ids.py"\n', encoding='utf-8')
    (project_dir / 'blocker').write_text('a file, not a directory', encoding='utf-8')
    add_documents('v3.23', licenses_doc, exceptions_doc)
    with pytest.raises(SystemExit, match='^error: Could not write'):
        main(['v3.23'])
