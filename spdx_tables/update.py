"""spdx-tables - regenerate the identifiers module"""

import logging
from pathlib import Path

from . import emit, fetch
from .config import Config
from .imprecise import check_targets, read_imprecise
from .tables import build_exception_table, build_license_table

log = logging.getLogger(__name__)


def main(tag=fetch.DEFAULT_TAG, config=None) -> Path:
    """Fetch the license list at *tag* and write the identifiers module.

    Steps run one after another and any failure propagates; the output file
    is only written once everything else has succeeded.
    """
    if config is None:
        config = Config()

    licenses_doc = fetch.download(
        fetch.licenses_url(tag, config.base_url), timeout=config.timeout)
    license_table = build_license_table(licenses_doc)

    exceptions_doc = fetch.download(
        fetch.exceptions_url(tag, config.base_url), timeout=config.timeout)
    exception_table = build_exception_table(exceptions_doc)

    imprecise = read_imprecise(config.imprecise_file)
    check_targets(imprecise, license_table)

    text = emit.render(license_table, imprecise, exception_table, tag)
    return emit.write(config.output, text, formatter=config.formatter)
