"""Build the sorted license and exception tables from the SPDX documents"""

import logging

from .classify import classify
from .common import (
    DuplicateIdentifier, ExceptionRecord, ExceptionTable, Flags,
    LicenseRecord, LicenseTable, sort_key,
)
from .validate import (
    optional_flag, optional_str, require, require_id, require_object,
)

log = logging.getLogger(__name__)

# Not (yet?) part of the SPDX license list, but used to say that no license
# information was given: https://github.com/spdx/spdx-spec/issues/50
NOASSERTION = 'NOASSERTION'


def _wants_invariants_variant(license_id):
    # Only the bare GFDL-<version> ids, e.g. GFDL-1.3 but not
    # GFDL-1.3-or-later. The length check is a heuristic that relies on the
    # current GFDL naming scheme.
    return license_id.startswith('GFDL-') and len(license_id) < 9


def _check_unique(records, what):
    seen = set()
    for r in records:
        if r.id in seen:
            raise DuplicateIdentifier(
                "Duplicate {} identifier: {!r}".format(what, r.id)
            )
        seen.add(r.id)


def license_records(lic):
    """Make the table records for one entry of the ``licenses`` array

    Usually this is a single record, but bare GFDL versions also get an
    ``-invariants`` variant, which the license list doesn't include.
    """
    lic = require_object(lic, 'license')
    license_id = require_id(lic, 'licenseId')
    name = optional_str(lic, 'name')
    if name is None:
        name = license_id
    log.debug("%r, %r", license_id, name)

    flags = classify(
        license_id,
        deprecated=optional_flag(lic, 'isDeprecatedLicenseId'),
        osi_approved=optional_flag(lic, 'isOsiApproved'),
        fsf_libre=optional_flag(lic, 'isFsfLibre'),
    )

    records = []
    if _wants_invariants_variant(license_id):
        records.append(LicenseRecord(license_id + '-invariants', name, flags))
    records.append(LicenseRecord(license_id, name, flags))
    return records


def build_license_table(document) -> LicenseTable:
    """Build the license table from a parsed ``licenses.json``"""
    document = require_object(document)
    licenses = require(document, 'licenses', list)
    log.info("Found %d licenses", len(licenses))

    records = []
    for lic in licenses:
        records.extend(license_records(lic))

    records.append(LicenseRecord(NOASSERTION, NOASSERTION, Flags(0)))
    records.sort(key=sort_key)
    _check_unique(records, 'license')

    version = require(document, 'licenseListVersion', str)
    log.debug("License list version %s", version)
    return LicenseTable(version=version, records=tuple(records))


def exception_record(exc):
    exc = require_object(exc, 'exception')
    exc_id = require_id(exc, 'licenseExceptionId')
    log.debug("%r, %r", exc_id, exc.get('name'))

    if optional_flag(exc, 'isDeprecatedLicenseId').is_true:
        flags = Flags.DEPRECATED
    else:
        flags = Flags(0)
    return ExceptionRecord(exc_id, flags)


def build_exception_table(document) -> ExceptionTable:
    """Build the exception table from a parsed ``exceptions.json``"""
    document = require_object(document)
    exceptions = require(document, 'exceptions', list)
    log.info("Found %d exceptions", len(exceptions))

    records = sorted((exception_record(e) for e in exceptions), key=sort_key)
    _check_unique(records, 'exception')
    return ExceptionTable(records=tuple(records))
