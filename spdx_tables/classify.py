"""Sort license identifiers into the categories stored in the table"""

from .common import Flags, UpstreamFlag

# Copyleft licenses are taken from
# https://www.gnu.org/licenses/license-list.en.html
# No distinction is made between "weak" and "strong" copyleft.
COPYLEFT_PREFIXES = (
    'AGPL-',
    'CC-BY-NC-SA-',
    'CC-BY-SA-',
    'CECILL-',
    'CPL-',
    'CDDL-',
    'EUPL',
    'GFDL-',
    'GPL-',
    'LGPL-',
    'MPL-',
    'NPL-',
    'OSL-',
)

COPYLEFT_IDS = frozenset({
    'BSD-Protection',
    'MS-PL',
    'MS-RL',
    # OpenSSL is debated, but isn't really copyleft
    'Parity-6.0.0',
    'SISSL',
    'xinetd',
    'YPL-1.1',
})

GNU_PREFIXES = (
    'AGPL-',
    'GFDL-',
    'GPL-',
    'LGPL-',
)

if not set(GNU_PREFIXES) <= set(COPYLEFT_PREFIXES):
    raise ImportError("every GNU license should also be classed as copyleft")


def is_copyleft(license_id: str) -> bool:
    return license_id.startswith(COPYLEFT_PREFIXES) or license_id in COPYLEFT_IDS


def is_gnu(license_id: str) -> bool:
    return license_id.startswith(GNU_PREFIXES)


def classify(license_id: str,
             deprecated=UpstreamFlag(),
             osi_approved=UpstreamFlag(),
             fsf_libre=UpstreamFlag()) -> Flags:
    """Work out the flags for one license.

    The three upstream flags only count when present and true; copyleft and
    GNU membership come from the identifier itself.
    """
    flags = Flags(0)
    if deprecated.is_true:
        flags |= Flags.DEPRECATED
    if osi_approved.is_true:
        flags |= Flags.OSI_APPROVED
    if fsf_libre.is_true:
        flags |= Flags.FSF_LIBRE
    if is_copyleft(license_id):
        flags |= Flags.COPYLEFT
    if is_gnu(license_id):
        flags |= Flags.GNU
    return flags
