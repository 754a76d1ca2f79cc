"""Write the generated identifiers module"""

import logging
import os
from pathlib import Path
import subprocess
from tempfile import NamedTemporaryFile

from .common import Flags, FormatterError, OutputError

log = logging.getLogger(__name__)

# Names of the constants in the generated module, in the order used when
# writing a combination of flags.
FLAG_CONSTANTS = [
    (Flags.DEPRECATED, 'IS_DEPRECATED'),
    (Flags.OSI_APPROVED, 'IS_OSI_APPROVED'),
    (Flags.FSF_LIBRE, 'IS_FSF_LIBRE'),
    (Flags.COPYLEFT, 'IS_COPYLEFT'),
    (Flags.GNU, 'IS_GNU'),
]

HEADER = """\
# List fetched from https://github.com/spdx/license-list-data @ {tag}
#
# This file is generated from SPDX license data; don't edit it manually.
# To regenerate it, run:
#
#     spdx-tables {tag}

VERSION = {version!r}

IS_FSF_LIBRE = 0x1
IS_OSI_APPROVED = 0x2
IS_DEPRECATED = 0x4
IS_COPYLEFT = 0x8
IS_GNU = 0x10

"""


def flags_expr(flags, empty='0x0'):
    names = [name for flag, name in FLAG_CONSTANTS if flags & flag]
    return ' | '.join(names) or empty


def render(license_table, imprecise, exception_table, tag):
    """Produce the source of the identifiers module.

    Consumers rely on the order: version, flag constants, licenses,
    imprecise names, exceptions.
    """
    lines = [HEADER.format(tag=tag, version=license_table.version)]

    lines.append("LICENSES = (\n")
    for r in license_table.records:
        lines.append("    ({!r}, {!r}, {}),\n".format(
            r.id, r.name, flags_expr(r.flags)))
    lines.append(")\n\n")

    # Maps identifiers that aren't valid SPDX ids to valid ones
    lines.append("IMPRECISE_NAMES = (\n")
    for a in imprecise:
        lines.append("    ({!r}, {!r}),\n".format(a.imprecise, a.canonical))
    lines.append(")\n\n")

    lines.append("EXCEPTIONS = (\n")
    for r in exception_table.records:
        lines.append("    ({!r}, {}),\n".format(r.id, flags_expr(r.flags, '0')))
    lines.append(")\n")

    return ''.join(lines)


def _umask():
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write(path, text, formatter=None):
    """Write the module to *path*, then run *formatter* (a command) on it.

    The file is written to a temporary name and renamed into place, so a
    failure part way through doesn't leave a truncated module behind.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        f = NamedTemporaryFile('w', encoding='utf-8', dir=str(path.parent),
                               prefix='.tmp-', suffix=path.suffix,
                               delete=False)
    except OSError as e:
        raise OutputError(f"Could not write {path}: {e}") from e

    try:
        with f:
            f.write(text)
        # NamedTemporaryFile is private (0600); use the usual mode for new files
        os.chmod(f.name, 0o666 & ~_umask())
        if formatter:
            log.debug("Running formatter: %s", ' '.join(formatter))
            try:
                subprocess.check_call(list(formatter) + [f.name])
            except (OSError, subprocess.CalledProcessError) as e:
                raise FormatterError(f"failed to run formatter: {e}") from e
        os.replace(f.name, path)
    except OSError as e:
        os.unlink(f.name)
        raise OutputError(f"Could not write {path}: {e}") from e
    except BaseException:
        os.unlink(f.name)
        raise

    log.info("Wrote %s", path)
    return path
