"""Generate SPDX license and exception lookup tables."""
import argparse
import logging
import pathlib
import sys

from .common import FetchError, FormatterError, MalformedDocument, OutputError
from .config import ConfigError
from .log import enable_colourful_output

__version__ = '0.4.0'

log = logging.getLogger(__name__)


def upstream_tag(s):
    if not s.startswith('v'):
        raise argparse.ArgumentTypeError(
            "{!r} is not a tag; tags look like v<version>, e.g. v3.23".format(s)
        )
    return s


def main(argv=None):
    ap = argparse.ArgumentParser(
        prog='spdx-tables',
        description="Regenerate the SPDX identifiers module from "
                    "spdx/license-list-data",
    )
    ap.add_argument('tag', nargs='?', type=upstream_tag,
        help="Tag of spdx/license-list-data to use, e.g. v3.23. "
             "Without it, the latest data is fetched."
    )
    ap.add_argument('-d', '--debug', action='store_true',
        help="Show diagnostic output"
    )
    ap.add_argument('-f', '--ini-file', type=pathlib.Path, default='pyproject.toml',
        help="Config file with a [tool.spdx-tables] table (default: pyproject.toml)"
    )
    ap.add_argument('-V', '--version', action='version',
                    version='spdx-tables ' + __version__)

    args = ap.parse_args(argv)

    enable_colourful_output(logging.DEBUG if args.debug else logging.INFO)

    log.debug("Parsed arguments %r", args)

    from .config import read_config
    from . import fetch, update

    if args.tag is None:
        log.warning("Fetching data from the %s branch of "
                    "spdx/license-list-data; consider specifying a tag "
                    "(e.g. v3.23)", fetch.DEFAULT_TAG)
        tag = fetch.DEFAULT_TAG
    else:
        log.debug("Using tag %r", args.tag)
        tag = args.tag

    try:
        config = read_config(args.ini_file)
        update.main(tag, config)
    except (ConfigError, FetchError, FormatterError, MalformedDocument,
            OutputError) as e:
        sys.exit('error: {}'.format(e))
