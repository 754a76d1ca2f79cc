"""Download the SPDX license list documents"""

import logging

import requests

from .common import FetchError, MalformedDocument
from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .validate import require_object

log = logging.getLogger(__name__)

# The floating reference, used if no tag is given
DEFAULT_TAG = 'main'


def document_url(name, tag=DEFAULT_TAG, base_url=DEFAULT_BASE_URL):
    return "{}/{}/json/{}.json".format(base_url.rstrip('/'), tag, name)


def licenses_url(tag=DEFAULT_TAG, base_url=DEFAULT_BASE_URL):
    return document_url('licenses', tag, base_url)


def exceptions_url(tag=DEFAULT_TAG, base_url=DEFAULT_BASE_URL):
    return document_url('exceptions', tag, base_url)


def download(url, timeout=DEFAULT_TIMEOUT):
    """Fetch a JSON document, which must be an object at the top level"""
    log.info("Fetching %s", url)
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"Failed to download: {e}", url) from e

    try:
        json = resp.json()
    except ValueError as e:
        raise MalformedDocument(f"Malformed JSON from {url}: {e}") from e

    json = require_object(json)
    log.debug("#json == %d", len(json))
    return json
