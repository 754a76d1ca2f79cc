"""Check the shape of documents fetched from the license list"""

from .common import MalformedDocument, UpstreamFlag

_JSON_TYPE_NAMES = {
    dict: 'an object',
    list: 'an array',
    str: 'a string',
}


def _describe(value, limit=80):
    s = repr(value)
    if len(s) > limit:
        s = s[:limit - 3] + '...'
    return s


def require_object(value, what='document'):
    """Return *value* if it is a JSON object, or raise MalformedDocument"""
    if not isinstance(value, dict):
        raise MalformedDocument(
            "Malformed JSON: {} should be an object, not {}".format(
                what, _describe(value))
        )
    return value


def require(obj, key, kind):
    """Get a required field from a JSON object, checking its type.

    The error names the missing or mistyped key and the object holding it.
    """
    try:
        value = obj[key]
    except KeyError:
        raise MalformedDocument(
            "Malformed JSON: {} lacks {}".format(_describe(obj), key)
        ) from None

    if not isinstance(value, kind):
        raise MalformedDocument(
            "Malformed JSON: {} should be {}, not {} (in {})".format(
                key, _JSON_TYPE_NAMES.get(kind, kind.__name__),
                _describe(value), _describe(obj))
        )
    return value


def optional_str(obj, key):
    value = obj.get(key)
    return value if isinstance(value, str) else None


def optional_flag(obj, key):
    return UpstreamFlag.from_json(obj.get(key))


def require_id(obj, key):
    """Get a required identifier, which must be encodable as UTF-8

    JSON allows lone surrogates like ``"\\ud800"``; these can't be sorted
    or written out, so they're treated as malformed.
    """
    value = require(obj, key, str)
    try:
        value.encode('utf-8')
    except UnicodeEncodeError:
        raise MalformedDocument(
            "Malformed JSON: {} is not valid Unicode: {} (in {})".format(
                key, _describe(value), _describe(obj))
        ) from None
    return value
