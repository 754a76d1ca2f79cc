import enum
from dataclasses import dataclass
from typing import Optional, Tuple


class FetchError(Exception):
    def __init__(self, msg, url):
        self.msg = msg
        self.url = url

    def __str__(self):
        return self.msg + ' ({})'.format(self.url)

class MalformedDocument(ValueError): pass
class DuplicateIdentifier(MalformedDocument): pass
class FormatterError(Exception): pass
class OutputError(Exception): pass


class Flags(enum.IntFlag):
    """Classification bits stored alongside each identifier"""
    FSF_LIBRE = 0x1
    OSI_APPROVED = 0x2
    DEPRECATED = 0x4
    COPYLEFT = 0x8
    GNU = 0x10


@dataclass(frozen=True)
class UpstreamFlag:
    """An optional boolean from the license list: true, false or absent.

    Anything that isn't a JSON boolean is treated as absent.
    """
    value: Optional[bool] = None

    @classmethod
    def from_json(cls, value):
        return cls(value if isinstance(value, bool) else None)

    @property
    def is_true(self):
        return self.value is True


@dataclass(frozen=True)
class LicenseRecord:
    id: str
    name: str
    flags: Flags

    @property
    def is_deprecated(self):
        return bool(self.flags & Flags.DEPRECATED)

    @property
    def is_osi_approved(self):
        return bool(self.flags & Flags.OSI_APPROVED)

    @property
    def is_fsf_free_libre(self):
        return bool(self.flags & Flags.FSF_LIBRE)

    @property
    def is_copyleft(self):
        return bool(self.flags & Flags.COPYLEFT)

    @property
    def is_gnu(self):
        return bool(self.flags & Flags.GNU)


@dataclass(frozen=True)
class ExceptionRecord:
    id: str
    flags: Flags

    @property
    def is_deprecated(self):
        return bool(self.flags & Flags.DEPRECATED)


@dataclass(frozen=True)
class AliasEntry:
    imprecise: str
    canonical: str


@dataclass(frozen=True)
class LicenseTable:
    version: str
    records: Tuple[LicenseRecord, ...]

    def __len__(self):
        return len(self.records)


@dataclass(frozen=True)
class ExceptionTable:
    records: Tuple[ExceptionRecord, ...]

    def __len__(self):
        return len(self.records)


def sort_key(record):
    """Byte-wise ordering of identifiers, matching the lookup's bisect"""
    return record.id.encode('utf-8')
