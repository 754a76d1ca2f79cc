"""Look up identifiers in a generated identifiers module.

The generated module stores plain tuples; :class:`LicenseIndex` wraps them
in records and answers questions like "is this license copyleft?"::

    index = LicenseIndex.from_path('identifiers.py')
    index.license_id('GPL-3.0-only').is_copyleft
"""
from bisect import bisect_left
from importlib.machinery import SourceFileLoader
import importlib.util
from pathlib import Path

from .common import AliasEntry, ExceptionRecord, Flags, LicenseRecord, sort_key


class LicenseIndex:
    def __init__(self, version, licenses, imprecise=(), exceptions=()):
        self.version = version
        self.licenses = sorted(licenses, key=sort_key)
        self.imprecise = tuple(imprecise)
        self.exceptions = sorted(exceptions, key=sort_key)
        self._license_keys = [sort_key(r) for r in self.licenses]
        self._exception_keys = [sort_key(r) for r in self.exceptions]

    @classmethod
    def from_module(cls, module):
        return cls(
            version=module.VERSION,
            licenses=[LicenseRecord(i, n, Flags(f)) for i, n, f in module.LICENSES],
            imprecise=[AliasEntry(i, c) for i, c in module.IMPRECISE_NAMES],
            exceptions=[ExceptionRecord(i, Flags(f)) for i, f in module.EXCEPTIONS],
        )

    @classmethod
    def from_path(cls, path):
        path = Path(path)
        loader = SourceFileLoader('_spdx_identifiers', str(path))
        spec = importlib.util.spec_from_loader(loader.name, loader)
        module = importlib.util.module_from_spec(spec)
        loader.exec_module(module)
        return cls.from_module(module)

    @staticmethod
    def _find(records, keys, name):
        # Table ids are valid UTF-8, so a surrogate in name can never match
        key = name.encode('utf-8', 'surrogatepass')
        i = bisect_left(keys, key)
        if i < len(keys) and keys[i] == key:
            return records[i]
        return None

    def license_id(self, name):
        """Get the license record for an exact, case-sensitive SPDX id"""
        return self._find(self.licenses, self._license_keys, name)

    def exception_id(self, name):
        """Get the exception record for an exact, case-sensitive SPDX id"""
        return self._find(self.exceptions, self._exception_keys, name)

    def imprecise_license_id(self, name):
        """Resolve a name which isn't a valid SPDX id, if possible.

        Imprecise names are matched as case-insensitive prefixes of *name*,
        in table order. Returns ``(record, length)``, where length is the
        number of characters of *name* that matched, or None.
        """
        for alias in self.imprecise:
            n = len(alias.imprecise)
            if name[:n].lower() == alias.imprecise.lower():
                record = self.license_id(alias.canonical)
                if record is not None:
                    return record, n
        return None
