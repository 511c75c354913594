"""
HSN catalog service

Read-only lookup of 8-digit HSN codes to their category, licensing and
global prohibition/restriction flags. The catalog is built once from a
list of entries and never mutated afterwards.
"""
import logging
import re
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional

from ..models.hsn_code import HSNEntry

logger = logging.getLogger(__name__)

_HSN_FORMAT = re.compile(r"[0-9]{8}")


def is_well_formed(code) -> bool:
    """Return True when ``code`` is exactly 8 ASCII digits"""
    if not isinstance(code, str):
        return False
    return _HSN_FORMAT.fullmatch(code) is not None


class HSNCatalog:
    """Immutable HSN code catalog"""

    def __init__(self, entries: Iterable[HSNEntry]):
        table: Dict[str, HSNEntry] = {}
        for entry in entries:
            if entry.code in table:
                raise ValueError(f"Duplicate HSN code in catalog: {entry.code}")
            table[entry.code] = entry
        self._entries = MappingProxyType(table)
        logger.info(f"HSN catalog initialized with {len(table)} codes")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, code) -> bool:
        return code in self._entries

    def __iter__(self) -> Iterator[HSNEntry]:
        return iter(self._entries.values())

    @staticmethod
    def is_well_formed(code) -> bool:
        return is_well_formed(code)

    def lookup(self, code: str) -> Optional[HSNEntry]:
        """Return the entry for ``code``, or None when it is not catalogued"""
        return self._entries.get(code)

    def search_by_free_text(self, text: str) -> List[HSNEntry]:
        """
        Case-insensitive substring search over descriptions and common names

        Args:
            text: Search term; surrounding whitespace is ignored

        Returns:
            Matching entries in catalog order, each at most once
        """
        term = text.lower().strip()
        results = []
        for entry in self._entries.values():
            if term in entry.description.lower() or any(
                term in name.lower() for name in entry.common_names
            ):
                results.append(entry)
        logger.debug(f"HSN search for '{term}' matched {len(results)} codes")
        return results

    def categories(self) -> List[str]:
        """Distinct categories in catalog order"""
        seen: List[str] = []
        for entry in self._entries.values():
            if entry.category not in seen:
                seen.append(entry.category)
        return seen

    def entries_in_category(self, category: str) -> List[HSNEntry]:
        return [entry for entry in self._entries.values() if entry.category == category]
