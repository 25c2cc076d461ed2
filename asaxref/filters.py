"""Wildcard filters applied to report rows before rendering."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .util import wildcard_match

ZONE_COLUMNS = ("source_zone", "dest_zone", "interface")
CATEGORY_COLUMNS = ("category", "match_type", "kind", "type")


@dataclass
class RowFilter:
    """Shell-style patterns ('web*', '*-dmz') matched case-insensitively.

    A pattern only constrains rows that carry the matching column; a zone
    filter leaves an object listing untouched, for example.
    """
    name: Optional[str] = None
    zone: Optional[str] = None
    category: Optional[str] = None

    def matches(self, row: Dict[str, Any]) -> bool:
        if self.name and "name" in row:
            if not wildcard_match(str(row["name"]), self.name):
                return False

        if self.zone:
            zones = [row[c] for c in ZONE_COLUMNS if c in row and row[c]]
            if any(c in row for c in ZONE_COLUMNS):
                if not any(wildcard_match(str(z), self.zone) for z in zones):
                    return False

        if self.category:
            column = next((c for c in CATEGORY_COLUMNS if c in row), None)
            if column is not None and not wildcard_match(str(row[column]), self.category):
                return False

        return True

    def apply(self, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return [r for r in rows if self.matches(r)]

    @property
    def active(self) -> bool:
        return bool(self.name or self.zone or self.category)
