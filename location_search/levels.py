"""
Administrative levels and ancestor filters.

Levels form a closed set ordered by depth:
    STATE (0) → DISTRICT (1) → SUBDISTRICT (2) → VILLAGE (3)

Each level knows the record field holding its value (`field_name`), the ancestor
chain leading to it (`path`) and its `depth`.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union


class Level(Enum):
    """Administrative levels, coarsest first."""

    STATE = ('state', 'state', 0)
    DISTRICT = ('district', 'state->district', 1)
    SUBDISTRICT = ('subDistrict', 'state->district->subDistrict', 2)
    VILLAGE = ('village', 'state->district->subDistrict->village', 3)

    def __init__(self, field_name: str, path: str, depth: int):
        # Enum reserves `name` for the member name ("SUBDISTRICT")
        self.field_name = field_name
        self.path = path
        self.depth = depth

    @property
    def fields(self) -> List[str]:
        """Record keys for this level, coarsest first."""
        return self.path.split('->')

    def describe(self) -> Dict[str, Any]:
        return {'name': self.field_name, 'path': self.path, 'depth': self.depth}

    @classmethod
    def from_name(cls, value: Union[str, 'Level']) -> 'Level':
        """
        Resolve a level from its field name or member name (case-insensitive).

        Example:
            >>> Level.from_name('subDistrict')
            <Level.SUBDISTRICT: ('subDistrict', 'state->district->subDistrict', 2)>
            >>> Level.from_name('village') is Level.VILLAGE
            True

        Raises:
            ValueError: if no level has that name
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Unknown level: {value!r}")

        wanted = value.strip().lower()
        for level in cls:
            if wanted in (level.field_name.lower(), level.name.lower()):
                return level
        raise ValueError(f"Unknown level: {value!r}")


@dataclass(frozen=True)
class Filter:
    """
    Ancestor constraint: keep records whose `level` field contains `query`
    (case-insensitive). Only applied when searching a deeper level.
    """

    level: Level
    query: str

    @classmethod
    def coerce(cls, value: Union['Filter', Dict[str, Any]]) -> 'Filter':
        """
        Build a Filter from a Filter or a {'level': ..., 'query': ...} mapping.

        Raises:
            ValueError: on unknown level or missing keys
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, dict) or 'level' not in value or 'query' not in value:
            raise ValueError(f"Filter must have 'level' and 'query': {value!r}")
        return cls(level=Level.from_name(value['level']), query=str(value['query']))


def coerce_filters(filters: Optional[Iterable[Union[Filter, Dict[str, Any]]]]) -> Optional[List[Filter]]:
    """Normalize host-supplied filters; None stays None."""
    if filters is None:
        return None
    return [Filter.coerce(f) for f in filters]
