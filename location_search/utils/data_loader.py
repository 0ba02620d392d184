"""
Dataset loading and record store construction.

The source dataset is a JSON array of states:

    [{"state": "...",
      "districts": [{"district": "...",
                     "subDistricts": [{"subDistrict": "...",
                                       "villages": ["...", null, ...]}]}]}]

It is flattened once into four ordered record lists (one per level) while
every place name is inserted into the shared trie.
"""
import json
import time
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from ..levels import Level
from .text_utils import fold_case
from .trie import Trie

logger = logging.getLogger(__name__)


class DatasetError(ValueError):
    """Raised when the location dataset cannot be read or is malformed."""


class RecordStore:
    """Flattened, read-only record lists keyed by level."""

    def __init__(self):
        self._records: Dict[Level, List[Dict[str, str]]] = {level: [] for level in Level}

    def add(self, level: Level, record: Dict[str, str]):
        self._records[level].append(record)

    def records(self, level: Level) -> List[Dict[str, str]]:
        """
        Records for a level, in source traversal order.

        Raises:
            TypeError: if `level` is not a Level member
        """
        if not isinstance(level, Level):
            raise TypeError(f"level must be a Level, got {level!r}")
        return self._records[level]

    def counts(self) -> Dict[str, int]:
        return {level.field_name: len(records) for level, records in self._records.items()}


def load_location_tree(file_path: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Read and parse the dataset file.

    Args:
        file_path: Path to the JSON dataset

    Returns:
        Parsed list of state objects

    Raises:
        DatasetError: if the file is missing or not valid JSON
    """
    path = Path(file_path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except OSError as e:
        raise DatasetError(f"Cannot read dataset '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise DatasetError(f"Invalid JSON in dataset '{path}': {e}") from e


def _require(entry: Any, key: str, expected: type, where: str) -> Any:
    if not isinstance(entry, dict):
        raise DatasetError(f"Expected an object at {where}, got {type(entry).__name__}")
    if key not in entry:
        raise DatasetError(f"Missing '{key}' at {where}")
    value = entry[key]
    if not isinstance(value, expected):
        raise DatasetError(
            f"'{key}' at {where} must be {expected.__name__}, got {type(value).__name__}"
        )
    return value


def build_record_store(tree: List[Dict[str, Any]], trie: Trie) -> RecordStore:
    """
    Flatten the location tree into a RecordStore and fill the trie.

    Single top-to-bottom pass. Null village entries are skipped entirely
    (no record, no trie entry). Any malformed node aborts the build.

    Args:
        tree: Parsed dataset (list of state objects)
        trie: Trie receiving every place name, lowercased

    Returns:
        Populated RecordStore

    Raises:
        DatasetError: if the hierarchy is missing fields or has wrong types
    """
    if not isinstance(tree, list):
        raise DatasetError(f"Dataset root must be a list of states, got {type(tree).__name__}")

    start_time = time.time()
    store = RecordStore()
    skipped_villages = 0

    for s_idx, state_data in enumerate(tree):
        where = f"states[{s_idx}]"
        state = _require(state_data, 'state', str, where)
        districts = _require(state_data, 'districts', list, where)

        store.add(Level.STATE, {'state': state})
        trie.insert(fold_case(state))

        for d_idx, district_data in enumerate(districts):
            where = f"states[{s_idx}].districts[{d_idx}]"
            district = _require(district_data, 'district', str, where)
            sub_districts = _require(district_data, 'subDistricts', list, where)

            store.add(Level.DISTRICT, {'state': state, 'district': district})
            trie.insert(fold_case(district))

            for sd_idx, sub_district_data in enumerate(sub_districts):
                where = f"states[{s_idx}].districts[{d_idx}].subDistricts[{sd_idx}]"
                sub_district = _require(sub_district_data, 'subDistrict', str, where)
                villages = _require(sub_district_data, 'villages', list, where)

                store.add(Level.SUBDISTRICT, {
                    'state': state,
                    'district': district,
                    'subDistrict': sub_district,
                })
                trie.insert(fold_case(sub_district))

                for v_idx, village in enumerate(villages):
                    if village is None:
                        skipped_villages += 1
                        continue
                    if not isinstance(village, str):
                        raise DatasetError(
                            f"Village at {where}.villages[{v_idx}] must be a string or null, "
                            f"got {type(village).__name__}"
                        )

                    store.add(Level.VILLAGE, {
                        'state': state,
                        'district': district,
                        'subDistrict': sub_district,
                        'village': village,
                    })
                    trie.insert(fold_case(village))

    from ..config import DEBUG_BUILD

    if DEBUG_BUILD:
        elapsed_ms = (time.time() - start_time) * 1000
        logger.info(
            f"[BUILD] Records {store.counts()}, trie words={len(trie)}, "
            f"null villages skipped={skipped_villages} ({elapsed_ms:.1f}ms)"
        )

    return store
