"""
Mapping Store - Persisted selector replacements

Precomputed `original selector -> replacement selector` pairs, grouped by
version and kept in a single JSON file. The API serves them read-only;
they are written by the import script.
"""

import json
import logging
import os
import threading
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

MAPPINGS_FILE = "mappings.json"


class MappingStoreError(Exception):
    """Raised when stored mappings cannot be read or written"""


@dataclass
class SelectorMapping:
    """A stored replacement for a selector"""
    original_selector: str
    replacement_selector: str
    version: Optional[str] = None
    confidence: float = 1.0
    created_at: str = field(default_factory=lambda: datetime.now().isoformat())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SelectorMapping":
        original = data.get("original_selector")
        replacement = data.get("replacement_selector")
        if not original or not replacement:
            raise ValueError("original_selector and replacement_selector are required")

        created_at = data.get("created_at") or datetime.now().isoformat()
        return cls(
            original_selector=original,
            replacement_selector=replacement,
            version=data.get("version"),
            confidence=float(data.get("confidence", 1.0)),
            created_at=created_at,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class MappingStore:
    """File-backed table of selector mappings"""

    def __init__(self, mappings_dir: str = "data/selector_mappings"):
        self.mappings_dir = Path(mappings_dir)
        self.mappings_dir.mkdir(parents=True, exist_ok=True)
        self.mappings_file = self.mappings_dir / MAPPINGS_FILE
        self._lock = threading.Lock()

    def _load(self) -> List[SelectorMapping]:
        if not self.mappings_file.exists():
            return []

        data = json.loads(self.mappings_file.read_text(encoding='utf-8'))
        if isinstance(data, dict):
            data = data.get("mappings", [])
        if not isinstance(data, list):
            raise ValueError(f"Unexpected mappings format in {self.mappings_file}")

        return [SelectorMapping.from_dict(item) for item in data]

    def _save(self, mappings: List[SelectorMapping]):
        """Write the whole table atomically"""
        tmp_file = self.mappings_file.with_suffix(".json.tmp")
        payload = {"mappings": [m.to_dict() for m in mappings]}
        tmp_file.write_text(json.dumps(payload, indent=2), encoding='utf-8')
        os.replace(tmp_file, self.mappings_file)

    def get_mappings(self, version: Optional[str] = None) -> List[SelectorMapping]:
        """All mappings, or only those of `version` when given"""
        try:
            with self._lock:
                mappings = self._load()
        except Exception as e:
            logger.error(f"Error getting mappings: {e}")
            raise MappingStoreError("Failed to retrieve mappings") from e

        if version:
            return [m for m in mappings if m.version == version]
        return mappings

    def versions(self) -> List[str]:
        """Distinct versions in first-seen order"""
        seen = dict.fromkeys(m.version for m in self.get_mappings() if m.version)
        return list(seen)

    def add_mappings(self, new_mappings: Iterable[SelectorMapping]) -> int:
        """Append mappings and persist; returns how many were added"""
        new_mappings = list(new_mappings)
        try:
            with self._lock:
                mappings = self._load()
                mappings.extend(new_mappings)
                self._save(mappings)
        except Exception as e:
            logger.error(f"Error saving mappings: {e}")
            raise MappingStoreError("Failed to store mappings") from e

        logger.info(f"Stored {len(new_mappings)} selector mappings")
        return len(new_mappings)

    def add_mapping(
        self,
        original_selector: str,
        replacement_selector: str,
        version: Optional[str] = None,
        confidence: float = 1.0
    ) -> SelectorMapping:
        mapping = SelectorMapping(
            original_selector=original_selector,
            replacement_selector=replacement_selector,
            version=version,
            confidence=confidence,
        )
        self.add_mappings([mapping])
        return mapping
