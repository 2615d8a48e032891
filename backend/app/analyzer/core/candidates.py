"""
Candidate selector record returned by every generation strategy.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Candidate:
    """A proposed replacement for a failed selector"""
    selector: str
    confidence: float  # 0.0 - 1.0
    element_count: int  # elements the selector matches right now

    def to_dict(self) -> Dict[str, Any]:
        return {
            "selector": self.selector,
            "confidence": self.confidence,
            "elementCount": self.element_count,
        }
