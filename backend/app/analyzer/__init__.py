"""
Selector Analyzer

Self-healing support for UI automation and scraping scripts: given a page
and a CSS selector that no longer matches, proposes ranked replacement
selectors that match the page as it is now.

- Classifies the failed selector by syntax
- Generates alternatives with a per-category strategy
- Always adds structurally synthesized "robust" selectors
- Ranks everything by a heuristic confidence score
"""

from .core.candidates import Candidate
from .core.classifier import SelectorType, classify
from .core.document import Document
from .core.selector_service import analyze, analyze_html
from .knowledge.mapping_store import MappingStore, MappingStoreError, SelectorMapping
from .config import AnalyzerSettings, get_settings

__all__ = [
    # Core
    "Candidate",
    "SelectorType",
    "classify",
    "Document",
    "analyze",
    "analyze_html",
    # Knowledge
    "MappingStore",
    "MappingStoreError",
    "SelectorMapping",
    # Config
    "AnalyzerSettings",
    "get_settings"
]

__version__ = "1.0.0"
