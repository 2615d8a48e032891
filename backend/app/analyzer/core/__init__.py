"""
Core Analyzer Module

Classifies a failed selector, generates alternatives with the matching
strategy plus the robust-selector fallback, and ranks the result.
"""

from .candidates import Candidate
from .classifier import SelectorType, classify
from .document import Document
from .generators import GENERATORS
from .robust_selector import synthesize_robust_selectors
from .selector_service import analyze, analyze_html
from .similarity import confidence, levenshtein_distance

__all__ = [
    "Candidate",
    "SelectorType",
    "classify",
    "Document",
    "GENERATORS",
    "synthesize_robust_selectors",
    "analyze",
    "analyze_html",
    "confidence",
    "levenshtein_distance"
]
