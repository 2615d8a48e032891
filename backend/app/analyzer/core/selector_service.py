"""
Selector Service

Entry point of the analyzer. Given a page and a selector that stopped
working, proposes replacement selectors ranked by confidence.

Pipeline:
1. Classify the failed selector (class / id / tag / attribute / complex)
2. Run the one generator registered for that category
3. Always run the robust-selector synthesizer as a safety net
4. Stable sort by confidence, highest first

On equal confidence, category-specific candidates come before robust
ones, each group in the order it was generated.
"""

import logging
from typing import List

from .candidates import Candidate
from .classifier import classify
from .document import Document
from .generators import GENERATORS
from .robust_selector import synthesize_robust_selectors

logger = logging.getLogger(__name__)


def analyze(document: Document, failed_selector: str) -> List[Candidate]:
    """
    Rank alternative selectors for `failed_selector` in `document`.

    Never raises: an unexpected fault is logged and yields [].
    """
    try:
        selector_type = classify(failed_selector)
        generator = GENERATORS[selector_type]
        logger.debug(f"Selector {failed_selector!r} classified as {selector_type.value}")

        candidates = generator(document, failed_selector)
        candidates.extend(synthesize_robust_selectors(document, failed_selector))

        # sorted() is stable, so ties keep generation order
        ranked = sorted(candidates, key=lambda c: c.confidence, reverse=True)
    except Exception as e:
        logger.exception(f"Analysis of {failed_selector!r} failed: {e}")
        return []

    logger.info(f"Found {len(ranked)} alternatives for {failed_selector!r}")
    return ranked


def analyze_html(html: str, failed_selector: str) -> List[Candidate]:
    """Parse markup and analyze it in one call"""
    return analyze(Document.from_html(html), failed_selector)
