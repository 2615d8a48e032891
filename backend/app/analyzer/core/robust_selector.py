"""
Robust Selector Synthesizer

Type-agnostic safety net. For every element the original selector still
matches, build a selector from tag, first class and position among
same-tag siblings, then qualify it with the parent when that alone is
not unique enough.

    li                       only <li> in the page
    li.item:nth-child(3)     third of several <li class="item">
    ul#menu > li.item        2-3 matches, narrowed by the parent
"""

import logging
from typing import List, Optional

from bs4 import Tag

from .candidates import Candidate
from .document import (
    Document,
    children_of,
    class_tokens,
    css_identifier,
    element_id,
    parent_of,
    tag_name,
)

logger = logging.getLogger(__name__)

UNIQUE_CONFIDENCE = 0.85
PARENT_QUALIFIED_CONFIDENCE = 0.8

# Largest match count still worth narrowing with the parent
MAX_QUALIFIABLE_MATCHES = 3


def build_robust_selector(element: Tag) -> str:
    """tag[.firstClass][:nth-child(i)] for a single element"""
    robust_selector = tag_name(element)

    classes = class_tokens(element)
    if classes:
        robust_selector += f".{css_identifier(classes[0])}"

    parent = parent_of(element)
    if parent is not None:
        # Position is counted among same-tag siblings only
        siblings = [child for child in children_of(parent) if child.name == element.name]
        if len(siblings) > 1:
            position = next(i for i, sibling in enumerate(siblings) if sibling is element) + 1
            robust_selector += f":nth-child({position})"

    return robust_selector


def parent_identifier(parent: Tag) -> str:
    """parentTag#id, parentTag.firstClass or bare parentTag"""
    parent_tag = tag_name(parent)
    parent_id = element_id(parent)
    if parent_id:
        return f"{parent_tag}#{css_identifier(parent_id)}"

    classes = class_tokens(parent)
    if classes:
        return f"{parent_tag}.{css_identifier(classes[0])}"

    return parent_tag


def synthesize_for_element(document: Document, element: Tag) -> Optional[Candidate]:
    robust_selector = build_robust_selector(element)
    match_count = document.count(robust_selector)

    if match_count == 1:
        return Candidate(
            selector=robust_selector,
            confidence=UNIQUE_CONFIDENCE,
            element_count=1,
        )

    parent = parent_of(element)
    if 1 < match_count <= MAX_QUALIFIABLE_MATCHES and parent is not None:
        qualified = f"{parent_identifier(parent)} > {robust_selector}"
        return Candidate(
            selector=qualified,
            confidence=PARENT_QUALIFIED_CONFIDENCE,
            element_count=document.count(qualified),
        )

    return None


def synthesize_robust_selectors(document: Document, selector: str) -> List[Candidate]:
    """Robust selectors for every element `selector` still matches"""
    candidates = []

    for element in document.query(selector):
        try:
            candidate = synthesize_for_element(document, element)
        except Exception as e:
            logger.warning(f"Robust selector synthesis failed for <{element.name}>: {e}")
            continue

        if candidate is not None:
            candidates.append(candidate)

    return candidates
