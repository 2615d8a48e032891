"""
Selector Classifier

Buckets a selector string into one of five syntactic categories. The
category decides which candidate generator handles a failed selector.
"""

from enum import Enum


class SelectorType(str, Enum):
    """Syntactic category of a CSS selector"""
    CLASS = "class"
    ID = "id"
    TAG = "tag"
    ATTRIBUTE = "attribute"
    COMPLEX = "complex"


def classify(selector: str) -> SelectorType:
    """Classify a selector by syntax alone (first matching rule wins)"""
    if selector.startswith('.'):
        return SelectorType.CLASS
    if selector.startswith('#'):
        return SelectorType.ID
    if '[' in selector and ']' in selector:
        return SelectorType.ATTRIBUTE
    if ' ' in selector or '>' in selector:
        return SelectorType.COMPLEX
    return SelectorType.TAG
