"""
Candidate Generators

One strategy per selector category. Each takes the document and the
failed selector and returns zero or more Candidates that match the
document as it is now:

- class:      naming-convention variants + text-hint fallback
- id:         separator/case variants + substring fallback
- tag:        stable test attributes and text of the matching elements
- attribute:  alternative identifying attributes on the matching elements
- complex:    leaf-only recursion + simplified two-part selector
"""

import logging
import re
from typing import Callable, Dict, List, Optional, Tuple

from .candidates import Candidate
from .classifier import SelectorType, classify
from .document import (
    Document,
    attribute,
    class_tokens,
    css_identifier,
    element_id,
    quote_css_string,
    tag_name,
    text_content,
)
from .similarity import confidence

logger = logging.getLogger(__name__)


# Common component-library renames: (old, new)
CLASS_SYNONYMS: List[Tuple[str, str]] = [
    ("button", "btn"),
    ("item", "card"),
    ("submit", "primary"),
]

# BEM element / modifier suffixes
BEM_SUFFIXES = ["__item", "--primary"]

# Identifying attributes worth proposing, in priority order
ALTERNATIVE_ATTRIBUTES = ["data-testid", "data-cy", "id", "name", "role"]

# [name] or [name=value] / [name="value"] / [name='value']
ATTRIBUTE_PATTERN = re.compile(r'\[([^\]=\s]+?)(?:=["\']?([^"\'\]]*)["\']?)?\]')

# Complex selectors split on descendant whitespace and child combinators
COMBINATOR_PATTERN = re.compile(r'\s*>\s*|\s+')

ID_CONFIDENCE = 0.9
ID_SUBSTRING_CONFIDENCE = 0.7
TEXT_HINT_CONFIDENCE = 0.6
TEST_ID_CONFIDENCE = 0.95
NAME_CONFIDENCE = 0.85
CONTAINS_CONFIDENCE = 0.7
DATA_ATTRIBUTE_CONFIDENCE = 0.9
PLAIN_ATTRIBUTE_CONFIDENCE = 0.75
SIMPLIFIED_COMPLEX_CONFIDENCE = 0.8


# ==================== Naming Conventions ====================

def camel_to_kebab(name: str) -> str:
    """submitButton -> submit-button"""
    return re.sub(r'([a-z])([A-Z])', r'\1-\2', name).lower()


def kebab_to_camel(name: str) -> str:
    """submit-button -> submitButton"""
    return re.sub(r'-([a-zA-Z0-9])', lambda m: m.group(1).upper(), name)


def toggle_case_convention(name: str) -> str:
    """Flip between kebab-case and camelCase"""
    if '-' in name:
        return kebab_to_camel(name)
    return camel_to_kebab(name)


def class_name_variants(original_class: str) -> List[str]:
    """Renamed class candidates, de-duplicated in generation order"""
    variants = [original_class.replace(old, new) for old, new in CLASS_SYNONYMS]
    variants.extend(f"{original_class}{suffix}" for suffix in BEM_SUFFIXES)
    variants.append(toggle_case_convention(original_class))
    return list(dict.fromkeys(variants))


def id_variants(original_id: str) -> List[str]:
    variants = [
        original_id.replace('-', '_'),
        original_id.replace('_', '-'),
        original_id.lower(),
        camel_to_kebab(original_id),
        kebab_to_camel(original_id),
    ]
    return list(dict.fromkeys(variants))


def text_hint(name: str) -> str:
    """Human-readable words hidden in a class name (primaryButton -> primary button)"""
    hint = name.replace('-', ' ')
    hint = re.sub(r'(?<=.)([A-Z])', r' \1', hint)
    return hint.lower()


# ==================== Generators ====================

def generate_class_candidates(document: Document, selector: str) -> List[Candidate]:
    """Alternatives for a failed `.class` selector"""
    original_class = selector[1:]
    candidates = []

    for name in class_name_variants(original_class):
        class_selector = f".{css_identifier(name)}"
        matches = document.query(class_selector)
        if matches:
            candidates.append(Candidate(
                selector=class_selector,
                confidence=confidence(name, original_class),
                element_count=len(matches),
            ))

    # Semantic fallback: elements whose text mentions the class words
    hint = text_hint(original_class)
    if not hint.strip():
        return candidates

    for element in document.all_elements():
        if hint not in text_content(element).lower():
            continue
        for cls in class_tokens(element):
            class_selector = f".{css_identifier(cls)}"
            candidates.append(Candidate(
                selector=class_selector,
                confidence=TEXT_HINT_CONFIDENCE,
                element_count=document.count(class_selector),
            ))

    return candidates


def generate_id_candidates(document: Document, selector: str) -> List[Candidate]:
    """Alternatives for a failed `#id` selector"""
    original_id = selector[1:]
    candidates = []

    for variant in id_variants(original_id):
        if document.get_element_by_id(variant) is not None:
            candidates.append(Candidate(
                selector=f"#{css_identifier(variant)}",
                confidence=ID_CONFIDENCE,
                element_count=1,
            ))

    if candidates:
        return candidates

    for element in document.elements_with_id():
        current_id = element_id(element)
        if not current_id:
            continue
        if current_id in original_id or original_id in current_id:
            candidates.append(Candidate(
                selector=f"#{css_identifier(current_id)}",
                confidence=ID_SUBSTRING_CONFIDENCE,
                element_count=1,
            ))

    return candidates


def generate_tag_candidates(document: Document, selector: str) -> List[Candidate]:
    """Stable attribute and text selectors for elements of a bare tag"""
    elements = document.query(selector)
    candidates = []

    for element in elements:
        test_id = attribute(element, 'data-testid')
        name = attribute(element, 'name')
        if test_id is not None:
            candidate_selector = f"[data-testid={quote_css_string(test_id)}]"
            candidates.append(Candidate(
                selector=candidate_selector,
                confidence=TEST_ID_CONFIDENCE,
                element_count=document.count(candidate_selector),
            ))
        elif name is not None:
            candidate_selector = f"{tag_name(element)}[name={quote_css_string(name)}]"
            candidates.append(Candidate(
                selector=candidate_selector,
                confidence=NAME_CONFIDENCE,
                element_count=document.count(candidate_selector),
            ))

    # :contains() is a non-standard extension; strict CSS engines may reject it
    for element in elements:
        text = text_content(element).strip()
        if text:
            candidates.append(Candidate(
                selector=f"{tag_name(element)}:contains({quote_css_string(text)})",
                confidence=CONTAINS_CONFIDENCE,
                element_count=1,
            ))

    return candidates


def parse_attribute_selector(selector: str) -> Optional[Tuple[str, Optional[str]]]:
    """Extract (name, value) from `[name]` / `[name="value"]`, None if unparsable"""
    match = ATTRIBUTE_PATTERN.search(selector)
    if not match:
        return None
    return match.group(1), match.group(2)


def generate_attribute_candidates(document: Document, selector: str) -> List[Candidate]:
    """Other identifying attributes carried by the elements an attribute selector targets"""
    parsed = parse_attribute_selector(selector)
    if parsed is None:
        logger.debug(f"Could not parse attribute selector {selector!r}")
        return []

    name, value = parsed
    candidates = []

    for element in document.query(f"[{name}]"):
        if value is not None and attribute(element, name) != value:
            continue

        for alt_name in ALTERNATIVE_ATTRIBUTES:
            alt_value = attribute(element, alt_name)
            if alt_value is None:
                continue
            candidate_selector = f"[{alt_name}={quote_css_string(alt_value)}]"
            candidates.append(Candidate(
                selector=candidate_selector,
                confidence=(
                    DATA_ATTRIBUTE_CONFIDENCE if alt_name.startswith('data-')
                    else PLAIN_ATTRIBUTE_CONFIDENCE
                ),
                element_count=document.count(candidate_selector),
            ))

    return candidates


def generate_complex_candidates(document: Document, selector: str) -> List[Candidate]:
    """Degrade a compound selector to its leaf, plus a two-part shortcut"""
    parts = [part for part in COMBINATOR_PATTERN.split(selector.strip()) if part]
    if not parts:
        return []

    candidates = []
    last_part = parts[-1]
    last_type = classify(last_part)

    # Ancestor context is ignored on purpose: find the leaf
    if last_type == SelectorType.CLASS:
        candidates.extend(generate_class_candidates(document, last_part))
    elif last_type == SelectorType.ID:
        candidates.extend(generate_id_candidates(document, last_part))

    if len(parts) > 2:
        simplified = f"{parts[-2]} {last_part}"
        matches = document.query(simplified)
        if matches:
            candidates.append(Candidate(
                selector=simplified,
                confidence=SIMPLIFIED_COMPLEX_CONFIDENCE,
                element_count=len(matches),
            ))

    return candidates


GeneratorFn = Callable[[Document, str], List[Candidate]]

GENERATORS: Dict[SelectorType, GeneratorFn] = {
    SelectorType.CLASS: generate_class_candidates,
    SelectorType.ID: generate_id_candidates,
    SelectorType.TAG: generate_tag_candidates,
    SelectorType.ATTRIBUTE: generate_attribute_candidates,
    SelectorType.COMPLEX: generate_complex_candidates,
}
