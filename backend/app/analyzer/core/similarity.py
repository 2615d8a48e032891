"""
Similarity Scorer

Edit-distance based confidence for selector names that look alike.
Identical strings score 1.0; anything else is squeezed into [0.6, 0.9]
so a textual guess never outranks an exact or structural match.
"""

from typing import List

# Confidence band for non-identical names
MIN_CONFIDENCE = 0.6
CONFIDENCE_RANGE = 0.3


def levenshtein_distance(a: str, b: str) -> int:
    """Unit-cost insert/delete/substitute edit distance"""
    # table[i][j] = distance between b[:i] and a[:j]
    table: List[List[int]] = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]

    for i in range(len(b) + 1):
        table[i][0] = i
    for j in range(len(a) + 1):
        table[0][j] = j

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                table[i][j] = table[i - 1][j - 1]
            else:
                table[i][j] = min(
                    table[i - 1][j - 1] + 1,  # substitution
                    table[i][j - 1] + 1,      # insertion
                    table[i - 1][j] + 1,      # deletion
                )

    return table[len(b)][len(a)]


def similarity(a: str, b: str) -> float:
    """Normalized similarity in [0, 1]"""
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1 - levenshtein_distance(a, b) / max_len


def confidence(a: str, b: str) -> float:
    """Map similarity of two names to a candidate confidence"""
    if a == b:
        return 1.0
    return MIN_CONFIDENCE + similarity(a, b) * CONFIDENCE_RANGE
