#!/usr/bin/env python3
"""
String Similarity
=================
Edit-distance helpers used to compare candidate names against known marks.
"""

import re


def clean_name(name: str) -> str:
    """Lowercase a name and drop everything but ASCII letters and digits."""
    return re.sub(r'[^a-z0-9]', '', name.lower())


def levenshtein_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein (edit) distance between two strings."""
    if len(s1) < len(s2):
        s1, s2 = s2, s1

    if len(s2) == 0:
        return len(s1)

    previous_row = range(len(s2) + 1)
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def normalized_similarity(s1: str, s2: str) -> float:
    """
    Similarity in 0..1 (1.0 = identical), case-insensitive.

    Computed as (len(longer) - distance) / len(longer). Two empty strings
    are identical.
    """
    s1, s2 = s1.lower(), s2.lower()
    longer = max(len(s1), len(s2))
    if longer == 0:
        return 1.0
    distance = levenshtein_distance(s1, s2)
    return (longer - distance) / longer


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Compare two names')
    parser.add_argument('first')
    parser.add_argument('second')
    args = parser.parse_args()

    a, b = clean_name(args.first), clean_name(args.second)
    print(f"distance:   {levenshtein_distance(a, b)}")
    print(f"similarity: {normalized_similarity(a, b):.3f}")
