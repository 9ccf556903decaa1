"""
Name variant generation.

Vulnerability feeds spell product and vendor names inconsistently
(``jenkins-ci`` vs ``jenkins_ci`` vs ``jenkinsci``), so every guessed name is
expanded into separator variants and left-anchored sub-selections.
"""

import re
from typing import List

SEPARATORS = "-_"

# a run of non-separators ending in one separator, or the trailing remainder
_SEPARATED_RUN = re.compile(r"[^-_]*[-_]|[^-_]+")


def normalize_separators(field: str) -> List[str]:
    """
    Swap hyphens and underscores and drop them altogether.

    Args:
        field: Candidate name

    Returns:
        The original name followed by its separator variants (not deduplicated)
    """
    results = [field]

    if "-" in field:
        results.append(field.replace("-", "_"))
        results.append(field.replace("-", ""))

    if "_" in field:
        results.append(field.replace("_", "-"))
        results.append(field.replace("_", ""))

    return results


def normalize_all_separators(fields: List[str]) -> List[str]:
    """Normalize separators of every field, concatenating the results in order."""
    results = []
    for field in fields:
        results.extend(normalize_separators(field))
    return results


def generate_sub_selections(field: str) -> List[str]:
    """
    Split a name on hyphens and underscores into cumulative prefixes.

    ``jenkins-ci-plugin`` becomes ``jenkins``, ``jenkins-ci`` and
    ``jenkins-ci-plugin``. Each prefix is joined with the separator that
    ended the previous run. Expansion stops at the first run that is empty
    once its separators are stripped.

    Args:
        field: Candidate name

    Returns:
        List of sub-selections, shortest first
    """
    results: List[str] = []
    last_separator = ""

    for raw_candidate in _SEPARATED_RUN.findall(field):
        candidate = raw_candidate.strip(SEPARATORS)
        if not candidate:
            break

        if results:
            results.append(results[-1] + last_separator + candidate)
        else:
            results.append(candidate)

        last_separator = raw_candidate[-1]

    return results


def generate_all_sub_selections(fields: List[str]) -> List[str]:
    """Generate sub-selections of every field, concatenating the results in order."""
    results = []
    for field in fields:
        results.extend(generate_sub_selections(field))
    return results


def remove_duplicate_values(values: List[str]) -> List[str]:
    """Drop exact duplicates, keeping the first occurrence of each value."""
    return list(dict.fromkeys(values))
