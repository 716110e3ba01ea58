"""Utility functions for Spirit.

This module contains helper functions used across the application:
- select_devices: Narrow the account's device list by name, config or --all
- similarity_score: Canonical fuzzy string matching algorithm
- find_similar_strings: Find similar strings using fuzzy matching
"""

from collections.abc import Iterable

from core.errors import NoDevicesMatchedError
from models.device import Device


def select_devices(devices: Iterable[Device], names: Iterable[str] = (),
                   select_all: bool = False,
                   configured: Iterable[str] = ()) -> list[Device]:
    """Select the devices a command should operate on.

    Precedence: ``select_all`` returns everything; otherwise explicit
    ``names`` filter by exact name; otherwise the ``configured`` names do.

    Args:
        devices: All devices on the account
        names: Device names given on the command line
        select_all: Operate on every device
        configured: Device names from the config file

    Returns:
        The selected devices, in account order

    Raises:
        NoDevicesMatchedError: If nothing was selected
    """
    devices = list(devices)
    if select_all:
        return devices

    names = list(names)
    wanted = set(names) if names else set(configured)
    selected = [d for d in devices if d.name in wanted]

    if not selected:
        message = "No devices matched"
        if not names and not wanted:
            message += " (no devices configured; use --device or --all)"
        else:
            available = [d.name for d in devices]
            suggestions = []
            for name in names:
                for similar in find_similar_strings(name, available, limit=3):
                    if similar not in suggestions:
                        suggestions.append(similar)
            if suggestions:
                message += f". Did you mean: {', '.join(suggestions)}?"
        raise NoDevicesMatchedError(message)

    return selected


def similarity_score(s1: str, s2: str) -> int:
    """Calculate similarity score between two strings.

    This is the canonical implementation used for fuzzy matching (command typo
    suggestions, device name suggestions).

    Returns:
        Similarity score:
        - 100: Exact match (case-insensitive)
        - 80: Prefix match
        - 60: Substring match
        - 21-50: Character sequence match (proportional to matching characters)
        - 0: No match
    """
    s1_lower = s1.lower()
    s2_lower = s2.lower()

    if s1_lower == s2_lower:
        return 100

    if s2_lower.startswith(s1_lower) or s1_lower.startswith(s2_lower):
        return 80

    if s1_lower in s2_lower or s2_lower in s1_lower:
        return 60

    # Count characters of s1 found in order within s2
    matches = 0
    j = 0
    for char in s1_lower:
        while j < len(s2_lower):
            j += 1
            if s2_lower[j - 1] == char:
                matches += 1
                break

    if matches > 0:
        score = int((matches / max(len(s1_lower), len(s2_lower))) * 50)
        return score if score > 20 else 0

    return 0


def find_similar_strings(target: str, candidates: list[str], limit: int = 5) -> list[str]:
    """Find similar strings, most similar first.

    Args:
        target: The string to match against
        candidates: List of candidate strings to search
        limit: Maximum number of results to return
    """
    scored = [(c, similarity_score(target, c)) for c in candidates]
    matches = sorted((item for item in scored if item[1] > 0), key=lambda x: x[1], reverse=True)
    return [c for c, _ in matches[:limit]]
