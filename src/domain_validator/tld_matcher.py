"""Suffix check of a domain against the loaded TLD list."""

from __future__ import annotations

from collections.abc import Iterable


def is_valid_tld(domain: str, tlds: Iterable[str]) -> bool:
    """Check if the domain ends with one of the dotted TLD suffixes."""
    domain = domain.strip().lower()
    return any(domain.endswith(tld) for tld in tlds)
