"""Syntax check for names used as the target of a DNS CNAME record."""

from __future__ import annotations

MIN_LENGTH = 4
MAX_LENGTH = 253
MAX_LABEL_LENGTH = 63

# Underscore is not legal in hostnames but shows up in CNAME targets
# (_dmarc, _domainkey and friends), so it is accepted.
ALLOWED_CHARS = frozenset("abcdefghijklmnopqrstuvwxyz0123456789.-_")

_EDGE_CHARS = ("-", "_", ".")


def is_valid_domain(domain: str) -> bool:
    """Return True if ``domain`` is a plausible CNAME target name."""
    domain = domain.strip().lower()

    if not MIN_LENGTH <= len(domain) <= MAX_LENGTH:
        return False
    if domain.startswith(_EDGE_CHARS) or domain.endswith(_EDGE_CHARS):
        return False
    if "." not in domain:
        return False
    if not ALLOWED_CHARS.issuperset(domain):
        return False
    return all(0 < len(label) <= MAX_LABEL_LENGTH for label in domain.split("."))
