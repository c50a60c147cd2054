"""Line-oriented loaders for the IANA TLD list and the candidate domain list.

The TLD file is published at https://data.iana.org/TLD/tlds-alpha-by-domain.txt
and looks like::

    # Version 2019012900, Last Updated Tue Jan 29 07:07:01 2019 UTC
    AAA
    AARP
    ...
    ZW

Loaders never raise on I/O problems. Failures come back in
``LoadResult.error`` and the caller decides whether they are fatal.
"""

from __future__ import annotations

import structlog

from .models import LoadResult

log = structlog.get_logger()


def _normalize(line: str) -> str:
    return line.strip().lower()


def _read_lines(path: str) -> list[str]:
    # Lines end at "\n" only. Undecodable bytes become U+FFFD, which the
    # syntax check rejects like any other illegal character.
    with open(path, encoding="utf-8", errors="replace", newline="") as f:
        lines = f.read().split("\n")
    if lines[-1] == "":
        lines.pop()
    return [_normalize(line) for line in lines]


def load_tlds(path: str, *, debug: bool = False, skip_blank: bool = True) -> LoadResult:
    """Read TLDs and turn each one into a dotted suffix (``COM`` -> ``.com``).

    Comment lines starting with ``#`` are dropped. A blank line would become
    the bare suffix ``"."``, which every domain ends with, so blank lines are
    dropped too unless ``skip_blank`` is false.
    """
    try:
        lines = _read_lines(path)
    except OSError as e:
        log.error("tlds_load_failed", path=path, error=str(e))
        return LoadResult(path=path, error=str(e))

    tlds = tuple(
        "." + tld
        for tld in lines
        if not tld.startswith("#") and (tld or not skip_blank)
    )

    if debug:
        log.info("tlds_loaded", path=path, count=len(tlds))
    return LoadResult(path=path, entries=tlds)


def load_domains(path: str, *, debug: bool = False) -> LoadResult:
    """Read candidate domains, one per line. Blank lines are kept."""
    try:
        domains = tuple(_read_lines(path))
    except OSError as e:
        log.error("domains_load_failed", path=path, error=str(e))
        return LoadResult(path=path, error=str(e))

    if debug:
        log.info("domains_loaded", path=path, count=len(domains))
    return LoadResult(path=path, entries=domains)
