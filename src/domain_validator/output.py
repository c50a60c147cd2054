from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .domain_syntax import is_valid_domain
from .models import ValidationResult
from .tld_matcher import is_valid_tld
from .yaml_config import get_output_strings


def validate_domains(domains: Iterable[str], tlds: Iterable[str]) -> Iterator[ValidationResult]:
    """Run both checks on every domain, preserving input order."""
    tlds = tuple(tlds)
    for domain in domains:
        yield ValidationResult(
            domain=domain,
            valid_tld=is_valid_tld(domain, tlds),
            valid_domain=is_valid_domain(domain),
        )


def _fmt_bool(value: bool) -> str:
    return "true" if value else "false"


class StdoutHandler:
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._strings = get_output_strings()

    def emit_result(self, result: ValidationResult) -> None:
        out = self._stream or sys.stdout
        print(
            self._strings["tld_line"].format(valid=_fmt_bool(result.valid_tld), domain=result.domain),
            file=out,
        )
        print(
            self._strings["domain_line"].format(valid=_fmt_bool(result.valid_domain), domain=result.domain),
            file=out,
        )
