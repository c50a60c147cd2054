"""Tests for per-domain validation and report formatting."""

import io

from domain_validator.models import ValidationResult
from domain_validator.output import StdoutHandler, validate_domains


def test_validate_domains_preserves_order() -> None:
    results = list(validate_domains(["b.org", "example.com", ""], [".com"]))

    assert [r.domain for r in results] == ["b.org", "example.com", ""]
    assert [r.valid_tld for r in results] == [False, True, False]
    assert [r.valid_domain for r in results] == [True, True, False]


def test_validate_domains_checks_are_independent() -> None:
    (result,) = validate_domains(["bad$name.com"], [".com"])

    assert result.valid_tld is True
    assert result.valid_domain is False


def test_stdout_handler_format() -> None:
    stream = io.StringIO()
    handler = StdoutHandler(stream)

    handler.emit_result(ValidationResult(domain="example.com", valid_tld=True, valid_domain=False))

    assert stream.getvalue() == "Valid TLD? true, example.com\nValid Domain? false, example.com\n"
