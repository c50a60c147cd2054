"""Tests for TLD suffix matching."""

from domain_validator.tld_matcher import is_valid_tld

TLDS = (".com", ".net", ".co.uk")


def test_matches_known_suffix() -> None:
    assert is_valid_tld("example.com", TLDS) is True
    assert is_valid_tld("shop.example.co.uk", TLDS) is True


def test_normalizes_domain_before_matching() -> None:
    assert is_valid_tld("  Example.COM\t", TLDS) is True


def test_unknown_suffix() -> None:
    assert is_valid_tld("example.org", TLDS) is False
    # Suffix test requires the dot, so "notcom" does not match ".com"
    assert is_valid_tld("notcom", TLDS) is False


def test_empty_tld_list_matches_nothing() -> None:
    assert is_valid_tld("example.com", ()) is False
    assert is_valid_tld("", []) is False


def test_bare_dot_suffix_matches_any_dotted_domain() -> None:
    assert is_valid_tld("example.invalid.", (".",)) is True
    assert is_valid_tld("", (".",)) is False
