"""Batch checker for domain names against the IANA TLD list and DNS label rules."""

__version__ = "0.1.0"
