from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class LoadResult(BaseModel):
    """Outcome of reading one line-oriented input file."""

    model_config = ConfigDict(frozen=True)

    path: str
    entries: tuple[str, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ValidationResult(BaseModel):
    """Both verdicts for a single candidate domain."""

    model_config = ConfigDict(frozen=True)

    domain: str
    valid_tld: bool
    valid_domain: bool
