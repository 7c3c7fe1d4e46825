"""
Pure domain entities (POPOs).
No dependency on Django or the ORM.
"""

from dataclasses import dataclass

from apps.convertor.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Currency:
    """Opaque currency identifier, compared by code."""

    code: str

    def __post_init__(self):
        if not isinstance(self.code, str) or not self.code.strip():
            raise InvalidArgumentError(f"Currency code must be a non-empty string, got {self.code!r}")

    def __str__(self):
        return self.code
