from __future__ import annotations

from .models import ParseErrorKind


class DiceError(ValueError):
    """User-facing validation errors (fail-fast, no roll performed)."""


_CODES: dict[ParseErrorKind, str] = {
    "malformed_spec": "MALFORMED_SPEC",
    "invalid_count": "INVALID_COUNT",
    "zero_count": "ZERO_COUNT",
    "invalid_sides": "INVALID_SIDES",
    "zero_sides": "ZERO_SIDES",
    "invalid_modifier": "INVALID_MODIFIER",
}


class DiceSpecError(DiceError):
    """A dice specification string could not be parsed.

    Carries the failing field (``kind``), the original string (``spec``) and
    the offending substring (``fragment``) so callers can build their own
    diagnostics; ``str()`` gives a ready-made one prefixed with a stable code.
    """

    def __init__(self, kind: ParseErrorKind, spec: str, fragment: str, reason: str) -> None:
        self.kind = kind
        self.spec = spec
        self.fragment = fragment
        self.reason = reason
        super().__init__(f"[{self.code}] {reason}")

    @property
    def code(self) -> str:
        return _CODES[self.kind]
