from dataclasses import dataclass, field
from typing import Any


@dataclass
class Envelope:
    """Uniform wrapper the API puts around every JSON response."""

    success: bool
    data: Any = None
    errors: list[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: dict) -> "Envelope":
        errors = payload.get("errors") or []
        if isinstance(errors, str):
            errors = [errors]
        return cls(
            success=bool(payload.get("success")),
            data=payload.get("data"),
            errors=[str(e) for e in errors],
        )
