"""Declarative field constraints for domain records.

Records stay plain dataclasses; constraints ride on their annotations as
pydantic metadata::

    @dataclass
    class OrderItem:
        sku: Annotated[str, StringConstraints(strict=True, min_length=1)]
        quantity: Annotated[int, Field(strict=True, ge=1)] = 1

``validate_object()`` checks the current value of every annotated field
with a pydantic ``TypeAdapter``. It never raises and never mutates the
object: failures come back as a list of ``ValidationResult``.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from functools import lru_cache
from typing import Annotated, Any, get_origin, get_type_hints

from pydantic import StringConstraints, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

RequiredStr = Annotated[
    str, StringConstraints(strict=True, strip_whitespace=True, min_length=1)
]


@dataclass(frozen=True)
class ValidationResult:
    """A single violated constraint."""

    message: str
    member_names: tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.message


@lru_cache(maxsize=None)
def _field_adapters(cls: type) -> tuple[tuple[str, TypeAdapter], ...]:
    """One adapter per field of *cls* whose annotation carries constraints."""
    hints = get_type_hints(cls, include_extras=True)
    return tuple(
        (f.name, TypeAdapter(hints[f.name]))
        for f in dataclasses.fields(cls)
        if get_origin(hints[f.name]) is Annotated
    )


def validate_object(obj: Any, prefix: str = "") -> list[ValidationResult]:
    """Check every constrained field of *obj*, in field order.

    *prefix* qualifies member names of nested records (``items[0]``).
    """
    results: list[ValidationResult] = []
    for field_name, adapter in _field_adapters(type(obj)):
        name = f"{prefix}.{field_name}" if prefix else field_name
        try:
            adapter.validate_python(getattr(obj, field_name))
        except PydanticValidationError as exc:
            for error in exc.errors():
                member = "".join(_loc_part(part) for part in error["loc"])
                qualified = name + member
                results.append(
                    ValidationResult(f"{qualified}: {error['msg']}", (qualified,))
                )
    return results


def _loc_part(part: str | int) -> str:
    return f"[{part}]" if isinstance(part, int) else f".{part}"
