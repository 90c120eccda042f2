"""Reads the current input fields into a ``Parameters`` value."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any

from errors import InputCoercionError
from viewer.ports import DisplayPort, FieldId


@dataclass(frozen=True)
class Parameters:
    """One generate request, built fresh from the inputs each time."""
    num_generations: int
    seed: str
    color_scheme: str
    stroke_width: float
    draw_triangles: bool
    draw_arcs: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def parse_number(field_id: str, raw: Any) -> float:
    """Numeric parsing of a field value; anything that is not a finite number fails."""
    if isinstance(raw, bool):
        raise InputCoercionError(field_id, raw)
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = "" if raw is None else str(raw).strip()
        if not text:
            raise InputCoercionError(field_id, raw, "is empty")
        try:
            value = float(text)
        except ValueError:
            raise InputCoercionError(field_id, raw) from None
    if not math.isfinite(value):
        raise InputCoercionError(field_id, raw, "is not a finite number")
    return value


def parse_count(field_id: str, raw: Any) -> int:
    value = parse_number(field_id, raw)
    if not value.is_integer():
        raise InputCoercionError(field_id, raw, "is not a whole number")
    return int(value)


class ParameterReader:
    """Pulls the six generation inputs from a display port."""

    def __init__(self, display: DisplayPort):
        self.display = display

    def read(self) -> Parameters:
        get = self.display.get_value
        seed = get(FieldId.SEED)
        scheme = get(FieldId.COLOR_SCHEME)
        return Parameters(
            num_generations=parse_count(FieldId.NUM_GENERATIONS, get(FieldId.NUM_GENERATIONS)),
            seed="" if seed is None else str(seed),
            color_scheme="" if scheme is None else str(scheme),
            stroke_width=parse_number(FieldId.STROKE_WIDTH, get(FieldId.STROKE_WIDTH)),
            draw_triangles=bool(get(FieldId.DRAW_TRIANGLES)),
            draw_arcs=bool(get(FieldId.DRAW_ARCS)),
        )
