from __future__ import annotations

import math
import re

from fastapi import APIRouter
from pydantic import BaseModel

from ..errors import ToolError


router = APIRouter(prefix="/tools/algebraic-equations", tags=["equations"])

FORMAT_ERROR = "Invalid equation format. Use format like '2x+3=7'"
_NUMBER = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")


class SolveRequest(BaseModel):
    equation: str = ""


def _number(text: str) -> float:
    if not _NUMBER.match(text):
        raise ToolError(400, FORMAT_ERROR)
    value = float(text)
    if not math.isfinite(value):
        raise ToolError(400, "Number is too large")
    return value


def format_number(value: float) -> str:
    if value == int(value):
        return str(int(value))
    return repr(value)


def solve_linear(equation: str) -> float:
    """Solve ``ax + b = c`` for x. Whitespace is ignored and x must be on the left."""
    cleaned = re.sub(r"\s+", "", equation)
    if "=" not in cleaned:
        raise ToolError(400, "Equation must contain an equals sign (=)")
    left, right = cleaned.split("=", 1)
    x_index = left.find("x")
    if x_index == -1:
        raise ToolError(400, "Equation must contain variable 'x'")

    coefficient = left[:x_index]
    if coefficient in ("", "+"):
        coefficient = "1"
    elif coefficient == "-":
        coefficient = "-1"
    constant = left[x_index + 1:] or "0"

    a = _number(coefficient)
    b = _number(constant)
    c = _number(right)
    if a == 0:
        raise ToolError(400, "Coefficient of x cannot be zero")
    x = (c - b) / a
    if not math.isfinite(x):
        raise ToolError(400, FORMAT_ERROR)
    return x


@router.post("/solve")
def solve(req: SolveRequest):
    x = solve_linear(req.equation)
    return {"x": x, "result": f"x = {format_number(x)}"}
