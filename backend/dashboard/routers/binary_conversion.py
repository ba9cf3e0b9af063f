from __future__ import annotations

import re
from typing import Dict

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from ..errors import ToolError


router = APIRouter(prefix="/tools/binary-conversion", tags=["number_bases"])


BASES: Dict[str, Dict[str, str]] = {
    "2": {"name": "Binary", "prefix": "0b", "pattern": r"^[01]+$"},
    "8": {"name": "Octal", "prefix": "0o", "pattern": r"^[0-7]+$"},
    "10": {"name": "Decimal", "prefix": "", "pattern": r"^[0-9]+$"},
    "16": {"name": "Hexadecimal", "prefix": "0x", "pattern": r"^[0-9A-Fa-f]+$"},
}

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


class ConversionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    value: str = ""
    input_base: str = Field(default="10", alias="inputBase")
    output_base: str = Field(default="2", alias="outputBase")


def to_base(number: int, base: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, base)
        digits.append(_DIGITS[rem])
    return "".join(reversed(digits))


def convert(value: str, input_base: str, output_base: str) -> str:
    if input_base not in BASES or output_base not in BASES:
        raise ToolError(400, f"Base must be one of {', '.join(BASES)}")
    if not value:
        raise ToolError(400, "Please enter a value to convert")
    source = BASES[input_base]
    if not re.match(source["pattern"], value):
        raise ToolError(400, f"Invalid character for {source['name']}")
    try:
        number = int(value, int(input_base))
    except ValueError:
        # int() caps decimal strings at sys.get_int_max_str_digits()
        raise ToolError(400, "Value is too long to convert") from None
    return BASES[output_base]["prefix"] + to_base(number, int(output_base))


@router.get("/bases")
def bases():
    return {base: {"name": info["name"], "prefix": info["prefix"]} for base, info in BASES.items()}


@router.post("")
def convert_number(req: ConversionRequest):
    result = convert(req.value, req.input_base, req.output_base)
    return {"result": result}
