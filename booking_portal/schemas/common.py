"""Validators shared by several request schemas"""
from typing import Annotated
from pydantic import BeforeValidator

def _parse_id(value):
    if isinstance(value, bool):
        raise ValueError('ID must be a numeric value')
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValueError('ID must be a numeric value')
    if number <= 0:
        raise ValueError('ID must be a positive number')
    return number

# Path ids arrive as strings; they leave validation as positive ints
ResourceId = Annotated[int, BeforeValidator(_parse_id)]
