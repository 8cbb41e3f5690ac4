"""
Value serialization module

Converts native values into JavaScript literals for property initialization.
"""

from dataclasses import dataclass
import json
import logging
import math
import numbers
from decimal import Decimal

from .codegen import js_string

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SerializeResult:
    """Outcome of serializing one value"""
    literal: str
    ok: bool = True

    @classmethod
    def failed(cls) -> 'SerializeResult':
        return cls(literal='', ok=False)


def serialize_value(value) -> SerializeResult:
    """Serialize a native value to a JavaScript literal

    Never raises. A value that cannot be encoded yields a failed result
    with an empty literal and a logged warning.
    """
    if value is None:
        return SerializeResult('null')

    if isinstance(value, BaseException):
        return SerializeResult(js_string(str(value) or type(value).__name__))

    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return SerializeResult('true' if value else 'false')

    if isinstance(value, numbers.Real):
        return SerializeResult(_number_literal(value))

    if isinstance(value, Decimal):
        return SerializeResult(_decimal_literal(value))

    if isinstance(value, str):
        return SerializeResult(js_string(value))

    try:
        text = json.dumps(value, allow_nan=False, separators=(',', ':'))
    except (TypeError, ValueError) as e:
        logger.warning(f'Failed to convert {type(value).__name__} value to a JavaScript literal: {e}')
        return SerializeResult.failed()
    return SerializeResult(text)


def _number_literal(value: numbers.Real) -> str:
    """Decimal form of a number"""
    if isinstance(value, numbers.Integral):
        return str(int(value))
    number = float(value)
    if math.isnan(number):
        return 'NaN'
    if math.isinf(number):
        return 'Infinity' if number > 0 else '-Infinity'
    if number.is_integer() and abs(number) < 1e16:
        return str(int(number))
    return repr(number)


def _decimal_literal(value: Decimal) -> str:
    """Decimal form of a Decimal, keeping its precision"""
    if value.is_nan():
        return 'NaN'
    if value.is_infinite():
        return '-Infinity' if value.is_signed() else 'Infinity'
    return str(value)
