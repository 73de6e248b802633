"""Checked integer wrapper for reserve and invariant arithmetic.

Curve math mixes reserves, boosts and fee multipliers into products with
40+ digits. Python ints never overflow, so the failure modes that matter
are division by zero and subtractions that go negative. SafeInt turns both
into exceptions at the exact operation that produced them:

    from amm_sdk.safe_int import S

    new_reserve_out = (S(k) // S(new_reserve_in)).value   # raises on zero
    output = S(reserve_out) - S(new_reserve_out)          # raises if negative

Wrap at entry, unwrap with ``.value`` at exit.
"""

from __future__ import annotations


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError):
    """Subtraction would produce a negative result."""

    pass


class SafeInt:
    """Non-negative-by-construction integer arithmetic.

    Addition and multiplication are plain. Subtraction raises Underflow
    instead of going negative and both division forms raise DivisionByZero.
    Comparisons accept plain ints on either side.

    Attributes:
        value: The wrapped integer (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The wrapped integer."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __hash__(self) -> int:
        return hash(self._value)

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _unwrap(other))

    __radd__ = __add__

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _unwrap(other))

    __rmul__ = __mul__

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract, raising Underflow on a negative result."""
        other_val = _unwrap(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __rsub__(self, other: int) -> SafeInt:
        return SafeInt(other) - self

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Floor division, raising DivisionByZero on a zero divisor."""
        other_val = _unwrap(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    def ceiling_div(self, other: SafeInt | int) -> SafeInt:
        """Division rounding toward positive infinity.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _unwrap(other)
        if other_val == 0:
            raise DivisionByZero(f"Ceiling division by zero: {self._value}")
        return SafeInt(-(-self._value // other_val))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _unwrap(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _unwrap(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _unwrap(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _unwrap(other)

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0


def _unwrap(x: SafeInt | int) -> int:
    if isinstance(x, SafeInt):
        return x._value
    return x


# Short alias used throughout the curve math
S = SafeInt
