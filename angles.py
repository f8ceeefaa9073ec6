from math import pi, copysign, inf
from numbers import Real
from typing import Self


TAU = 2 * pi
EPSILON = 1e-9


class InvalidOperandError(TypeError):
    """Operand is neither an Angle nor a plain number"""


def normalize(x: float) -> float:
    t = x % TAU
    # tiny negative inputs round up to exactly TAU
    if t >= TAU:
        return 0.0
    return t


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _to_radians(value: object, operation: str) -> float:
    if isinstance(value, Angle):
        return value.radians
    if _is_number(value):
        return float(value)
    raise InvalidOperandError(f"unsupported operand for {operation}: {type(value).__name__}")


def _to_factor(value: object, operation: str) -> float:
    if _is_number(value):
        return float(value)
    raise InvalidOperandError(f"unsupported factor for {operation}: {type(value).__name__}")


class Angle:
    """Direction stored in radians, always normalized to [0, 2pi)."""

    @classmethod
    def from_radians(cls, rad_value: float) -> Self:
        return cls(rad_value)

    @classmethod
    def from_degrees(cls, deg_value: float) -> Self:
        return cls(_to_factor(deg_value, "from_degrees") * pi / 180)

    def __init__(self, rad_value: float = 0.0) -> None:
        self._rad = normalize(_to_radians(rad_value, "Angle"))

    @property
    def radians(self) -> float:
        return self._rad

    @radians.setter
    def radians(self, val: float) -> None:
        self._rad = normalize(_to_radians(val, "radians"))

    @property
    def degrees(self) -> float:
        return self._rad * 180 / pi

    @degrees.setter
    def degrees(self, val: float) -> None:
        self._rad = normalize(_to_factor(val, "degrees") * pi / 180)

    def __float__(self) -> float:
        return self._rad

    def __int__(self) -> int:
        # truncates radians, not degrees
        return int(self._rad)

    def __str__(self) -> str:
        return f"{self._rad:.6f} rad ({self.degrees:.6f}°)"

    def __repr__(self) -> str:
        return f"Angle(rad={self._rad:.6f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return abs(self._rad - other._rad) < EPSILON

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: Self) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._rad < other._rad

    def __le__(self, other: Self) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.__eq__(other) or self.__lt__(other)

    def __gt__(self, other: Self) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._rad > other._rad

    def __ge__(self, other: Self) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.__eq__(other) or self.__gt__(other)

    def __add__(self, other: Self | int | float) -> Self:
        return Angle(self._rad + _to_radians(other, "+"))

    def __radd__(self, other: int | float) -> Self:
        return self.__add__(other)

    def __sub__(self, other: Self | int | float) -> Self:
        return Angle(self._rad - _to_radians(other, "-"))

    def __rsub__(self, other: int | float) -> Self:
        return Angle(_to_radians(other, "-") - self._rad)

    def __mul__(self, multiplier: int | float) -> Self:
        return Angle(self._rad * _to_factor(multiplier, "*"))

    def __rmul__(self, multiplier: int | float) -> Self:
        return self.__mul__(multiplier)

    def __truediv__(self, denominator: int | float) -> Self:
        denominator = _to_factor(denominator, "/")
        if denominator == 0:
            # IEEE-754 quotient instead of ZeroDivisionError: +-inf, or nan for 0/0
            return Angle(copysign(inf, denominator) * self._rad)
        return Angle(self._rad / denominator)


class AngleRange:
    """Directed arc from start to end in the direction of increasing angle.

    Endpoints accept an Angle or a plain number of radians. A range whose
    start is not below its end wraps through zero.
    """

    def __init__(self, start: Angle | float | int, end: Angle | float | int,
                 include_start: bool = True, include_end: bool = True) -> None:
        self._start = self._convert(start)
        self._end = self._convert(end)
        self._include_start = bool(include_start)
        self._include_end = bool(include_end)

    @staticmethod
    def _convert(value: Angle | float | int) -> Angle:
        if isinstance(value, Angle):
            return Angle(value.radians)
        return Angle(_to_radians(value, "AngleRange"))

    @property
    def start(self) -> Angle:
        return Angle(self._start.radians)

    @property
    def end(self) -> Angle:
        return Angle(self._end.radians)

    @property
    def include_start(self) -> bool:
        return self._include_start

    @property
    def include_end(self) -> bool:
        return self._include_end

    def __str__(self) -> str:
        left = "[" if self._include_start else "("
        right = "]" if self._include_end else ")"
        return f"{left}{self._start}, {self._end}{right}"

    def __repr__(self) -> str:
        return (f"AngleRange({self._start!r}, {self._end!r}, "
                f"incStart={str(self._include_start).lower()}, "
                f"incEnd={str(self._include_end).lower()})")

    def length(self) -> float:
        return normalize(self._end.radians - self._start.radians)

    def __abs__(self) -> float:
        return self.length()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AngleRange):
            return NotImplemented
        return (self._start == other._start and
                self._end == other._end and
                self._include_start == other._include_start and
                self._include_end == other._include_end)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def contains_angle(self, angle: Angle) -> bool:
        """Membership test with the bounds check applied to non-wrapping ranges only.

        A wrapping range (start >= end) accepts every angle except an
        excluded endpoint. Endpoints are compared with exact float equality.
        """
        if not isinstance(angle, Angle):
            raise InvalidOperandError(f"unsupported operand for contains_angle: {type(angle).__name__}")
        s = self._start.radians
        e = self._end.radians
        x = normalize(angle.radians)

        if s < e:
            if x < s or x > e:
                return False
        if x == s and not self._include_start:
            return False
        if x == e and not self._include_end:
            return False
        return True

    def contains_angle_wrapped(self, angle: Angle) -> bool:
        """Membership test that honours the wrapped arc: [start, 2pi) + [0, end]."""
        if not isinstance(angle, Angle):
            raise InvalidOperandError(f"unsupported operand for contains_angle_wrapped: {type(angle).__name__}")
        s = self._start.radians
        e = self._end.radians
        x = normalize(angle.radians)

        if s < e:
            if x < s or x > e:
                return False
        elif s > e:
            if e < x < s:
                return False
        if x == s and not self._include_start:
            return False
        if x == e and not self._include_end:
            return False
        return True

    def contains_range(self, other: Self) -> bool:
        # endpoints only, the arc between them is not checked
        if not isinstance(other, AngleRange):
            raise InvalidOperandError(f"unsupported operand for contains_range: {type(other).__name__}")
        return self.contains_angle(other._start) and self.contains_angle(other._end)

    def __contains__(self, elem: Self | Angle) -> bool:
        if isinstance(elem, AngleRange):
            return self.contains_range(elem)
        elif isinstance(elem, Angle):
            return self.contains_angle(elem)
        else:
            raise InvalidOperandError(f"unsupported operand for in: {type(elem).__name__}")

    def _shifted(self, start: Angle, end: Angle) -> list[Self]:
        return [AngleRange(start, end, self._include_start, self._include_end)]

    def __add__(self, offset: Angle) -> list[Self]:
        if not isinstance(offset, Angle):
            raise InvalidOperandError(f"unsupported offset for +: {type(offset).__name__}")
        return self._shifted(self._start + offset, self._end + offset)

    def __sub__(self, offset: Angle) -> list[Self]:
        if not isinstance(offset, Angle):
            raise InvalidOperandError(f"unsupported offset for -: {type(offset).__name__}")
        return self._shifted(self._start - offset, self._end - offset)


def _fmt_ranges(ranges: list[AngleRange]) -> str:
    return "[" + " ".join(str(rg) for rg in ranges) + "]"


def main() -> None:
    print("ANGLE")

    a = Angle(3 * pi)
    b = Angle.from_degrees(180)

    print("a:", a)
    print("b:", b)
    print("a == PI?", a == Angle(pi))

    print("a + 1:", a + 1.0)
    print("b - 90°:", b - Angle.from_degrees(90))
    print("b * 2:", b * 2)
    print("b / 2:", b / 2)

    print("ANGLE RANGE")

    r = AngleRange(0, pi, True, False)
    print("r:", r)
    print("len(r):", r.length())
    print("contains 1 rad?", r.contains_angle(Angle(1)))
    print("contains 3 rad?", r.contains_angle(Angle(3)))

    r2 = AngleRange(Angle.from_degrees(30), Angle.from_degrees(150), True, True)
    print("r2 inside r?", r.contains_range(r2))

    print("r + 45°:", _fmt_ranges(r + Angle.from_degrees(45)))

    x = Angle(3.141592)
    print(_fmt_ranges(r - x))


if __name__ == "__main__":
    main()
