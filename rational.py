import math
import numbers


class ZeroDenominatorError(ZeroDivisionError):
    pass


def _reduce(num: int, den: int) -> tuple[int, int]:
    """
    Reduce num/den by their gcd. A zero numerator collapses to 0/1.
    The denominator keeps its sign, math.gcd is never negative.
    """
    if den == 0:
        raise ZeroDenominatorError(f'Zero denominator in {num}/{den}')
    if num == 0:
        return 0, 1
    g = math.gcd(num, den)
    return num // g, den // g


def _sgn(v: int) -> int:
    return (v > 0) - (v < 0)


class Rational:
    """
    Exact fraction of two Python integers, always reduced to lowest terms.

    Integers are arbitrary precision, so cross-multiplication in comparisons
    and products in arithmetic never overflow. The sign of the denominator
    is kept as produced; the sign of the value is sign(num * den).
    """

    __slots__ = ('_num', '_den')

    def __init__(self, num=0, den=1):
        if not isinstance(num, numbers.Integral) or not isinstance(den, numbers.Integral):
            raise TypeError(
                f'Rational components must be integers, got {type(num).__name__}, {type(den).__name__}'
            )
        self._num, self._den = _reduce(int(num), int(den))

    @classmethod
    def from_float(cls, value: float) -> 'Rational':
        """
        Exact value of a binary float, e.g. 0.3 -> 5404319552844595/18014398509481984.
        """
        if not math.isfinite(value):
            raise ValueError(f'Cannot convert {value!r} to Rational')
        return cls(*float(value).as_integer_ratio())

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    @staticmethod
    def _coerce(other):
        if isinstance(other, Rational):
            return other
        if isinstance(other, numbers.Integral):
            return Rational(other)
        return None

    # arithmetic

    def add(self, other: 'Rational') -> 'Rational':
        return Rational(
            self._num * other._den + self._den * other._num,
            self._den * other._den,
        )

    def subtract(self, other: 'Rational') -> 'Rational':
        return Rational(
            self._num * other._den - self._den * other._num,
            self._den * other._den,
        )

    def multiply(self, other: 'Rational') -> 'Rational':
        return Rational(self._num * other._num, self._den * other._den)

    def divide(self, other: 'Rational') -> 'Rational':
        if other._num == 0:
            raise ZeroDenominatorError(f'Division of {self} by zero')
        return Rational(self._num * other._den, self._den * other._num)

    def __add__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.add(self)

    def __sub__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.subtract(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.subtract(self)

    def __mul__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.multiply(other)

    def __rmul__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.multiply(self)

    def __truediv__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.divide(other)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.divide(self)

    def __neg__(self):
        return Rational(-self._num, self._den)

    def __abs__(self):
        return self if self.sign() >= 0 else -self

    # comparisons

    def compare(self, other: 'Rational') -> int:
        """
        Sign of self - other via cross-multiplication:
        a/b < c/d <=> a*d < c*b when b*d > 0, reversed when b*d < 0.
        """
        lhs = self._num * other._den
        rhs = other._num * self._den
        return _sgn(lhs - rhs) * _sgn(self._den * other._den)

    def less_than(self, other: 'Rational') -> bool:
        return self.compare(other) < 0

    def _cmp(self, other):
        other = self._coerce(other)
        if other is None:
            return None
        return self.compare(other)

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._num * other._den == other._num * self._den

    def __lt__(self, other):
        c = self._cmp(other)
        return NotImplemented if c is None else c < 0

    def __le__(self, other):
        c = self._cmp(other)
        return NotImplemented if c is None else c <= 0

    def __gt__(self, other):
        c = self._cmp(other)
        return NotImplemented if c is None else c > 0

    def __ge__(self, other):
        c = self._cmp(other)
        return NotImplemented if c is None else c >= 0

    def __hash__(self):
        # reduced form is unique up to the sign of the denominator
        s = _sgn(self._den)
        num, den = self._num * s, self._den * s
        if den == 1:
            return hash(num)
        return hash((num, den))

    # signs

    def sign(self) -> int:
        return _sgn(self._num) * _sgn(self._den)

    def positive(self) -> bool:
        return (self._num > 0 and self._den > 0) or (self._num < 0 and self._den < 0)

    def negative(self) -> bool:
        return (self._num < 0 and self._den > 0) or (self._num > 0 and self._den < 0)

    def is_zero(self) -> bool:
        return self._num == 0

    def __bool__(self):
        return self._num != 0

    def __float__(self):
        return self._num / self._den

    def __str__(self):
        return f'{self._num}/{self._den}'

    def __repr__(self):
        return f'Rational({self._num}, {self._den})'
