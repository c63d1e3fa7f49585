#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Exact rational numbers for tableau arithmetic

The Fraction class holds a signed integer numerator and a strictly positive
integer denominator in lowest terms. Instances are normalized once, at
construction, and never change afterwards, so every live Fraction is already
reduced. Ordering is decided by cross multiplication of the integer parts and
never by floating point conversion.
"""

from fractions import Fraction as _PyFraction
from typing import Union
from sympy import Rational
import logging
import numbers
import re

from .errors import DivisionByZero, FormatError

_INTEGER = re.compile(r'-?\d+')
_RATIO = re.compile(r'-?\d+/-?\d+')
_DECIMAL = re.compile(r'-?\d+\.\d+')


class Fraction:
    """
    Immutable exact rational number.

    Args:
        numerator (int):
            Signed integer numerator.

        denominator (int):
            Non-zero integer denominator (default 1). A negative denominator
            moves its sign to the numerator.

    Raises:
        DivisionByZero: If denominator is 0.
    """

    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator: int, denominator: int = 1):
        if not _is_int(numerator) or not _is_int(denominator):
            raise TypeError(f"Fraction requires integer arguments, got {type(numerator).__name__} "
                            f"and {type(denominator).__name__}")
        if denominator == 0:
            raise DivisionByZero(f"The denominator of {numerator}/{denominator} cannot be zero.")
        gcf = Fraction.gcf(numerator, denominator)
        numerator //= gcf
        denominator //= gcf
        if denominator < 0:
            numerator = -numerator
            denominator = -denominator
        object.__setattr__(self, '_numerator', int(numerator))
        object.__setattr__(self, '_denominator', int(denominator))

    def __setattr__(self, name, value):
        raise AttributeError(f"Fraction is immutable, cannot set '{name}'")

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    # Euclid

    @staticmethod
    def gcf(a: int, b: int) -> int:
        """Greatest common factor of a and b (non-negative, gcf(a, 0) = |a|)"""
        a, b = abs(a), abs(b)
        if b > a:
            a, b = b, a
        while b != 0:
            a, b = b, a % b
        return a

    @staticmethod
    def lcm(a: int, b: int) -> int:
        """Least common multiple of a and b"""
        return a * b // Fraction.gcf(a, b)

    # Arithmetic

    def add(self, other: 'Fraction') -> 'Fraction':
        other = Fraction.value_of(other)
        lcm = Fraction.lcm(self._denominator, other._denominator)
        return Fraction(self._numerator * (lcm // self._denominator) + other._numerator * (lcm // other._denominator),
                        lcm)

    def subtract(self, other: 'Fraction') -> 'Fraction':
        other = Fraction.value_of(other)
        lcm = Fraction.lcm(self._denominator, other._denominator)
        return Fraction(self._numerator * (lcm // self._denominator) - other._numerator * (lcm // other._denominator),
                        lcm)

    def multiply(self, other: 'Fraction') -> 'Fraction':
        other = Fraction.value_of(other)
        return Fraction(self._numerator * other._numerator, self._denominator * other._denominator)

    def divide(self, other: 'Fraction') -> 'Fraction':
        """Multiply by the reciprocal of other, raises DivisionByZero if other is zero"""
        return self.multiply(Fraction.value_of(other).reciprocal())

    def reciprocal(self) -> 'Fraction':
        if self._numerator == 0:
            raise DivisionByZero("Cannot take the reciprocal of zero.")
        return Fraction(self._denominator, self._numerator)

    def negate(self) -> 'Fraction':
        return Fraction(-self._numerator, self._denominator)

    def abs(self) -> 'Fraction':
        return Fraction(abs(self._numerator), self._denominator)

    # Sign and ordering

    def signum(self) -> int:
        """Return sign: -1, 0, or 1"""
        return (self._numerator > 0) - (self._numerator < 0)

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_negative(self) -> bool:
        return self._numerator < 0

    def is_positive(self) -> bool:
        return self._numerator > 0

    def compare_to(self, other: 'Fraction') -> int:
        """Compare to another Fraction: -1 if less, 0 if equal, 1 if greater
        
        Both denominators are positive, so a/b < c/d holds iff a*d < c*b.
        """
        other = Fraction.value_of(other)
        lhs = self._numerator * other._denominator
        rhs = other._numerator * self._denominator
        return (lhs > rhs) - (lhs < rhs)

    # Conversion

    def to_double(self) -> float:
        """Floating point approximation, for display only"""
        return self._numerator / self._denominator

    def to_sympy(self) -> Rational:
        return Rational(self._numerator, self._denominator)

    @staticmethod
    def parse(text: str) -> 'Fraction':
        """Parses an integer, a ratio 'n/d' or a decimal literal
        
        Args:
            text (str): 
                Literal such as '-3', '2/-4' or '0.25'.

        Returns:
            (Fraction): 
            The parsed value in lowest terms.

        Raises:
            FormatError: If text matches none of the three forms.
            DivisionByZero: If a ratio has a zero denominator.
        """
        if not isinstance(text, str):
            raise FormatError(f"Expected a numeric string, got {type(text).__name__}.")
        if _RATIO.fullmatch(text):
            numerator, denominator = text.split('/')
            return Fraction(int(numerator), int(denominator))
        if _INTEGER.fullmatch(text):
            return Fraction(int(text))
        if _DECIMAL.fullmatch(text):
            digits = len(text) - text.index('.') - 1
            return Fraction(int(text.replace('.', '')), 10**digits)
        raise FormatError(f"'{text}' is not a numeric string.")

    @staticmethod
    def value_of(value: Union[int, float, str, 'Fraction', _PyFraction, Rational]) -> 'Fraction':
        """
        Factory method to create a Fraction from various types.

        Strings go through parse, floats are approximated with
        limit_denominator.
        """
        if isinstance(value, Fraction):
            return value
        if _is_int(value):
            return Fraction(int(value))
        if isinstance(value, str):
            return Fraction.parse(value)
        if isinstance(value, _PyFraction):
            return Fraction(value.numerator, value.denominator)
        if isinstance(value, Rational):
            return Fraction(int(value.p), int(value.q))
        if isinstance(value, float):
            approx = _PyFraction(value).limit_denominator()
            logging.debug(f"Approximated float {value} by {approx}.")
            return Fraction(approx.numerator, approx.denominator)
        raise TypeError(f"Cannot convert {type(value)} to Fraction")

    # Python protocol

    def __eq__(self, other) -> bool:
        if isinstance(other, Fraction):
            return self._numerator == other._numerator and self._denominator == other._denominator
        if _is_int(other):
            return self._denominator == 1 and self._numerator == other
        return NotImplemented

    def __hash__(self) -> int:
        # equal to hash(int) for integral values, like fractions.Fraction
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __lt__(self, other) -> bool:
        if isinstance(other, Fraction) or _is_int(other):
            return self.compare_to(other) < 0
        return NotImplemented

    def __le__(self, other) -> bool:
        if isinstance(other, Fraction) or _is_int(other):
            return self.compare_to(other) <= 0
        return NotImplemented

    def __gt__(self, other) -> bool:
        if isinstance(other, Fraction) or _is_int(other):
            return self.compare_to(other) > 0
        return NotImplemented

    def __ge__(self, other) -> bool:
        if isinstance(other, Fraction) or _is_int(other):
            return self.compare_to(other) >= 0
        return NotImplemented

    def __add__(self, other):
        if isinstance(other, Fraction) or _is_int(other):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other):
        if _is_int(other):
            return Fraction(other).add(self)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Fraction) or _is_int(other):
            return self.subtract(other)
        return NotImplemented

    def __rsub__(self, other):
        if _is_int(other):
            return Fraction(other).subtract(self)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Fraction) or _is_int(other):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other):
        if _is_int(other):
            return Fraction(other).multiply(self)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Fraction) or _is_int(other):
            return self.divide(other)
        return NotImplemented

    def __rtruediv__(self, other):
        if _is_int(other):
            return Fraction(other).divide(self)
        return NotImplemented

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.abs()

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __float__(self) -> float:
        return self.to_double()

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Fraction({self._numerator}, {self._denominator})"

    def __reduce__(self):
        return (Fraction, (self._numerator, self._denominator))


def _is_int(value) -> bool:
    # bool is an int subclass but never a valid numerator
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


Fraction.ZERO = Fraction(0)
Fraction.ONE = Fraction(1)
