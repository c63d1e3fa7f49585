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
"""Exceptions raised by the exact simplex solver"""


class SimplexError(Exception):
    """Base class of all errors raised by exactsimplex"""


class DivisionByZero(SimplexError, ZeroDivisionError):
    """A fraction was constructed with a zero denominator or divided by zero"""


class FormatError(SimplexError, ValueError):
    """A text cell is not an integer, decimal or 'n/d' literal"""


class InvalidDimension(SimplexError, ValueError):
    """The tableau violates the minimum dimension or has ragged rows"""


class NoPivotColumn(SimplexError):
    """No negative reduced cost exists, the tableau is already optimal"""


class NoPivotRow(SimplexError):
    """No constraint row yields a positive ratio, the problem is unbounded"""


class NotOptimal(SimplexError):
    """A decision was requested from a tableau that is not optimal"""
