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
"""Functions for building, validating and rendering simplex tableaus

A tableau is a list of rows. Row 0 holds the column labels ('BV', decision
variables, slack variables, 'P', 'RHS'), the following rows hold a basic
variable label and Fraction cells, and the last row is the objective row.
"""

from typing import Dict, List
from scipy import sparse
import numpy as np
import logging
import html
import re

from .errors import InvalidDimension
from .fraction import Fraction
from .names import *

MIN_CONSTRAINTS = 2
MIN_INTERIOR_COLUMNS = 5

Tableau = List[list]


def generate_tableau_from(coefficient_matrix: str, **kwargs) -> Tableau:
    """Builds a tableau from a coefficient matrix written as text
    
    Each non-empty line is one row, cells are separated by whitespace and
    parsed with Fraction.parse. The last line is the objective row. Every line
    contains the interior cells of the tableau including the 'P' column, e.g.:
    
        1 1 1 0 0 12
        2 1 0 1 0 16
        -40 -30 0 0 1 0
    
    Args:
        coefficient_matrix (str): 
            Rows separated by line breaks.
            
        decision_prefix (optional (str)): (Default: 'x')
            Prefix of the decision variable labels.
            
        slack_prefix (optional (str)): (Default: 's')
            Prefix of the slack variable labels.

    Returns:
        (list of lists): 
        Tableau with header row and labeled rows.

    Raises:
        FormatError: If a cell is not an integer, decimal or 'n/d' literal.
        InvalidDimension: If the matrix is smaller than the minimum or ragged.
    """
    decision_prefix, slack_prefix = _parse_label_kwargs(kwargs)
    lines = [l for l in coefficient_matrix.strip().split('\n') if l.strip()]
    if len(lines) < MIN_CONSTRAINTS + 1:
        raise InvalidDimension(_dimension_message())
    rows = []
    for line in lines:
        row = [Fraction.parse(cell) for cell in re.split(r'\s+', line.strip())]
        if len(row) < MIN_INTERIOR_COLUMNS or (rows and len(rows[0]) != len(row)):
            raise InvalidDimension(_dimension_message())
        rows.append(row)
    tableau = _label(rows, decision_prefix, slack_prefix)
    validate_tableau(tableau)
    logging.info(f"Generated tableau with {len(rows) - 1} constraints and {len(tableau[0]) - len(rows) - 2} "
                 "decision variables.")
    return tableau


def from_standard_form(A, b, c, **kwargs) -> Tableau:
    """Builds the initial tableau of max c*x s.t. A*x <= b, x >= 0
    
    One slack variable is added per constraint. The objective row holds the
    negated objective coefficients.

    Args:
        A (list of lists, numpy.ndarray or scipy.sparse matrix):
            Constraint coefficients (m x n).
            
        b (list or numpy.ndarray):
            Right hand side (m).
            
        c (list or numpy.ndarray):
            Objective coefficients (n).
            
        decision_prefix, slack_prefix (optional (str)):
            Label prefixes, see generate_tableau_from.

    Returns:
        (list of lists): 
        Tableau with header row and labeled rows.
    """
    decision_prefix, slack_prefix = _parse_label_kwargs(kwargs)
    if sparse.issparse(A):
        A = A.toarray()
    A = np.asarray(A, dtype=object)
    b = np.asarray(b, dtype=object).ravel()
    c = np.asarray(c, dtype=object).ravel()
    if A.ndim != 2:
        raise InvalidDimension(f"Constraint matrix must be two-dimensional, got {A.ndim} dimension(s).")
    num_cons, num_vars = A.shape
    if b.shape[0] != num_cons:
        raise InvalidDimension(f"Right hand side has {b.shape[0]} entries, expected {num_cons}.")
    if c.shape[0] != num_vars:
        raise InvalidDimension(f"Objective has {c.shape[0]} entries, expected {num_vars}.")
    if num_cons < MIN_CONSTRAINTS or num_vars < 1:
        raise InvalidDimension(_dimension_message())
    rows = []
    for i in range(num_cons):
        row = [Fraction.value_of(a) for a in A[i, :]]
        row += [Fraction.ONE if k == i else Fraction.ZERO for k in range(num_cons)]
        row += [Fraction.ZERO, Fraction.value_of(b[i])]
        rows.append(row)
    rows.append([-Fraction.value_of(v) for v in c] + [Fraction.ZERO] * num_cons + [Fraction.ONE, Fraction.ZERO])
    tableau = _label(rows, decision_prefix, slack_prefix)
    validate_tableau(tableau)
    return tableau


def validate_tableau(tableau: Tableau) -> None:
    """Checks the shape invariants of a tableau
    
    At least two constraint rows, at least five interior columns, identical
    row lengths, at least one decision variable column and a 'P' column that
    is 0 in every constraint row and positive in the objective row. All
    cells below the header except the labels must be Fractions.

    Raises:
        InvalidDimension: If any of the above is violated.
        TypeError: If a cell is not a Fraction.
    """
    if len(tableau) < MIN_CONSTRAINTS + 2:
        raise InvalidDimension(_dimension_message() + f" Found {max(len(tableau) - 2, 0)} constraint row(s).")
    width = len(tableau[0])
    for i, row in enumerate(tableau):
        if len(row) != width:
            raise InvalidDimension(f"Row {i} has {len(row)} cells, expected {width}.")
    if width - 1 < MIN_INTERIOR_COLUMNS:
        raise InvalidDimension(_dimension_message() + f" Found {width - 1} interior column(s).")
    if width - (len(tableau) - 2) - 3 < 1:
        raise InvalidDimension(f"Tableau with {width} columns and {len(tableau) - 2} constraints "
                               "leaves no decision variable column.")
    for i, row in enumerate(tableau[1:], start=1):
        for j, cell in enumerate(row[1:], start=1):
            if not isinstance(cell, Fraction):
                raise TypeError(f"Cell ({i}, {j}) is of type {type(cell).__name__}, expected Fraction.")
    # the column before RHS must be the unit column of the objective value
    if any(not row[-2].is_zero() for row in tableau[1:-1]) or not tableau[-1][-2].is_positive():
        raise InvalidDimension("The column before RHS must be the 'P' column (0 in every constraint row, "
                               "positive in the objective row). Does every row contain the 'P' column?")


def copy_tableau(tableau: Tableau) -> Tableau:
    """Row-wise copy, cells are immutable and shared"""
    return [list(row) for row in tableau]


def tableau_to_string(tableau: Tableau) -> str:
    cells = [[str(c) for c in row] for row in tableau]
    widths = [max(len(row[j]) for row in cells) for j in range(len(cells[0]))]
    return '\n'.join('  '.join(c.rjust(w) for c, w in zip(row, widths)) for row in cells)


def tableau_to_html(tableau: Tableau) -> str:
    html_table = '<table>'
    for row in tableau:
        html_table += '<tr>' + ''.join(f'<td>{html.escape(str(cell))}</td>' for cell in row) + '</tr>'
    return html_table + '</table>'


def decision_to_string(decision: Dict[str, Fraction]) -> str:
    return '\n'.join(f"{label} = {value}" for label, value in decision.items())


def _label(rows: List[List[Fraction]], decision_prefix: str, slack_prefix: str) -> Tableau:
    # rows carry the interior cells including 'P', the last row is the objective
    num_cons = len(rows) - 1
    num_vars = len(rows[0]) - num_cons - 2
    header = [BV]
    header += [f"{decision_prefix}{i}" for i in range(1, num_vars + 1)]
    header += [f"{slack_prefix}{i}" for i in range(1, num_cons + 1)]
    header += [P, RHS]
    tableau = [header]
    for i, row in enumerate(rows[:-1]):
        tableau.append([f"{slack_prefix}{i + 1}"] + list(row))
    tableau.append([P] + list(rows[-1]))
    return tableau


def _parse_label_kwargs(kwargs) -> tuple:
    for key in kwargs:
        if key not in (DECISION_PREFIX, SLACK_PREFIX):
            raise Exception("Key " + key + " is not supported.")
    decision_prefix = kwargs.get(DECISION_PREFIX, DEFAULT_DECISION_PREFIX)
    slack_prefix = kwargs.get(SLACK_PREFIX, DEFAULT_SLACK_PREFIX)
    if decision_prefix == slack_prefix:
        raise Exception("Decision and slack variable prefixes must differ.")
    return decision_prefix, slack_prefix


def _dimension_message() -> str:
    return (f"The minimum dimension of a valid tableau is {MIN_CONSTRAINTS} constraint rows "
            f"and {MIN_INTERIOR_COLUMNS} interior columns.")
