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
"""Primal tableau simplex with exact rational pivoting

The Simplex class wraps a tableau (see exactsimplex.tableau) and pivots it in
place. Pivot column selection follows Dantzig's rule, pivot row selection the
minimum ratio test. Cycling on degenerate tableaus is not detected.
"""

from typing import Dict, Optional
import logging

from .errors import NoPivotColumn, NoPivotRow, NotOptimal
from .fraction import Fraction
from .names import *
from .tableau import Tableau, copy_tableau, validate_tableau


class Simplex:
    """Tableau pivoting engine
    
    Args:
        tableau (list of lists):
            Tableau with header row, constraint rows and objective row as
            produced by generate_tableau_from or from_standard_form. The
            tableau is mutated by pivot().

            Integer, string or float cells are converted to Fractions in
            place.

    Raises:
        InvalidDimension: If the tableau violates the shape invariants.
    """

    def __init__(self, tableau: Tableau):
        for row in tableau[1:]:
            row[1:] = [Fraction.value_of(cell) for cell in row[1:]]
        validate_tableau(tableau)
        self.tableau = tableau
        self.iterations = 0
        self._unbounded = False

    @property
    def objective_row(self) -> list:
        return self.tableau[-1]

    @property
    def objective_value(self) -> Fraction:
        return self.tableau[-1][-1]

    @property
    def status(self) -> str:
        if self._unbounded:
            return UNBOUNDED
        return OPTIMAL if self.is_optimal() else NOT_OPTIMAL

    def get_index_of_pivot_column(self) -> int:
        """Index of the column with the most negative reduced cost
        
        Only decision and slack columns are candidates. On ties the leftmost
        column wins.

        Raises:
            NoPivotColumn: If no reduced cost is negative.
        """
        objective_row = self.objective_row
        ipc = -1
        for j in range(len(objective_row) - 3, 0, -1):
            cell = objective_row[j]
            if cell.is_negative() and (ipc == -1 or cell <= objective_row[ipc]):
                ipc = j
        if ipc == -1:
            raise NoPivotColumn('There is no pivot column.')
        return ipc

    def ratio(self, row: int, column: int) -> Optional[Fraction]:
        """RHS / entry of a constraint row, None if the entry is not positive"""
        entry = self.tableau[row][column]
        if not entry.is_positive():
            return None
        return self.tableau[row][-1] / entry

    def get_index_of_pivot_row(self, column: Optional[int] = None) -> int:
        """Index of the constraint row passing the minimum ratio test
        
        Only strictly positive ratios are candidates. Rows are scanned from
        last to first, so ties go to the larger row index.

        Args:
            column (optional (int)):
                Pivot column. Selected with get_index_of_pivot_column if
                omitted.

        Raises:
            NoPivotRow: If no row yields a positive ratio in the column.
        """
        if column is None:
            column = self.get_index_of_pivot_column()
        ipr = -1
        min_ratio = None
        for i in range(len(self.tableau) - 2, 0, -1):
            ratio = self.ratio(i, column)
            if ratio is None or not ratio.is_positive():
                continue
            if min_ratio is None or ratio < min_ratio:
                ipr = i
                min_ratio = ratio
        if ipr == -1:
            raise NoPivotRow(f"There is no pivot row for column {self.tableau[0][column]}.")
        return ipr

    def pivot(self) -> Tableau:
        """Performs one Gauss-Jordan pivot step on the tableau in place

        Raises:
            NoPivotColumn: If the tableau is already optimal.
            NoPivotRow: If the entering column is unbounded. The status
                becomes 'unbounded'.
        """
        tableau = self.tableau
        ipc = self.get_index_of_pivot_column()
        try:
            ipr = self.get_index_of_pivot_row(ipc)
        except NoPivotRow:
            self._unbounded = True
            raise NoPivotRow(f"There is no pivot row for column {tableau[0][ipc]}, "
                             "the problem is unbounded.") from None
        logging.debug(f"Pivot on row {ipr} ({tableau[ipr][0]} leaves), column {ipc} ({tableau[0][ipc]} enters).")

        tableau[ipr][0] = tableau[0][ipc]
        pivot_element = tableau[ipr][ipc]
        pivot_row = tableau[ipr]
        for j in range(1, len(pivot_row)):
            pivot_row[j] = pivot_row[j] / pivot_element

        for i in range(1, len(tableau)):
            if i == ipr:
                continue
            m = tableau[i][ipc]
            if m.is_zero():
                continue
            row = tableau[i]
            for j in range(1, len(row)):
                row[j] = row[j] - pivot_row[j] * m

        self.iterations += 1
        return tableau

    def is_optimal(self) -> bool:
        return all(cell.numerator >= 0 for cell in self.objective_row[1:])

    def get_decision(self) -> Dict[str, Fraction]:
        """Maps every variable label to its value in the optimal tableau
        
        Basic variables take the RHS of their row, all other header variables
        are 0. The objective label 'P' maps to the objective value.

        Raises:
            NotOptimal: If the tableau is not optimal.
        """
        if not self.is_optimal():
            raise NotOptimal('The tableau is not optimal. Hence, there is no decision.')
        decision = {}
        for row in self.tableau[1:]:
            decision[row[0]] = row[-1]
        for label in reversed(self.tableau[0][1:-1]):
            decision.setdefault(label, Fraction.ZERO)
        return decision


def solve(tableau: Tableau, **kwargs) -> Dict[str, Fraction]:
    """Pivots a tableau until it is optimal and returns the decision
    
    Example:
        decision = solve(generate_tableau_from(text), sink=snapshots.append)
    
    Args:
        tableau (list of lists):
            Initial tableau, mutated in place.
            
        sink (optional (callable)):
            Called with a copy of the tableau before every pivot and once with
            the optimal tableau, for progressive display.

    Returns:
        (dict): 
        Variable label to optimal value (Fraction).

    Raises:
        NoPivotRow: If the problem is unbounded.
    """
    for key in kwargs:
        if key not in (SINK,):
            raise Exception("Key " + key + " is not supported.")
    sink = kwargs.get(SINK)
    simplex = Simplex(tableau)
    logging.info(f"Solving tableau with {len(tableau) - 2} constraints.")
    while True:
        if sink is not None:
            sink(copy_tableau(simplex.tableau))
        if simplex.is_optimal():
            break
        try:
            simplex.pivot()
        except NoPivotRow:
            logging.warning(f"Problem is unbounded after {simplex.iterations} pivot(s).")
            raise
    logging.info(f"Optimal after {simplex.iterations} pivot(s), objective value {simplex.objective_value}.")
    return simplex.get_decision()
