import pytest
import exactsimplex as es

# x1 + x2 <= 12, 2 x1 + x2 <= 16, max 40 x1 + 30 x2
FURNITURE = """
1 1 1 0 0 12
2 1 0 1 0 16
-40 -30 0 0 1 0
"""

# x2 has no positive entry in any constraint row
UNBOUNDED = """
1 -1 1 0 0 4
2 0 0 1 0 10
-1 -2 0 0 1 0
"""


@pytest.fixture
def furniture_tableau():
    """Provide a fresh tableau of the two-constraint furniture problem."""
    return es.generate_tableau_from(FURNITURE)


@pytest.fixture
def unbounded_tableau():
    """Provide a fresh tableau of an unbounded problem."""
    return es.generate_tableau_from(UNBOUNDED)


@pytest.fixture(params=[(1, 2), (-3, 4), (6, -8), (0, 5), (0, -7), (12, 18), (-100, -250)], scope="session")
def int_pair(request: pytest.FixtureRequest) -> tuple:
    """Provide session-level fixture for numerator/denominator pairs."""
    return request.param


@pytest.fixture(params=[(1, 2, 1, 3), (-3, 4, 5, -6), (7, 1, 0, 9), (2, 3, -2, 3), (11, 13, 17, 19)], scope="session")
def fraction_pair(request: pytest.FixtureRequest) -> tuple:
    """Provide session-level fixture for pairs of fractions."""
    n1, d1, n2, d2 = request.param
    return es.Fraction(n1, d1), es.Fraction(n2, d2)
