import math
import random

import pytest

from contestlib.lexicographic_simplex import TableauSimplex


def _vertex_minimum(a, b, c):
    rows = [(r[0], r[1], bi) for r, bi in zip(a, b)] + [(-1.0, 0.0, 0.0), (0.0, -1.0, 0.0)]
    best = None
    for i in range(len(rows)):
        for j in range(i + 1, len(rows)):
            a1, b1, r1 = rows[i]
            a2, b2, r2 = rows[j]
            det = a1 * b2 - a2 * b1
            if abs(det) < 1e-12:
                continue
            x = (r1 * b2 - r2 * b1) / det
            y = (a1 * r2 - a2 * r1) / det
            if all(p * x + q * y <= r + 1e-7 for p, q, r in rows):
                value = c[0] * x + c[1] * y
                best = value if best is None else min(best, value)
    return best


def _random_lp(seed):
    rng = random.Random(seed)
    a = [[rng.randint(-5, 5), rng.randint(-5, 5)] for _ in range(3)]
    b = [rng.randint(-5, 20) for _ in range(3)]
    a += [[1, 0], [0, 1]]
    b += [10, 10]
    c = [rng.randint(-5, 5), rng.randint(-5, 5)]
    return a, b, c


def _feasible(a, b, x):
    return all(v >= -1e-7 for v in x) and all(
        sum(p * v for p, v in zip(row, x)) <= bi + 1e-7 for row, bi in zip(a, b)
    )


@pytest.mark.parametrize("seed", range(25))
def test_random_programs_match_vertex_enumeration(seed):
    a, b, c = _random_lp(seed)
    value, x = TableauSimplex(a, b, c).solve()
    expected = _vertex_minimum(a, b, c)
    if expected is None:
        assert value == math.inf
        assert x is None
    else:
        assert value == pytest.approx(expected, abs=1e-6)
        assert len(x) == 2
        assert _feasible(a, b, x)
        assert sum(ci * xi for ci, xi in zip(c, x)) == pytest.approx(value, abs=1e-6)


def test_unbounded():
    value, x = TableauSimplex([[-1.0]], [0.0], [-1.0]).solve()
    assert value == -math.inf
    assert x is None


def test_infeasible():
    value, x = TableauSimplex([[1.0]], [-1.0], [1.0]).solve()
    assert value == math.inf
    assert x is None


def test_redundant_constraints_are_handled():
    a = [[1, 1], [2, 2], [-1, -1]]
    b = [4, 8, -4]
    c = [1, 2]
    value, x = TableauSimplex(a, b, c).solve()
    assert value == pytest.approx(_vertex_minimum(a, b, c), abs=1e-6)
    assert _feasible(a, b, x)


def test_solve_is_repeatable():
    solver = TableauSimplex([[1.0, 0.0], [0.0, 1.0]], [2.0, 3.0], [-1.0, -1.0])
    first_value, first_x = solver.solve()
    second_value, second_x = solver.solve()
    assert first_value == pytest.approx(-5.0, abs=1e-9)
    assert second_value == pytest.approx(-5.0, abs=1e-9)
    assert list(first_x) == pytest.approx([2.0, 3.0], abs=1e-9)
    assert list(second_x) == pytest.approx([2.0, 3.0], abs=1e-9)


def test_shape_errors():
    with pytest.raises(ValueError):
        TableauSimplex([[1.0]], [1.0, 2.0], [1.0])
    with pytest.raises(ValueError):
        TableauSimplex([[1.0, 2.0]], [1.0], [1.0])