import math

import pytest

from contestlib.number_theory import (
    DEFAULT_MODULUS,
    ModInt,
    adaptive_simpson,
    crt,
    discrete_log,
    euler_phi,
    extended_gcd,
    factorize,
    inverse_table,
    is_prime,
    josephus,
    mod_inverse,
    phi_table,
    pollard_rho,
    sieve,
)


def test_modint_division_inverts_multiplication():
    x = ModInt(5) / ModInt(7)
    assert x * 7 == 5


def test_modint_power_matches_builtin():
    assert (ModInt(3) ** 100).value == pow(3, 100, DEFAULT_MODULUS)


def test_modint_mixed_with_ints():
    assert (2 - ModInt(5)).value == (2 - 5) % DEFAULT_MODULUS
    assert -ModInt(1) + 1 == 0


def test_modint_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        ModInt(1) / 0


def test_modint_different_moduli():
    with pytest.raises(ValueError):
        ModInt(1, 7) + ModInt(1, 11)


def test_sieve_agrees_with_phi_table():
    phi = phi_table(200)
    primes = set(sieve(200))
    assert primes == {p for p in range(2, 201) if phi[p] == p - 1}


def test_sieve_agrees_with_is_prime():
    assert sieve(500) == [p for p in range(501) if is_prime(p)]


def test_sieve_small():
    assert sieve(1) == []


@pytest.mark.parametrize("a,b", [(240, 46), (17, 5), (0, 9), (1000000007, 998244353)])
def test_extended_gcd_identity(a, b):
    d, x, y = extended_gcd(a, b)
    assert d == math.gcd(a, b)
    assert a * x + b * y == d


def test_mod_inverse():
    for a in range(1, 30):
        assert a * mod_inverse(a, 31) % 31 == 1


def test_mod_inverse_missing():
    with pytest.raises(ValueError):
        mod_inverse(6, 9)


def test_inverse_table():
    mod = 1_000_000_007
    table = inverse_table(50, mod)
    assert len(table) == 50
    assert all(i * table[i] % mod == 1 for i in range(1, 50))


def test_euler_phi_matches_table():
    phi = phi_table(300)
    assert [euler_phi(k) for k in range(1, 301)] == phi[1:]


def test_large_primes():
    assert is_prime(1000000007)
    assert is_prime(998244353)
    assert not is_prime(561)


def test_pollard_rho_divides():
    n = 1000003 * 999983
    f = pollard_rho(n)
    assert 1 < f < n and n % f == 0


def test_pollard_rho_rejects_prime():
    with pytest.raises(ValueError):
        pollard_rho(1000000007)


@pytest.mark.parametrize("n", [2, 12, 360, 1000000007 * 998244353, 2**20 * 3**5])
def test_factorize_reconstructs(n):
    factors = factorize(n)
    assert math.prod(p**e for p, e in factors.items()) == n
    assert all(is_prime(p) for p in factors)


def test_factorize_one():
    assert factorize(1) == {}


def test_adaptive_simpson():
    result = adaptive_simpson(math.exp, 0.0, 1.0, 1e-12)
    assert result == pytest.approx(math.e - 1, abs=1e-9)


def test_crt_satisfies_all_congruences():
    remainders = [2, 3, 2]
    moduli = [3, 5, 7]
    x = crt(remainders, moduli)
    assert 0 <= x < math.prod(moduli)
    assert all(x % m == r for r, m in zip(remainders, moduli))


def test_crt_length_mismatch():
    with pytest.raises(ValueError):
        crt([1, 2], [3])


def test_discrete_log_solves():
    n = 1000000007
    for a, b in [(5, 123456), (3, 99), (7, 1)]:
        x = discrete_log(a, b, n)
        assert pow(a, x, n) == b


def test_discrete_log_without_solution():
    assert discrete_log(2, 3, 7) is None


@pytest.mark.parametrize("q", [2, 3, 5])
def test_josephus_matches_recurrence(q):
    survivor = 0
    for n in range(1, 40):
        if n > 1:
            survivor = (survivor + q) % n
        assert josephus(n, q) == survivor + 1


def test_josephus_rejects_small_step():
    with pytest.raises(ValueError):
        josephus(5, 1)