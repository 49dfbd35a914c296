from __future__ import annotations

import itertools
from typing import List, Optional, Tuple


def factor_prime_power(n: int) -> Optional[Tuple[int, int]]:
    """Return ``(p, k)`` with ``n == p ** k`` or None when n is not a prime power."""
    if n < 2:
        return None
    p = 2
    while p * p <= n and n % p:
        p += 1
    if n % p:
        p = n  # n itself is prime
    k = 0
    rest = n
    while rest % p == 0:
        rest //= p
        k += 1
    if rest != 1:
        return None
    return p, k


def is_prime_power(n: int) -> bool:
    # Order 1 counts: the degenerate plane is a triangle.
    return n == 1 or factor_prime_power(n) is not None


def valid_orders(limit: int) -> List[int]:
    return [n for n in range(1, limit + 1) if is_prime_power(n)]


class GaloisField:
    """Finite field of prime power order with tabulated add/mul.

    Elements are the ints ``0 .. order-1``. For ``order = p ** k`` an element's
    base-p digits are the coefficients of a polynomial of degree < k, reduced
    modulo a monic irreducible polynomial of degree k. Order 1 is accepted as
    the trivial ring {0} so the order-1 plane can use the same construction.
    """

    def __init__(self, order: int) -> None:
        if order == 1:
            self.order = 1
            self.prime, self.degree = 1, 0
            self.modulus: List[int] = []
            self._add = [[0]]
            self._mul = [[0]]
            return

        factors = factor_prime_power(order)
        if factors is None:
            raise ValueError(f"Field order must be a prime power: {order}")
        self.order = order
        self.prime, self.degree = factors
        self.modulus = _find_irreducible(self.prime, self.degree)
        self._add = [[self._poly_add(a, b) for b in range(order)] for a in range(order)]
        self._mul = [[self._poly_mul(a, b) for b in range(order)] for a in range(order)]

    def add(self, a: int, b: int) -> int:
        return self._add[a][b]

    def mul(self, a: int, b: int) -> int:
        return self._mul[a][b]

    def elements(self) -> range:
        return range(self.order)

    # Polynomial helpers ----------------------------------------------

    def _digits(self, value: int) -> List[int]:
        digits = []
        for _ in range(self.degree):
            value, digit = divmod(value, self.prime)
            digits.append(digit)
        return digits

    def _value(self, digits: List[int]) -> int:
        value = 0
        for digit in reversed(digits):
            value = value * self.prime + digit
        return value

    def _poly_add(self, a: int, b: int) -> int:
        p = self.prime
        return self._value([(x + y) % p for x, y in zip(self._digits(a), self._digits(b))])

    def _poly_mul(self, a: int, b: int) -> int:
        product = _poly_product(self._digits(a), self._digits(b), self.prime)
        return self._value(_poly_reduce(product, self.modulus, self.prime)[: self.degree])


def _poly_product(a: List[int], b: List[int], p: int) -> List[int]:
    out = [0] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        if not x:
            continue
        for j, y in enumerate(b):
            out[i + j] = (out[i + j] + x * y) % p
    return out


def _poly_reduce(poly: List[int], modulus: List[int], p: int) -> List[int]:
    """Remainder of ``poly`` divided by a monic ``modulus`` (coefficients low to high)."""
    rem = list(poly)
    deg = len(modulus) - 1
    for shift in range(len(rem) - 1 - deg, -1, -1):
        coef = rem[shift + deg]
        if coef:
            for i, m in enumerate(modulus):
                rem[shift + i] = (rem[shift + i] - coef * m) % p
    rem.extend([0] * max(0, deg - len(rem)))
    return rem


def _find_irreducible(p: int, k: int) -> List[int]:
    """Smallest monic degree-k polynomial over GF(p) with no monic factor of lower degree."""
    if k == 1:
        return [0, 1]
    for tail in itertools.product(range(p), repeat=k):
        candidate = list(reversed(tail)) + [1]
        if candidate[0] == 0:
            continue  # divisible by x
        if not any(_divides(f, candidate, p) for f in _monic_polys(p, k // 2)):
            return candidate
    raise RuntimeError(f"No irreducible polynomial of degree {k} over GF({p})")


def _monic_polys(p: int, max_degree: int):
    for deg in range(1, max_degree + 1):
        for tail in itertools.product(range(p), repeat=deg):
            yield list(reversed(tail)) + [1]


def _divides(divisor: List[int], poly: List[int], p: int) -> bool:
    return not any(_poly_reduce(poly, divisor, p))
