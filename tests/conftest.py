import random
import pytest
from fractions import Fraction
from fastpoly import Fr, Polynomial


@pytest.fixture
def rng():
    return random.Random(42)


# Factories for random polynomials with exact coefficients. The leading
# coefficient is forced non-zero so that the length is exactly `length`.

@pytest.fixture
def random_int_poly(rng):
    def make(length, bound=1000):
        coeffs = [rng.randint(-bound, bound) for _ in range(length)]
        coeffs[-1] = coeffs[-1] or 1
        return Polynomial(coeffs)
    return make


@pytest.fixture
def random_fraction_poly(rng):
    def make(length, bound=50):
        coeffs = [Fraction(rng.randint(-bound, bound), rng.randint(1, bound))
                  for _ in range(length)]
        coeffs[-1] = coeffs[-1] or Fraction(1)
        return Polynomial(coeffs)
    return make


@pytest.fixture
def random_field_poly(rng):
    def make(length):
        coeffs = [Fr(rng.randrange(Fr.field_modulus)) for _ in range(length)]
        if coeffs[-1] == 0:
            coeffs[-1] = Fr(1)
        return Polynomial(coeffs)
    return make
