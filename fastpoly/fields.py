"""
Prime field coefficient types and the root-of-unity lookups the number
theoretic transform needs.

Field elements are py_ecc ``FQ`` objects, so they mix freely with plain
ints under +, -, * and / and compare equal to ints.
"""

from functools import cache
import py_ecc.bn128 as b
from py_ecc.fields.field_elements import FQ as Field

# Non-residue search starts here; 5 generates the multiplicative group of Fr
PRIMITIVE_ROOT = 5


class Fr(Field):
    field_modulus = b.curve_order


def next_power_of_two(x):
    return 2**((x - 1).bit_length())


# Returns a py_ecc field class for the given prime, reusing one class per
# modulus so that elements built at different call sites share a type
@cache
def prime_field(modulus):
    assert pow(2, modulus, modulus) == 2
    if modulus == Fr.field_modulus:
        return Fr
    return type('GF%d' % modulus, (Field,), {'field_modulus': modulus})


# Largest s such that 2**s divides modulus - 1
def two_adicity(modulus):
    m = modulus - 1
    return (m & -m).bit_length() - 1


@cache
def _quadratic_non_residue(modulus):
    z = PRIMITIVE_ROOT
    while pow(z, (modulus - 1) // 2, modulus) != modulus - 1:
        z += 1
    return z


# Gets a root of unity of exactly the given power-of-two order
@cache
def root_of_unity(modulus, order):
    if order < 1 or order & (order - 1):
        raise ValueError("Root of unity order must be a power of two, got {}".format(order))
    if (modulus - 1) % order:
        raise ValueError("No root of unity of order {} mod {}".format(order, modulus))
    # z**((p-1)/2) == -1, so z**((p-1)/order) has order exactly `order`
    return pow(_quadratic_non_residue(modulus), (modulus - 1) // order, modulus)
