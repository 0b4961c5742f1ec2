"""
Convolution of coefficient sequences: the product of two polynomials given
as lists of coefficients, lowest degree first.

``convolve`` picks an exact or numeric transform based on the coefficients
it is handed. Outputs always have length len(a) + len(b) - 1 and are not
trimmed.
"""

import logging
import math
import numbers
from fractions import Fraction

import numpy as np
from py_ecc.fields.field_elements import FQ as Field

from .fields import next_power_of_two, root_of_unity, two_adicity

logger = logging.getLogger(__name__)


def brute_force_convolve(a, b):
    o = [0] * (len(a) + len(b) - 1)
    for i, aval in enumerate(a):
        for j, bval in enumerate(b):
            o[i+j] += aval * bval
    return o


def _simple_ft(vals, modulus, roots_of_unity):
    L = len(roots_of_unity)
    o = []
    for i in range(L):
        last = 0
        for j in range(L):
            last += vals[j] * roots_of_unity[(i*j) % L]
        o.append(last % modulus)
    return o


def _fft(vals, modulus, roots_of_unity):
    if len(vals) <= 4:
        return _simple_ft(vals, modulus, roots_of_unity)
    L = _fft(vals[::2], modulus, roots_of_unity[::2])
    R = _fft(vals[1::2], modulus, roots_of_unity[::2])
    o = [0 for i in vals]
    for i, (x, y) in enumerate(zip(L, R)):
        y_times_root = y * roots_of_unity[i]
        o[i] = (x + y_times_root) % modulus
        o[i + len(L)] = (x - y_times_root) % modulus
    return o


def expand_root_of_unity(root_of_unity, modulus):
    # Build up roots of unity
    rootz = [1, root_of_unity]
    while rootz[-1] != 1:
        rootz.append((rootz[-1] * root_of_unity) % modulus)
    return rootz


# Number theoretic transform of vals at the powers of root_of_unity. vals is
# zero-padded up to the order of the root.
def fft(vals, modulus, root_of_unity, inv=False):
    rootz = expand_root_of_unity(root_of_unity, modulus)
    # Fill in vals with zeroes if needed
    if len(rootz) > len(vals) + 1:
        vals = vals + [0] * (len(rootz) - len(vals) - 1)
    if inv:
        # Inverse FFT
        invlen = pow(len(vals), modulus - 2, modulus)
        return [(x * invlen) % modulus for x in
                _fft(vals, modulus, rootz[:0:-1])]
    else:
        # Regular FFT
        return _fft(vals, modulus, rootz[:-1])


def ntt_convolve(a, b, modulus):
    a = [int(x) % modulus for x in a]
    b = [int(x) % modulus for x in b]
    length = len(a) + len(b) - 1
    size = next_power_of_two(length)
    if size > 2**two_adicity(modulus):
        # Not enough roots of unity in this field, multiply exactly over the
        # integers and reduce afterwards
        logger.debug("No root of unity of order %d mod %d, using integer convolution",
                     size, modulus)
        return [x % modulus for x in integer_convolve(a, b)]
    w = root_of_unity(modulus, size)
    x1 = fft(a, modulus, w)
    x2 = fft(b, modulus, w)
    return fft([(v1 * v2) % modulus for v1, v2 in zip(x1, x2)],
               modulus, w, inv=True)[:length]


def _pack(coeffs, width):
    return int.from_bytes(b''.join(c.to_bytes(width, 'little') for c in coeffs), 'little')


def _unpack(value, width, length):
    raw = value.to_bytes(width * length, 'little')
    return [int.from_bytes(raw[i*width:(i+1)*width], 'little') for i in range(length)]


# Kronecker substitution: with every output coefficient below 2**(8*width),
# evaluating both inputs at 2**(8*width) and multiplying the two big
# integers leaves the product's coefficients as non-overlapping digit blocks
def _unsigned_convolve(a, b):
    length = len(a) + len(b) - 1
    if max(a) == 0 or max(b) == 0:
        return [0] * length
    bound = max(a) * max(b) * min(len(a), len(b))
    width = bound.bit_length() // 8 + 1
    return _unpack(_pack(a, width) * _pack(b, width), width, length)


def _split_signs(coeffs):
    return [(1, [max(x, 0) for x in coeffs]), (-1, [max(-x, 0) for x in coeffs])]


def integer_convolve(a, b):
    a = [int(x) for x in a]
    b = [int(x) for x in b]
    o = [0] * (len(a) + len(b) - 1)
    for sign_a, part_a in _split_signs(a):
        for sign_b, part_b in _split_signs(b):
            sign = sign_a * sign_b
            for i, v in enumerate(_unsigned_convolve(part_a, part_b)):
                o[i] += sign * v
    return o


def rational_convolve(a, b):
    a = [Fraction(x) for x in a]
    b = [Fraction(x) for x in b]
    da = math.lcm(*[x.denominator for x in a])
    db = math.lcm(*[x.denominator for x in b])
    o = integer_convolve([x.numerator * (da // x.denominator) for x in a],
                         [x.numerator * (db // x.denominator) for x in b])
    return [Fraction(x, da * db) for x in o]


# Floating point convolution. Agrees with brute force up to rounding error.
def numeric_convolve(a, b):
    length = len(a) + len(b) - 1
    size = next_power_of_two(length)
    if _coefficient_kind(list(a) + list(b)) is complex:
        fa = np.array(a, dtype=np.complex128)
        fb = np.array(b, dtype=np.complex128)
        o = np.fft.ifft(np.fft.fft(fa, size) * np.fft.fft(fb, size))
    else:
        fa = np.array(a, dtype=np.float64)
        fb = np.array(b, dtype=np.float64)
        o = np.fft.irfft(np.fft.rfft(fa, size) * np.fft.rfft(fb, size), size)
    return o[:length].tolist()


_RANKS = {int: 0, Fraction: 1, float: 2, complex: 3}


# The widest coefficient kind present: a py_ecc field class, complex, float,
# Fraction or int. None if some value is none of these.
def _coefficient_kind(values):
    kind = int
    field = None
    for x in values:
        if isinstance(x, Field):
            field = type(x)
            continue
        if isinstance(x, numbers.Integral):
            k = int
        elif isinstance(x, numbers.Rational):
            k = Fraction
        elif isinstance(x, numbers.Real):
            k = float
        elif isinstance(x, numbers.Complex):
            k = complex
        else:
            return None
        if _RANKS[k] > _RANKS[kind]:
            kind = k
    return field or kind


def convolve(a, b):
    kind = _coefficient_kind(list(a) + list(b))
    if kind is None:
        logger.debug("No transform for coefficient types %s, using brute force",
                     sorted({type(x).__name__ for x in list(a) + list(b)}))
        return brute_force_convolve(a, b)
    logger.debug("Convolving %d x %d coefficients as %s", len(a), len(b), kind.__name__)
    if issubclass(kind, Field):
        return [kind(x) for x in ntt_convolve(a, b, kind.field_modulus)]
    if kind is complex or kind is float:
        return numeric_convolve(a, b)
    if kind is Fraction:
        return rational_convolve(a, b)
    return integer_convolve(a, b)
