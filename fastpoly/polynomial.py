import logging
import numbers

from . import fft
from .errors import DivisionByZeroError, IllFormedDivisionError

logger = logging.getLogger(__name__)

# Products with at most this many coefficients are multiplied with the
# double loop, larger ones go through the transform
BRUTE_FORCE_LIMIT = 200


def _is_zero(x):
    return x == 0


def _inverse(x):
    # Units of the integers invert exactly, so integer polynomials divided
    # by monic ones stay integral
    if isinstance(x, numbers.Integral) and x in (1, -1):
        return x
    return 1 / x


class Polynomial(object):
    """
    A univariate polynomial over any coefficient type supporting +, -, *, /,
    negation, construction from small ints and comparison with 0.

    `coeffs` holds the coefficients in ascending order of degree and is
    always canonical: never empty, and without trailing zeros unless the
    polynomial is the zero polynomial [0]. Operators never modify their
    operands; augmented assignment rebinds to a fresh value.
    """

    # None means the module level BRUTE_FORCE_LIMIT
    brute_force_limit = None
    # Convolution used for products above the brute force limit
    transform = staticmethod(fft.convolve)

    def __init__(self, coeffs=None):
        self.coeffs = list(coeffs) if coeffs is not None else []
        if not self.coeffs:
            self.coeffs = [0]
        self.shorten()

    def _new(self, coeffs):
        return type(self)(coeffs)

    # Drops trailing zero coefficients, keeping at least one
    def shorten(self):
        while len(self.coeffs) > 1 and _is_zero(self.coeffs[-1]):
            self.coeffs.pop()

    # Number of coefficients, with the zero polynomial counted as 0. So a
    # non-zero constant has deg() 1 and a cubic has deg() 4.
    def deg(self):
        if len(self.coeffs) == 1:
            return 0 if _is_zero(self.coeffs[0]) else 1
        return len(self.coeffs)

    def is_zero(self):
        return self.deg() == 0

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return len(self.coeffs) == len(other.coeffs) and \
            all(x == y for x, y in zip(self.coeffs, other.coeffs))

    def __neg__(self):
        return self._new([-c for c in self.coeffs])

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        a, b = self.coeffs, other.coeffs
        return self._new([(a[i] if i < len(a) else 0) + (b[i] if i < len(b) else 0)
                          for i in range(max(len(a), len(b)))])

    def __sub__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        a, b = self.coeffs, other.coeffs
        return self._new([(a[i] if i < len(a) else 0) - (b[i] if i < len(b) else 0)
                          for i in range(max(len(a), len(b)))])

    def __mul__(self, other):
        if isinstance(other, Polynomial):
            return self.multiply(other)
        return self._new([c * other for c in self.coeffs])

    def __rmul__(self, other):
        return self._new([other * c for c in self.coeffs])

    def multiply(self, other, method=None):
        """
        Multiplies two polynomials. Small products use the O(n*m) double
        loop; larger ones are handed to `transform`. `method` forces one of
        the two paths ('brute' or 'transform').
        """
        result_deg = self.deg() + other.deg() - 1
        if method is None:
            limit = self.brute_force_limit
            if limit is None:
                limit = BRUTE_FORCE_LIMIT
            method = 'brute' if result_deg <= limit else 'transform'
        if method == 'brute':
            coeffs = fft.brute_force_convolve(self.coeffs, other.coeffs)
        elif method == 'transform':
            logger.debug("Multiplying %d x %d coefficients with the transform",
                         len(self.coeffs), len(other.coeffs))
            coeffs = self.transform(self.coeffs, other.coeffs)
        else:
            raise ValueError("Unknown multiplication method: {}".format(method))
        return self._new(coeffs)

    def __truediv__(self, other):
        if isinstance(other, Polynomial):
            return self._quotient(other)
        if _is_zero(other):
            raise DivisionByZeroError("Polynomial divided by zero")
        return self._new([c / other for c in self.coeffs])

    def __floordiv__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._quotient(other)

    def __mod__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return divmod(self, other)[1]

    def __divmod__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        q = self._quotient(other)
        # The remainder has fewer coefficients than the divisor; truncating
        # also discards rounding residue for floating point coefficients
        r = (self - other * q).truncate(other.deg() - 1)
        return q, r

    # The polynomial modulo x^n, ie. its first n coefficients
    def truncate(self, n):
        if n < 0:
            raise ValueError("Cannot truncate to {} coefficients".format(n))
        if n == 0:
            return self._new([0])
        return self._new(self.coeffs[:n])

    def reciprocal(self, n):
        """
        Computes R with self * R = 1 (mod x^n) by Newton iteration, doubling
        the precision each round, in O(n log(n)).
        """
        if _is_zero(self.coeffs[0]):
            raise DivisionByZeroError("Reciprocal of a series with zero constant term")
        sz = 1
        R = self._new([_inverse(self.coeffs[0])])
        while sz < n:
            sz *= 2
            R = (R * 2 - R * R * self.truncate(sz)).truncate(sz)
        return R.truncate(n)

    # The coefficients read from x^(length-1) down to x^0
    def _reversed(self, length):
        coeffs = self.coeffs + [0] * (length - len(self.coeffs))
        return self._new(coeffs[::-1])

    # Divides by g in O(n log(n)): the quotient of the reversed polynomials
    # is a truncated power series product
    def _quotient(self, g):
        if g.is_zero():
            raise DivisionByZeroError("Division by the zero polynomial")
        a, m = self.deg(), g.deg()
        if m > a:
            raise IllFormedDivisionError(
                "Divisor has {} coefficients, dividend only {}".format(m, a))
        n = a - m + 1
        q = (self._reversed(a) * g._reversed(m).reciprocal(n)).truncate(n)
        return q._reversed(n)

    # Horner's method
    def evaluate(self, x):
        res = 0
        for c in reversed(self.coeffs):
            res = res * x + c
        return res

    def __call__(self, x):
        return self.evaluate(x)

    def derivative(self):
        return self._new([c * i for i, c in enumerate(self.coeffs)][1:])

    @classmethod
    def linear_factors_product(cls, roots):
        """
        Computes (x - roots[0]) * (x - roots[1]) * ... by binary splitting
        in O(n log(n)^2). The empty product is 1.
        """
        roots = list(roots)
        if not roots:
            return cls([1])
        return cls._linear_factors_product(roots, 0, len(roots))

    @classmethod
    def _linear_factors_product(cls, roots, l, r):
        if l + 1 == r:
            return cls([-roots[l], 1])
        m = (l + r) // 2
        return cls._linear_factors_product(roots, l, m) * \
            cls._linear_factors_product(roots, m, r)

    # Evaluates at every point in O(n log(n)^2), see fastpoly.tree
    def multi_point_evaluation(self, points):
        from .tree import multi_point_evaluation
        return multi_point_evaluation(self, points)

    def __str__(self):
        terms = []
        for i in range(len(self.coeffs) - 1, -1, -1):
            c = self.coeffs[i]
            if _is_zero(c):
                continue
            if i == 0:
                terms.append(str(c))
            elif i == 1:
                terms.append("{}*x".format(c))
            else:
                terms.append("{}*x^{}".format(c, i))
        return " + ".join(terms) or "0"

    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, self.coeffs)
