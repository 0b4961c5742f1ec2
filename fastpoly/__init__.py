from .errors import DomainError, DivisionByZeroError, IllFormedDivisionError
from .fields import Fr, prime_field
from .fft import convolve
from .polynomial import BRUTE_FORCE_LIMIT, Polynomial
from .tree import ProductTree, multi_point_evaluation
