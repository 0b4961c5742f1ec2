class DomainError(ArithmeticError):
    pass


# Scalar division by zero, reciprocal of a series with zero constant term,
# or division by the zero polynomial
class DivisionByZeroError(DomainError, ZeroDivisionError):
    pass


# The divisor has more coefficients than the dividend
class IllFormedDivisionError(DomainError):
    pass
