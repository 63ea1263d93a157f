# Test the exponentiation operator: constant folding, variable operands,
# and use inside a nested function call.
# Importing or running this module evaluates every case once and prints nothing.

import math
import numbers

NAN = float("nan")
INF = float("inf")


def to_number(value):
    """Coerce an operand to a double. Non-numeric values become NaN."""
    if not isinstance(value, numbers.Real):
        return NAN
    try:
        return float(value)
    except OverflowError:
        # int too large for a double
        return INF if value > 0 else -INF


def _is_odd_integer(y):
    return math.isfinite(y) and y.is_integer() and y % 2 == 1


def power(base, exponent):
    """Raise base to exponent with double-precision semantics.

    Never raises: division by zero and overflow become infinities, and a
    negative base with a fractional exponent becomes NaN instead of a
    complex number.
    """
    if exponent == 1:
        if not isinstance(base, numbers.Real):
            return base
        x = to_number(base)
        # same object back unless the base does not fit a double
        if x == base or math.isnan(x):
            return base
        return x
    x = to_number(base)
    y = to_number(exponent)
    if math.isnan(y):
        return NAN
    if y == 0:
        return 1.0
    if math.isnan(x):
        return NAN
    if math.isinf(y) and abs(x) == 1:
        return NAN
    try:
        result = x ** y
    except ZeroDivisionError:
        # zero to a negative power
        if _is_odd_integer(y):
            return math.copysign(INF, x)
        return INF
    except OverflowError:
        if x < 0:
            if _is_odd_integer(y):
                return -INF
            if not y.is_integer():
                return NAN
        return INF
    if isinstance(result, complex):
        return NAN
    return result


def testExponentationConstant():
    return 2 ** -6


def testExponentationVariables(x, y):
    return power(x, y)


def testExponentationWithinFunction(two):
    def w(i):
        return power(i, 1)
    return w(two)


def runExponentationTests():
    x, y = 2, 3
    testExponentationConstant()
    testExponentationVariables(x, y)
    testExponentationWithinFunction(x)


runExponentationTests()
