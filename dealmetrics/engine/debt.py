"""Mortgage payment computation.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP, Overflow, localcontext

TWO_PLACES = Decimal("0.01")


def monthly_payment(principal: Decimal, annual_rate: Decimal, term_years: Decimal) -> Decimal:
    """Calculate fixed monthly mortgage payment.

    Args:
        principal: Loan amount
        annual_rate: Annual interest rate (e.g. 0.065 for 6.5%)
        term_years: Loan term in years, fractions allowed

    A non-positive principal, rate or term has no amortizing payment and
    returns 0. Zero-rate loans are not spread linearly, and neither are rates
    too small to move (1 + r) ** n at working precision.
    """
    r = annual_rate / 12
    n = term_years * 12
    if principal <= 0 or r <= 0 or n <= 0:
        return Decimal("0")

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    with localcontext() as ctx:
        ctx.traps[Overflow] = False
        factor = (1 + r) ** n

    if factor - 1 <= 0:
        return Decimal("0")
    if factor.is_infinite():
        # Payment tends to interest-only as the term grows without bound
        payment = principal * r
    else:
        payment = principal * (r * factor) / (factor - 1)
    return payment.quantize(TWO_PLACES, ROUND_HALF_UP)


def annual_debt_service(payment: Decimal) -> Decimal:
    return payment * 12
