"""
Tolerance tiers for numerical validation.

The default p-value path uses closed-form approximations (Abramowitz-Stegun
erf, Hill's t approximation, Wilson-Hilferty). Their agreement with the exact
distributions is a precision contract, not a bug:

- EXACT: statistics computed by direct formulas (means, sums of squares,
  test statistics) and exact-mode p-values
- ERF: the Abramowitz-Stegun erf and the normal CDF built on it
- T_APPROX: Hill's normal approximation of the Student-t CDF (df > 2)
- CHI2_APPROX: Wilson-Hilferty chi-squared and F upper tails

Used by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='exact',
    description='Closed-form statistics and scipy-backed p-values',
)

ERF = ToleranceTier(
    rtol=0.0,
    atol=1.5e-7,
    name='erf',
    description='Abramowitz-Stegun 7.1.26, |error| <= 1.5e-7',
)

T_APPROX = ToleranceTier(
    rtol=0.0,
    atol=1e-3,
    name='t_approx',
    description="Hill's normal approximation of the t CDF, df > 2",
)

CHI2_APPROX = ToleranceTier(
    rtol=0.0,
    atol=2e-2,
    name='chi2_approx',
    description='Wilson-Hilferty cube-root normal approximation',
)


def get_tolerance(name: str) -> ToleranceTier:
    """
    Look up a tolerance tier by name.

    Raises:
        KeyError: If name is not a known tier
    """
    tiers = {t.name: t for t in (EXACT, ERF, T_APPROX, CHI2_APPROX)}
    return tiers[name]
