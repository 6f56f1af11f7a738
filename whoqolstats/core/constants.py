"""
Analysis constants for whoqolstats.

This module is the SINGLE SOURCE OF TRUTH for thresholds shared across
subpackages. Import from here, never repeat the literals.

Usage:
    from whoqolstats.core.constants import SIGNIFICANCE_LEVEL
"""

# Two-sided tests are significant when p < SIGNIFICANCE_LEVEL.
SIGNIFICANCE_LEVEL = 0.05

# Cochran's rule for the chi-squared approximation: no more than
# COCHRAN_MAX_LOW_FRACTION of the cells may have an expected count
# below COCHRAN_MIN_EXPECTED.
COCHRAN_MIN_EXPECTED = 5.0
COCHRAN_MAX_LOW_FRACTION = 0.20

# p-value back ends. 'approx' uses the closed-form approximations in
# whoqolstats.distributions; 'exact' uses scipy.stats.
DISTRIBUTION_APPROX = 'approx'
DISTRIBUTION_EXACT = 'exact'
DISTRIBUTION_METHODS = (DISTRIBUTION_APPROX, DISTRIBUTION_EXACT)
DEFAULT_DISTRIBUTION = DISTRIBUTION_APPROX

# Likert response range of the WHOQOL-BREF.
LIKERT_MIN = 1
LIKERT_MAX = 5
