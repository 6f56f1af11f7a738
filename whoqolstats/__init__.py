"""
whoqolstats: scoring and statistical analysis of WHOQOL-BREF survey data.

Turns raw questionnaire answers into domain scores and runs the standard
inferential tests on them, with closed-form p-value approximations by
default and scipy's exact distributions on request.

Submodules:
    scoring: WHOQOL-BREF instrument and domain scores
    descriptive: Summary statistics and frequency tables
    distributions: Approximate and exact p-values
    hypothesis: t-test, correlation, regression, chi-squared, rank tests
    anova: One-way ANOVA with Holm-Bonferroni post-hoc
    reliability: Cronbach's alpha
    participants: Participant records and study-level analyses
"""

__version__ = "0.1.0"

from whoqolstats import scoring
from whoqolstats import descriptive
from whoqolstats import distributions
from whoqolstats import hypothesis
from whoqolstats import anova
from whoqolstats import reliability
from whoqolstats import participants

__all__ = [
    "__version__",
    "scoring",
    "descriptive",
    "distributions",
    "hypothesis",
    "anova",
    "reliability",
    "participants",
]
