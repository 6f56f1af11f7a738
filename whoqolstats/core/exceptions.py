"""
Exception hierarchy for whoqolstats.

All exceptions inherit from WhoqolStatsError to allow catching any
library-specific error.

Exceptions are reserved for input no caller should produce (non-numeric
samples, Likert values outside 1-5, malformed tables). Anticipated
data-shape problems such as too few observations are NOT raised; they are
returned as InsufficientData / InvalidInput payloads (see core.result).

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
"""


class WhoqolStatsError(Exception):
    """Base exception for all whoqolstats errors."""
    pass


class ValidationError(WhoqolStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a sample is not 1D or a contingency table is not 2D.
    """
    pass


class ResponseError(ValidationError):
    """
    A survey response is malformed.

    Attributes:
        question_id: Identifier of the offending question
        value: The value that was rejected
    """

    def __init__(
        self,
        message: str,
        question_id: str | None = None,
        value: object = None,
    ):
        super().__init__(message)
        self.question_id = question_id
        self.value = value
