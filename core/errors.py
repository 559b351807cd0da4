"""
Exceptions raised by DataSplit.

Both concrete errors also derive from ValueError, so callers that only know
about bad arguments can keep catching that.
"""


class SplitError(Exception):
    """Base class for all DataSplit errors."""


class InvalidRatioError(SplitError, ValueError):
    """The test ratio lies outside [0.0, 1.0] (or is NaN)."""

    def __init__(self, ratio):
        self.ratio = ratio
        super().__init__(
            f"Invalid parameter for test_ratio ({ratio}); "
            "--test_ratio must be between 0.0 and 1.0."
        )


class LabelLengthMismatchError(SplitError, ValueError):
    """The number of labels differs from the number of data points."""

    def __init__(self, n_labels, n_points):
        self.n_labels = n_labels
        self.n_points = n_points
        super().__init__(
            f"Number of labels ({n_labels}) does not match "
            f"number of data points ({n_points})."
        )
