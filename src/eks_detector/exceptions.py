# (c) Copyright IBM Corp. 2025

"""
Exceptions raised by the EKS resource detector.

Detection itself never raises: missing files, failed API calls and malformed
payloads all degrade to an empty outcome.  These exceptions are reserved for
programming errors such as invalid options passed in code.
"""


class DetectorError(Exception):
    """Base class for all errors raised by this package."""


class InvalidOptionError(DetectorError):
    """Raised when DetectorOptions receives an unusable keyword argument."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super(InvalidOptionError, self).__init__(
            f"Invalid value for option {name!r}: {value!r} ({reason})"
        )
