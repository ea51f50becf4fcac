"""
Exception hierarchy for the security utility library.
"""


class SecurityUtilityError(Exception):
    """Base class for all errors raised by secutil"""


class InvalidArgumentError(SecurityUtilityError, ValueError):
    """Raised synchronously for malformed input (bad algorithm, key length, ...)"""
