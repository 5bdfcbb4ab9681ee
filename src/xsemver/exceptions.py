# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the xsemver Project


"""
Exceptions.
"""


class XSemVerError(Exception):
    """Base-class xsemver error."""
    def __init__(self, value=None):
        self.value = value

    def __str__(self):
        return str(self.value)


class ConfigurationError(XSemVerError):
    """A misconfiguration error."""
    pass


class VersionError(XSemVerError):
    """A version could not be built or coerced."""
    pass


class InvalidRangeError(VersionError):
    """A range was given an invalid part or comparison operator."""
    pass


class InvalidRangeContentError(InvalidRangeError):
    """A range string carries a prerelease or metadata string."""
    pass


class IncrementError(XSemVerError):
    """Base class for errors raised when incrementing versions."""
    pass


class UnsupportedIncrementError(IncrementError):
    """The requested part cannot be incremented (yet)."""
    pass


class InvalidIncrementError(IncrementError):
    """The requested part is not a known, incrementable part."""
    pass


class UnsupportedMatchError(XSemVerError):
    """A match was attempted between types that do not support it."""
    pass
