# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the xsemver Project


from xsemver.version._util import _Comparable, cmp
from xsemver.version._template import template_regex, format_parts, \
    PART_NAMES
from xsemver.exceptions import VersionError, UnsupportedIncrementError, \
    InvalidIncrementError
from xsemver.config import config
import copy
import sys


# the largest value a version part takes, used by the 'biggest' sentinel
MAX_PART = sys.maxsize


def increment_parts(part, major, minor, patch):
    """Apply the increment rule to a (major, minor, patch) triple.

    Bumping a part zeroes every part to its right.

    Args:
        part (str): One of 'major', 'minor', 'patch'.

    Returns:
        3-tuple of int: The incremented parts.
    """
    if part == "major":
        return major + 1, 0, 0
    elif part == "minor":
        return major, minor + 1, 0
    elif part == "patch":
        return major, minor, patch + 1
    elif part in ("prerelease", "special"):
        # TODO: follow node-semver's prerelease increment (alpha.1 -> alpha.2)
        raise UnsupportedIncrementError(
            "Incrementing prerelease strings is not implemented")
    else:
        raise InvalidIncrementError("Invalid part to increment: %r" % (part,))


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


class Version(_Comparable):
    """Version object.

    A Version is a concrete 'major.minor.patch[-special][+metadata]' value.
    Versions are ordered by the tuple (major, minor, patch, special,
    metadata), compared field by field.

    Versions are treated as immutable, with the exception of
    `increment_in_place`.
    """
    def __init__(self, major=0, minor=0, patch=0, special=None, metadata=None):
        """Create a Version object.

        Args:
            major (int): Major part. None is treated as 0.
            minor (int): Minor part. None is treated as 0.
            patch (int): Patch part. None is treated as 0.
            special (str): Prerelease string, eg 'alpha.1'.
            metadata (str): Build metadata string, eg 'build.7'.
        """
        parts = []
        for name, value in zip(PART_NAMES, (major, minor, patch)):
            if value is None:
                value = 0
            elif not _is_int(value) or value < 0:
                raise VersionError("Invalid %s: %r" % (name, value))
            parts.append(value)

        self.major, self.minor, self.patch = parts
        self.special = special or None
        self.metadata = metadata or None

    def is_range(self):
        return False

    def components(self):
        """Returns the version parts as a tuple.

        The special and metadata strings are only included if not empty.

        Example:

            >>> Version(1, 2, 3).components()
            (1, 2, 3)
            >>> Version(1, 2, 3, 'alpha').components()
            (1, 2, 3, 'alpha')
        """
        parts = (self.major, self.minor, self.patch, self.special, self.metadata)
        return tuple(x for x in parts if x not in (None, ''))

    def matches(self, other):
        """Returns True if `other` is this exact version.

        Args:
            other (`Version` or str): Version to test. Strings are parsed with
                the default template.
        """
        if isinstance(other, str):
            other = Version.parse(other)
        return self == other

    def increment_in_place(self, part=None):
        """Increment a part of this version, changing it in place.

        Args:
            part (str): Part to increment - one of 'major', 'minor' or 'patch'.
                Defaults to 'patch'.

        Returns:
            This `Version`, for chaining.
        """
        part = part or "patch"

        self.major, self.minor, self.patch = increment_parts(
            part, self.major, self.minor, self.patch)
        self.special = None
        self.metadata = None
        return self

    def increment(self, part=None):
        """Like `increment_in_place`, but returns a new version instead."""
        return copy.copy(self).increment_in_place(part)

    def format(self, fmt=None):
        """Format the version with a template.

        Args:
            fmt (str): Template, see `xsemver.version._template`. Defaults to
                the 'version_format' setting.
        """
        return format_parts(fmt or config.version_format, self.major,
                            self.minor, self.patch, self.special, self.metadata)

    @classmethod
    def parse(cls, version_string, fmt=None, allow_missing=None):
        """Parse a version string.

        Args:
            version_string (str): String to parse.
            fmt (str): Template to match against. Defaults to the
                'version_format' setting.
            allow_missing (bool): If True, parts missing from the string
                default to zero; if False, the parse fails instead. Defaults
                to the 'allow_missing' setting.

        Returns:
            `Version`, or None if the string does not match the template.
        """
        fmt = fmt or config.version_format
        if allow_missing is None:
            allow_missing = config.allow_missing

        _debug = config.debug_printer("parser")

        match = template_regex(fmt).fullmatch(version_string.strip())
        if not match:
            _debug("%r does not match version template %r", version_string, fmt)
            return None

        groups = match.groupdict()
        parts = [groups.get(x) for x in PART_NAMES]

        if not allow_missing and None in parts:
            _debug("%r is missing parts of template %r", version_string, fmt)
            return None

        major, minor, patch = (0 if x is None else int(x) for x in parts)
        version = cls(major, minor, patch, groups.get("special"),
                      groups.get("metadata"))

        _debug("parsed %r as version %s", version_string, version)
        return version

    def _sort_key(self):
        return (self.major, self.minor, self.patch, self.special or '',
                self.metadata or '')

    def _cmp(self, other):
        if isinstance(other, Version):
            return cmp(self._sort_key(), other._sort_key())

        from xsemver.version._range import Range

        if isinstance(other, str):
            other = Range.parse(other)

        if isinstance(other, Range):
            return -other._cmp(self)
        elif isinstance(other, Version):
            return self._cmp(other)
        else:
            return NotImplemented

    def __hash__(self):
        return hash(self._sort_key())

    def __str__(self):
        return self.format()


# bound sentinels, handed out as copies by `Range`. The impossibly smallest
# version is below every real version, and is never a version itself.
BIGGEST_VERSION = Version(MAX_PART, MAX_PART, MAX_PART)
SMALLEST_VERSION = Version(0, 0, 0)
IMPOSSIBLY_SMALLEST_VERSION = Version()
IMPOSSIBLY_SMALLEST_VERSION.major = -1
IMPOSSIBLY_SMALLEST_VERSION.minor = -1
IMPOSSIBLY_SMALLEST_VERSION.patch = -1
