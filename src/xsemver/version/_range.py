# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the xsemver Project


"""
Implements version ranges.

A Range is a constraint over versions. It has three parts, each either a
number or a wildcard ('x', or its alias '*'), and an optional comparison
operator. Some examples of ranges and the versions they contain:

    "1.2.3": only 1.2.3;
    "1.2.x": 1.2.0 or greater, but less than 1.3.0;
    "> 1.2.3": 1.2.4 or greater;
    ">= 1.2.3": 1.2.3 or greater;
    "< 1.2.3": less than 1.2.3;
    "<= 1.2.3": 1.2.3 or less;
    "= 1.2.3": only 1.2.3;
    "~> 1.2.3", "~ 1.2.3": 1.2.3 or greater, but less than 1.3.0;
    "~> 1.2": 1.2.0 or greater, but less than 2.0.0;
    "x.x.x": any version.

Every range reduces to a half-open interval [lower_bound, upper_bound) of
plain versions. Ranges and versions are sorted by their inclusive upper bound
first, then by their lower bound.
"""
from xsemver.version._util import _Comparable
from xsemver.version._version import Version, increment_parts, \
    BIGGEST_VERSION, SMALLEST_VERSION, IMPOSSIBLY_SMALLEST_VERSION, MAX_PART
from xsemver.version._template import template_regex, range_shape_regex, \
    format_parts, is_wildcard_char, PART_NAMES, PREFERRED_WILDCARD
from xsemver.exceptions import VersionError, InvalidRangeError, \
    InvalidRangeContentError, InvalidIncrementError, UnsupportedMatchError
from xsemver.config import config
from enum import Enum
import copy
import re


class Operator(Enum):
    """Range comparison operators."""
    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="
    EQ = "="
    TILDE = "~"
    PESSIMISTIC = "~>"

    @property
    def is_approximate(self):
        return self in (Operator.TILDE, Operator.PESSIMISTIC)

    def __str__(self):
        return self.value


class Range(_Comparable):
    """Version range.

    Note that equality between ranges is defined by their bounds, not by their
    parts. For example, "1.2.x" == "1.2.*" and "~> 1.2.0" == "1.2.x".
    """
    # longest operators first, so that '>=' is not read as '>'
    operator_regex = re.compile(
        r"^\s*(?P<operator>%s)\s*(?P<rest>.+)"
        % '|'.join(re.escape(x.value) for x in
                   sorted(Operator, key=lambda x: -len(x.value)))
    )

    def __init__(self, major=0, minor=0, patch=0, operator=None):
        """Create a Range object.

        Args:
            major (int or str): Major part, or a wildcard character.
            minor (int or str): Minor part, or a wildcard character.
            patch (int or str): Patch part, or a wildcard character.
            operator (`Operator` or str): Comparison operator, if any.
        """
        self.major, self.minor, self.patch = (
            self._validated_part(name, value)
            for name, value in zip(PART_NAMES, (major, minor, patch))
        )
        self.operator = self._validated_operator(operator)

    def is_range(self):
        return True

    def components(self):
        return (self.major, self.minor, self.patch)

    def has_wildcard(self):
        return any(is_wildcard_char(x) for x in self.components())

    def accepts_any_version(self):
        return all(is_wildcard_char(x) for x in self.components())

    def has_operator(self):
        return self.operator is not None

    def is_approximate(self):
        return self.has_operator() and self.operator.is_approximate

    def non_wildcard_parts(self):
        return [x for x in self.components() if not is_wildcard_char(x)]

    def last_non_wildcard_part(self):
        """Returns the name of the last part that is not a wildcard.

        Returns 'patch' if every part is a wildcard.
        """
        return PART_NAMES[len(self.non_wildcard_parts()) - 1]

    def zero_filled(self):
        """Returns this range as a `Version`, with wildcards set to zero."""
        return Version(*(0 if is_wildcard_char(x) else x
                         for x in self.components()))

    def increment_in_place(self, part=None):
        """Increment a part of this range, changing it in place.

        Wildcards are kept, so incrementing "1.2.x" gives "1.3.x". A range
        that accepts any version is left unchanged.

        Args:
            part (str): Part to increment - one of 'major', 'minor' or 'patch'.
                Defaults to the last part that is not a wildcard.

        Returns:
            This `Range`, for chaining.
        """
        if self.accepts_any_version():
            return self

        part = part or self.last_non_wildcard_part()
        new_parts = increment_parts(part, *self.zero_filled().components()[:3])

        if is_wildcard_char(getattr(self, part)):
            raise InvalidIncrementError(
                "Cannot increment wildcard part %r of %s" % (part, self))

        self.major, self.minor, self.patch = (
            old if is_wildcard_char(old) else new
            for new, old in zip(new_parts, self.components())
        )
        return self

    def increment(self, part=None):
        """Like `increment_in_place`, but returns a new range instead."""
        return copy.copy(self).increment_in_place(part)

    @property
    def lower_bound(self):
        """The smallest version contained in the range."""
        zero_filled = self.zero_filled()

        if self.operator == Operator.LT \
                and zero_filled.components()[:3] == (0, 0, 0):
            return copy.copy(IMPOSSIBLY_SMALLEST_VERSION)

        elif self.operator in (Operator.LT, Operator.LTE):
            return copy.copy(SMALLEST_VERSION)

        # '> 1.2.3' starts at 1.2.4, '> 1.2.x' starts at 1.3.0
        elif self.operator == Operator.GT:
            return self.increment().zero_filled()

        else:
            return zero_filled

    lower_bound_inclusive = lower_bound

    @property
    def upper_bound(self):
        """The smallest version above the range (exclusive upper bound)."""
        if self.operator in (Operator.GT, Operator.GTE):
            return copy.copy(BIGGEST_VERSION)

        # '~> 1.2.3' stops before 1.3.0, '~> 1.2' stops before 2.0.0
        elif self.is_approximate():
            widened = copy.copy(self)
            if len(self.non_wildcard_parts()) > 1:
                setattr(widened, self.last_non_wildcard_part(), PREFERRED_WILDCARD)
            return widened.increment_in_place().zero_filled()

        # '<= 1.2.3' stops before 1.2.4, '1.2.x' stops before 1.3.0
        elif self.has_wildcard() or self.operator == Operator.LTE:
            return self.increment().zero_filled()

        # '< 1.2.3' and '= 1.2.3' stop at 1.2.3
        else:
            return self.zero_filled()

    @property
    def upper_bound_inclusive(self):
        """The largest version contained in the range.

        For example, the inclusive upper bound of '1.2.x' is 1.2.<MAX_PART>.
        This is mostly used to sort ranges.
        """
        result = self.upper_bound

        if result.components()[:3] == (0, 0, 0):
            return copy.copy(IMPOSSIBLY_SMALLEST_VERSION)
        if result == self.lower_bound or result == BIGGEST_VERSION:
            return result

        # decrement the last nonzero part, and max out the parts after it
        parts = list(result.components()[:3])
        index = len(parts) - 1
        while parts[index] == 0:
            index -= 1

        parts[index] -= 1
        for i in range(index + 1, len(parts)):
            parts[i] = MAX_PART

        result.major, result.minor, result.patch = parts
        return result

    def matches(self, version):
        """Returns True if the version is contained in this range.

        Args:
            version (`Version` or str): Version to test. Strings are parsed
                with the default template.
        """
        if isinstance(version, Range):
            raise UnsupportedMatchError(
                "Cannot match range %s against another range (%s)"
                % (self, version))

        if self.accepts_any_version():
            return True

        version = self._coerce_version(version)
        lower, upper = self.lower_bound, self.upper_bound

        _debug = config.debug_printer("bounds")
        _debug("%s is [%s, %s)", self, lower, upper)

        return (lower <= version) and (version < upper)

    def iter_matching(self, iterable, key=None):
        """Iterate over the items of `iterable` that match this range.

        Args:
            iterable: Sequence of versioned objects.
            key (callable): Function that returns a `Version` (or version
                string) given an object from `iterable`. If None, the identity
                function is used.

        Returns:
            An iterator over matching items, in their original order.
        """
        for item in iterable:
            version = item if key is None else key(item)
            if self.matches(version):
                yield item

    def best_match(self, iterable, key=None):
        """Returns the item with the greatest version matching this range.

        See `iter_matching` for a description of the arguments.

        Returns:
            The matching item, or None if no item matches.
        """
        def _version(item):
            return self._coerce_version(item if key is None else key(item))

        return max(self.iter_matching(iterable, key), key=_version,
                   default=None)

    def format(self, fmt=None):
        """Format the range with a template.

        The comparison operator (if any) is prepended, followed by a space.
        """
        s = format_parts(fmt or config.version_format, self.major,
                         self.minor, self.patch)

        if self.has_operator():
            s = "%s %s" % (self.operator.value, s)
        return s

    @classmethod
    def parse(cls, version_string, fmt=None, allow_missing=None):
        """Parse a version or range string.

        Strings that look like ranges - starting with a comparison operator,
        or having a wildcard in a numeric part - are parsed into a `Range`.
        Anything else is parsed as a plain `Version`.

        Args:
            version_string (str): String to parse.
            fmt (str): Template to match against. Defaults to the
                'version_format' setting.
            allow_missing (bool): See `parse_range`.

        Returns:
            `Range` or `Version`, or None if the string does not match the
            template.
        """
        if cls.is_range_format(version_string, fmt):
            return cls.parse_range(version_string, fmt, allow_missing)
        else:
            return Version.parse(version_string, fmt, allow_missing)

    @classmethod
    def parse_range(cls, version_string, fmt=None, allow_missing=None):
        """Parse a range string.

        Unlike `parse`, this always produces a `Range`, so "1.2.3" gives the
        range containing only 1.2.3.

        Args:
            version_string (str): String to parse.
            fmt (str): Template to match against, after any leading
                comparison operator. Defaults to the 'version_format' setting.
            allow_missing (bool): If True, parts missing from the string
                default to zero - or to a wildcard if the operator is
                approximate, or if another part is a wildcard. Thus "1.2" is
                "1.2.0", but "~> 1.2" is "~> 1.2.x". If False, the parse
                fails instead. Defaults to the 'allow_missing' setting.

        Returns:
            `Range`, or None if the string does not match the template.
        """
        fmt = fmt or config.version_format
        if allow_missing is None:
            allow_missing = config.allow_missing

        _debug = config.debug_printer("parser")
        operator = None
        rest = version_string

        match = cls.operator_regex.match(version_string)
        if match:
            operator = Operator(match.group("operator"))
            rest = match.group("rest")

        match = template_regex(fmt, wildcards=True).fullmatch(rest.strip())
        if not match:
            _debug("%r does not match range template %r", version_string, fmt)
            return None

        groups = match.groupdict()
        if groups.get("special") or groups.get("metadata"):
            raise InvalidRangeContentError(
                "A range cannot have prerelease or metadata strings: %r"
                % version_string)

        parts = [groups.get(x) for x in PART_NAMES]
        if not allow_missing and None in parts:
            _debug("%r is missing parts of template %r", version_string, fmt)
            return None

        if (operator and operator.is_approximate) \
                or any(is_wildcard_char(x) for x in parts):
            default_part = PREFERRED_WILDCARD
        else:
            default_part = 0

        parts = [
            default_part if x is None else (x if is_wildcard_char(x) else int(x))
            for x in parts
        ]

        range_ = cls(*parts, operator=operator)
        _debug("parsed %r as range %s", version_string, range_)
        return range_

    @classmethod
    def is_range_format(cls, version_string, fmt=None):
        """Returns True if the string looks like a range rather than a version.
        """
        return cls.starts_with_operator(version_string) \
            or cls.has_wildcard_format(version_string, fmt)

    @classmethod
    def starts_with_operator(cls, version_string):
        return bool(cls.operator_regex.match(version_string))

    @classmethod
    def has_wildcard_format(cls, version_string, fmt=None):
        """Returns True if a numeric part of the string is a wildcard.

        The numeric parts are found loosely - the literal text of the template
        between them may be any characters.
        """
        regex = range_shape_regex(fmt or config.version_format)
        if regex is None:
            return False

        match = regex.search(version_string)
        return bool(match) and any(is_wildcard_char(x) for x in match.groups())

    @classmethod
    def _validated_part(cls, name, value):
        if is_wildcard_char(value):
            return PREFERRED_WILDCARD
        if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            return value
        raise InvalidRangeError("Invalid %s: %r" % (name, value))

    @classmethod
    def _validated_operator(cls, operator):
        if operator is None or isinstance(operator, Operator):
            return operator
        try:
            return Operator(operator)
        except ValueError:
            raise InvalidRangeError("Invalid comparison operator: %r" % (operator,))

    @classmethod
    def _coerce_version(cls, version):
        if isinstance(version, Version):
            return version

        if not isinstance(version, str):
            raise VersionError("Expected a version or version string, not %r"
                               % (version,))

        result = cls.parse(version)
        if result is None:
            raise VersionError("Could not parse version %r" % version)
        if isinstance(result, Range):
            raise UnsupportedMatchError(
                "Cannot match against range string %r" % version)
        return result

    def _cmp(self, other):
        if isinstance(other, Range):
            result = self.upper_bound_inclusive._cmp(other.upper_bound_inclusive)
            if result == 0:
                result = self.lower_bound._cmp(other.lower_bound)

            # '<' sorts before an approximate range when otherwise identical
            if result == 0:
                if self.operator == Operator.LT and other.is_approximate():
                    result = -1
                elif self.is_approximate() and other.operator == Operator.LT:
                    result = 1
            return result

        elif isinstance(other, Version):
            result = self.upper_bound_inclusive._cmp(other)
            if result == 0:
                result = self.lower_bound._cmp(other)

            # a range is never equal to a version, and sorts before it
            return result or -1

        elif isinstance(other, str):
            other_ = Range.parse(other)
            if other_ is None:
                return NotImplemented
            return self._cmp(other_)

        else:
            return NotImplemented

    def __hash__(self):
        return hash((self.upper_bound_inclusive, self.lower_bound))

    def __str__(self):
        return self.format()


def parse(version_string, fmt=None, allow_missing=None):
    """Parse a version or range string. See `Range.parse`."""
    return Range.parse(version_string, fmt, allow_missing)
