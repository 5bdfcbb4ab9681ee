# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the xsemver Project


def cmp(a, b):
    """Three-way comparison, returns -1, 0 or 1."""
    return (a > b) - (a < b)


class _Common(object):
    def __str__(self):
        raise NotImplementedError

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, str(self))


class _Comparable(_Common):
    """Derives all rich comparisons from a single three-way `_cmp` method.

    `_cmp` returns NotImplemented for objects it cannot be compared against.
    """
    def _cmp(self, other):
        raise NotImplementedError

    def __eq__(self, other):
        result = self._cmp(other)
        return result if result is NotImplemented else (result == 0)

    def __ne__(self, other):
        result = self._cmp(other)
        return result if result is NotImplemented else (result != 0)

    def __lt__(self, other):
        result = self._cmp(other)
        return result if result is NotImplemented else (result < 0)

    def __le__(self, other):
        result = self._cmp(other)
        return result if result is NotImplemented else (result <= 0)

    def __gt__(self, other):
        result = self._cmp(other)
        return result if result is NotImplemented else (result > 0)

    def __ge__(self, other):
        result = self._cmp(other)
        return result if result is NotImplemented else (result >= 0)


class _ReversedComparable(_Common):
    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        return self.value == other.value

    def __lt__(self, other):
        return other.value < self.value

    def __gt__(self, other):
        return self.value < other.value

    def __le__(self, other):
        return other.value <= self.value

    def __ge__(self, other):
        return self.value <= other.value

    def __str__(self):
        return "reverse(%s)" % str(self.value)

    def __repr__(self):
        return "reverse(%r)" % self.value


def reverse_sort_key(comparable):
    """Key that gives reverse sort order on versions and ranges.

    Example:

        >>> Version(1) < Version(2)
        True
        >>> reverse_sort_key(Version(1)) < reverse_sort_key(Version(2))
        False

    Args:
        comparable (`Version` or `Range`): Object to wrap.

    Returns:
        `_ReversedComparable`: Wrapper object that reverses comparisons.
    """
    return _ReversedComparable(comparable)
