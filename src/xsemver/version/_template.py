# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the xsemver Project


"""
The template mini-language used to parse and format versions and ranges.

A template is a string containing the placeholders %M (major), %m (minor),
%p (patch), %s (prerelease, written as "-alpha.1") and %d (build metadata,
written as "+build.7"). Everything else in the template is literal text. For
example, the template "v%M.%m.%p%s%d" formats and parses "v1.2.3-beta+exp.sha".

Compiled regexes are cached per template.
"""
from xsemver.exceptions import VersionError
from functools import lru_cache
import re


WILDCARD_CHARS = ("x", "*")

PREFERRED_WILDCARD = WILDCARD_CHARS[0]

PART_NAMES = ("major", "minor", "patch")

placeholder_regex = re.compile(r"(%[Mmpsd])")

numeric_placeholders = {
    "%M": "major",
    "%m": "minor",
    "%p": "patch",
}

suffix_patterns = {
    "%s": r"(?:-(?P<special>[A-Za-z][0-9A-Za-z.]*))?",
    "%d": r"(?:\+(?P<metadata>[0-9A-Za-z][0-9A-Za-z.]*))?",
}

digits_pattern = r"\d+"

digits_or_wildcard_pattern = r"\d+|[%s]" % ''.join(map(re.escape, WILDCARD_CHARS))


def is_wildcard_char(part):
    return isinstance(part, str) and part in WILDCARD_CHARS


def _tokenize(fmt):
    return [x for x in placeholder_regex.split(fmt) if x]


@lru_cache(maxsize=None)
def template_regex(fmt, wildcards=False):
    """Compile a template into a regex matching a whole version string.

    The literal text between two adjacent numeric placeholders opens an
    optional group, so trailing parts may be left out - "1.2" matches
    "%M.%m.%p" with no patch captured. A literal 'v' directly in front of %M
    is optional.

    Args:
        fmt (str): Template string.
        wildcards (bool): If True, numeric placeholders also accept a wildcard
            character.

    Returns:
        Compiled regex with 'major', 'minor', 'patch', 'special' and
        'metadata' groups, for those placeholders present in `fmt`.
    """
    numeric = digits_or_wildcard_pattern if wildcards else digits_pattern
    tokens = _tokenize(fmt)
    parts = []
    depth = 0

    for i, tok in enumerate(tokens):
        prev_tok = tokens[i - 1] if i else None
        next_tok = tokens[i + 1] if (i + 1) < len(tokens) else None

        if tok in numeric_placeholders:
            parts.append("(?P<%s>%s)" % (numeric_placeholders[tok], numeric))
            continue

        if prev_tok in numeric_placeholders and next_tok in numeric_placeholders:
            parts.append("(?:" + re.escape(tok))
            depth += 1
            continue

        parts.append(")?" * depth)
        depth = 0

        if tok in suffix_patterns:
            parts.append(suffix_patterns[tok])
        elif next_tok == "%M" and tok.endswith('v'):
            parts.append(re.escape(tok[:-1]) + "v?")
        else:
            parts.append(re.escape(tok))

    parts.append(")?" * depth)

    try:
        return re.compile(''.join(parts))
    except re.error as e:
        raise VersionError("Invalid version template %r: %s" % (fmt, str(e)))


@lru_cache(maxsize=None)
def range_shape_regex(fmt):
    """Compile a loose regex that finds the numeric parts of a template.

    Only the numeric placeholders of `fmt` and the text between them are
    used, and that text matches any character. Each numeric part is captured
    in its own group, and may be a wildcard.

    Returns:
        Compiled regex, or None if `fmt` has no numeric placeholders.
    """
    tokens = _tokenize(fmt)
    indexes = [i for i, tok in enumerate(tokens) if tok in numeric_placeholders]
    if not indexes:
        return None

    parts = []
    depth = 0

    for tok in tokens[indexes[0]:indexes[-1] + 1]:
        if tok in numeric_placeholders:
            parts.append("(%s)" % digits_or_wildcard_pattern)
        elif tok not in suffix_patterns:
            parts.append("(?:" + '.' * len(tok))
            depth += 1

    parts.append(")?" * depth)
    return re.compile(''.join(parts))


def format_parts(fmt, major, minor, patch, special=None, metadata=None):
    """Substitute version parts into a template.

    The prerelease and metadata placeholders are replaced with an empty string
    when the respective part is empty.
    """
    values = {
        "%M": str(major),
        "%m": str(minor),
        "%p": str(patch),
        "%s": ("-%s" % special) if special else '',
        "%d": ("+%s" % metadata) if metadata else '',
    }

    return placeholder_regex.sub(lambda m: values[m.group(0)], fmt)
