# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the xsemver Project


from xsemver.version._util import reverse_sort_key  # noqa: F401
from xsemver.version._template import WILDCARD_CHARS, PREFERRED_WILDCARD  # noqa: F401
from xsemver.version._version import Version, MAX_PART, BIGGEST_VERSION, \
    SMALLEST_VERSION, IMPOSSIBLY_SMALLEST_VERSION  # noqa: F401
from xsemver.version._range import Range, Operator, parse  # noqa: F401
