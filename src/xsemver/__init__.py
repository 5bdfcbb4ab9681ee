# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the xsemver Project


"""
Semantic version parsing, comparison and range matching.

A :class:`Version` is a concrete ``major.minor.patch[-special][+metadata]``
value. A :class:`Range` is a constraint over versions - an optional comparison
operator (``>``, ``>=``, ``<``, ``<=``, ``=``, ``~``, ``~>``) followed by three
parts, each either a number or a wildcard (``x`` or ``*``). Ranges and versions
share a single ordering, so mixed lists of them can be sorted.

Use :func:`parse` to turn a string into whichever of the two it describes.
"""
from xsemver.utils._version import _xsemver_version
import sys
import os


__version__ = _xsemver_version
__license__ = "Apache-2.0"


module_root_path = __path__[0]  # noqa


def _init_logging():
    logging_conf = os.getenv("XSEMVER_LOGGING_CONF")
    if logging_conf:
        import logging.config
        logging.config.fileConfig(logging_conf, disable_existing_loggers=False)
        return

    import logging

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)-8s %(message)s",
        datefmt="%X"
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    logger = logging.getLogger("xsemver")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)


_init_logging()


from xsemver.version import (  # noqa: E402
    Version,
    Range,
    Operator,
    parse,
    reverse_sort_key,
)
from xsemver.exceptions import (  # noqa: E402
    XSemVerError,
    VersionError,
    InvalidRangeError,
    InvalidRangeContentError,
    IncrementError,
    UnsupportedIncrementError,
    InvalidIncrementError,
    UnsupportedMatchError,
)

__all__ = (
    "Version",
    "Range",
    "Operator",
    "parse",
    "reverse_sort_key",
    "XSemVerError",
    "VersionError",
    "InvalidRangeError",
    "InvalidRangeContentError",
    "IncrementError",
    "UnsupportedIncrementError",
    "InvalidIncrementError",
    "UnsupportedMatchError",
)
