# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the xsemver Project


"""
Test logging helpers, and the debug output of the parser.
"""
from xsemver.tests.util import TestBase
import unittest
from xsemver.utils import logging_
from xsemver.version import Version, Range, parse


class TestLogging(TestBase):

    def test_print(self):
        """Test valid msg and nargs combinations for print_*."""
        for msg in ("Hello", "Hello %s", "Hello %s %s"):
            logging_.print_debug(msg)
            logging_.print_info(msg)
            logging_.print_warning(msg)
            logging_.print_error(msg)
            logging_.print_critical(msg)

        with self.assertLogs("xsemver", level="DEBUG") as cm:
            logging_.print_info("Hello %s %s", "foo", "bah")

        self.assertEqual(cm.records[0].getMessage(), "Hello foo bah")

    def test_printer(self):
        printer = logging_.get_debug_printer(False)
        self.assertFalse(printer)
        printer("never %s", "formatted")

        printer = logging_.get_warning_printer()
        self.assertTrue(printer)

        with self.assertLogs("xsemver", level="DEBUG") as cm:
            printer("Hello %s", "foo")
            logging_.get_info_printer(True)("Hello")

        self.assertEqual([x.getMessage() for x in cm.records],
                         ["Hello foo", "Hello"])
        self.assertEqual(cm.records[0].levelname, "WARNING")

    def test_debug_parser(self):
        self.update_settings({"debug_parser": True})

        with self.assertLogs("xsemver", level="DEBUG") as cm:
            Version.parse("v1.2.3")
            Version.parse("garbage")
            parse("~> 1.2")

        messages = [x.getMessage() for x in cm.records]
        self.assertEqual(messages, [
            "parsed 'v1.2.3' as version v1.2.3",
            "'garbage' does not match version template 'v%M.%m.%p%s%d'",
            "parsed '~> 1.2' as range ~> v1.2.x",
        ])

    def test_debug_bounds(self):
        self.update_settings({"debug_bounds": True})

        with self.assertLogs("xsemver", level="DEBUG") as cm:
            Range(1, 2, 'x').matches(Version(1, 2, 3))

        self.assertEqual([x.getMessage() for x in cm.records],
                         ["v1.2.x is [v1.2.0, v1.3.0)"])


if __name__ == '__main__':
    unittest.main()
