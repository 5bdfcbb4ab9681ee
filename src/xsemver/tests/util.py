# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the xsemver Project


import unittest
from xsemver import module_root_path
from xsemver.config import config, _create_locked_config
from xsemver.utils.data_utils import deep_update
import os.path
import os


class TestBase(unittest.TestCase):
    """Unit test base class."""
    @classmethod
    def setUpClass(cls):
        cls.settings = {}

    def setUp(self):
        # some tests set environment variables, restore them in tearDown
        self.__environ = dict(os.environ)

        self.maxDiff = None

        # shield unit tests from any user config overrides
        self.setup_config()

    def tearDown(self):
        self.teardown_config()
        os.environ.clear()
        os.environ.update(self.__environ)

    @classmethod
    def data_path(cls, *dirs):
        """Get path to test data.
        """
        path = os.path.join(module_root_path, "tests", "data", *dirs)
        return os.path.realpath(path)

    def setup_config(self):
        # to make sure config changes from one test don't affect another, copy
        # the overrides dict...
        self._config = _create_locked_config(dict(self.settings))
        config._swap(self._config)

    def teardown_config(self):
        config._swap(self._config)
        self._config = None

    def update_settings(self, new_settings, override=False):
        """Can be called within test methods to modify settings on a
        per-test basis (as opposed cls.settings, which modifies it for all
        tests on the class)

        Note that multiple calls will not "accumulate" updates, but will
        instead patch the class's settings with the new_settings each time.

        new_settings : dict
            the updated settings to override the config with
        override : bool
            normally, the resulting config will be the result of merging
            the base cls.settings with the new_settings - ie, like doing
            cls.settings.update(new_settings).  If this is True, however,
            then the cls.settings will be ignored entirely, and the
            new_settings will be the only configuration settings applied
        """
        # restore the "normal" config...
        self.teardown_config()

        # ...then copy the class settings dict to instance, so we can
        # modify...
        if override:
            self.settings = dict(new_settings)
        else:
            self.settings = dict(type(self).settings)
            deep_update(self.settings, new_settings)

        # now swap the config back in...
        self.setup_config()


class OrderingTestMixin(object):
    """Assertions on the ordering of versions and ranges."""

    def _test_strict_weak_ordering(self, a, b):
        from xsemver.version._util import _ReversedComparable
        from xsemver import reverse_sort_key

        self.assertTrue(a == a)
        self.assertTrue(b == b)

        e = (a == b)
        ne = (a != b)
        lt = (a < b)
        lte = (a <= b)
        gt = (a > b)
        gte = (a >= b)

        self.assertTrue(e != ne)
        if e:
            self.assertTrue(not lt)
            self.assertTrue(not gt)
            self.assertTrue(lte)
            self.assertTrue(gte)
        else:
            self.assertTrue(lt != gt)
            self.assertTrue(lte != gte)
            self.assertTrue(lt == lte)
            self.assertTrue(gt == gte)

        if not isinstance(a, _ReversedComparable):
            self._test_strict_weak_ordering(reverse_sort_key(a),
                                            reverse_sort_key(b))

    def _test_ordered(self, items):
        def _test(fn, items_):
            for i, a in enumerate(items_):
                for b in items_[i + 1:]:
                    self.assertTrue(fn(a, b), "%r, %r" % (a, b))

        _test(lambda a, b: a < b, items)
        _test(lambda a, b: a <= b, items)
        _test(lambda a, b: a != b, items)
        _test(lambda a, b: a > b, list(reversed(items)))
        _test(lambda a, b: a >= b, list(reversed(items)))
        _test(lambda a, b: a != b, list(reversed(items)))
