# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the xsemver Project


# Update this value to version up xsemver. Do not place anything else in this
# file. Using optparse.Version or similar here breaks the setup.py read.
_xsemver_version = "1.0.0"
