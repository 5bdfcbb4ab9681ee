# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the xsemver Project


"""
xsemver configuration settings. Do not change this file.

Settings are determined in the following way (higher number means higher
precedence):

1) The setting is first read from this file;
2) The setting is then overridden if it is present in another settings file(s)
   pointed at by the $XSEMVER_CONFIG_FILE environment variable. Note that
   multiple files are supported, separated by os.pathsep. Files ending in '.py'
   are executed as python, any other file is read as YAML;
3) The setting is further overriden if it is present in $HOME/.xsemverconfig,
   UNLESS $XSEMVER_DISABLE_HOME_CONFIG is 1;
4) The setting is overridden again if the environment variable $XSEMVER_XXX is
   present, where XXX is the uppercase version of the setting key. For example,
   "version_format" will be overriden by $XSEMVER_VERSION_FORMAT;
5) The setting can also be overriden by the environment variable
   $XSEMVER_XXX_JSON, and in this case the string is expected to be a
   JSON-encoded value.

The following variables are provided if you are using .py config files:
- 'xsemver_version': The current version of xsemver.
"""

# flake8: noqa


###############################################################################
# Parsing and Formatting
###############################################################################

# The template used to parse and format versions and ranges when no template
# is given explicitly. Supported placeholders are:
#
# - %M: major;
# - %m: minor;
# - %p: patch;
# - %s: optional prerelease string, written as '-alpha.1';
# - %d: optional build metadata string, written as '+build.7'.
#
# A literal 'v' directly in front of %M is optional when parsing.
version_format = "v%M.%m.%p%s%d"

# If True, trailing parts missing from a parsed string default to zero (or to
# a wildcard, for approximate ranges such as "~> 1.2"). If False, such strings
# fail to parse.
allow_missing = True


###############################################################################
# Debugging
###############################################################################

# Print the decisions made while parsing version and range strings.
debug_parser = False

# Print the lower and upper bounds computed for ranges.
debug_bounds = False

# Turn on all debugging messages.
debug_all = False

# Turn off all debugging messages. This overrides debug_all.
debug_none = False

# Suppress all debugging messages.
quiet = False
