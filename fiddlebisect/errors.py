# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""
Definition of fiddlebisect related exceptions.
"""


class FiddleBisectError(Exception):
    """Base class for fiddlebisect errors."""


class VersionFormatError(FiddleBisectError):
    """
    Raised when a version can not be parsed from a string.
    """

    def __init__(self, version, format="Incorrect version format: `%s`"):
        FiddleBisectError.__init__(self, format % version)


class VersionNotFoundError(FiddleBisectError):
    """
    Raised when a version is not part of the known versions.
    """

    def __init__(self, version):
        FiddleBisectError.__init__(self, "Version not found: %s" % version)


class InvalidRangeError(FiddleBisectError):
    """
    Raised when a bisection is started on fewer than two versions.
    """

    def __init__(self, count):
        FiddleBisectError.__init__(
            self, "Bisection needs at least two versions (got %d)" % count
        )


class TestCommandError(FiddleBisectError):
    """
    Raised on a user test command error.
    """


class ConfigError(FiddleBisectError):
    """
    Raised when the configuration file can not be read.
    """


class BisectionNotStartedError(FiddleBisectError):
    """
    Raised when a verdict is given while no bisection is in progress.
    """

    def __init__(self):
        FiddleBisectError.__init__(self, "No bisection in progress")
