# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""
Human driven bisection: the operator tells whether each proposed version
is good or bad.
"""

from mozlog import get_proxy_logger

from fiddlebisect.autobisect import compare_url
from fiddlebisect.bisector import Bisector, Terminated
from fiddlebisect.config import COMPARE_BASE_URL
from fiddlebisect.errors import BisectionNotStartedError, InvalidRangeError
from fiddlebisect.log import output_sink

LOG = get_proxy_logger("Bisect")


class InteractiveBisection(object):
    """
    A bisection session answered step by step.

    Call :meth:`start`, then :meth:`mark` with the verdict of
    :attr:`current_version` until it returns None. :meth:`cancel` stops
    the session at any time.
    """

    def __init__(self, versions, push_output=None, compare_url_base=COMPARE_BASE_URL):
        self.versions = versions
        self.push_output = push_output or output_sink("Bisect")
        self.compare_url_base = compare_url_base
        self.bisector = None
        self.last_range = None

    @property
    def is_active(self):
        return self.bisector is not None

    @property
    def current_version(self):
        if self.bisector is None:
            return None
        return self.bisector.get_current_version()

    def start(self):
        if len(self.versions) < 2:
            raise InvalidRangeError(len(self.versions))
        self.last_range = None
        self.bisector = Bisector(self.versions)
        self.push_output(
            "[BISECT] Started: %s...%s (%d versions)"
            % (self.versions[0], self.versions[-1], len(self.versions))
        )
        return self.current_version

    def mark(self, is_good):
        """
        Record the verdict for the current version.

        Returns the next version to test, or None once the bisection is
        complete.
        """
        if self.bisector is None:
            raise BisectionNotStartedError()
        LOG.debug(
            "%s is %s" % (self.bisector.get_current_version(), "good" if is_good else "bad")
        )
        step = self.bisector.next_step(is_good)
        if isinstance(step, Terminated):
            self.bisector = None
            self.last_range = step
            self.push_output("[BISECT] Complete: %s...%s" % step)
            self.push_output(
                "Check the range: %s" % compare_url(step.good, step.bad, self.compare_url_base)
            )
            return None
        return step.version

    def cancel(self):
        if self.bisector is None:
            return
        remaining = self.bisector.remaining
        self.bisector = None
        self.push_output("[BISECT] Cancelled")
        self.push_output("Last known good version: %s" % remaining[0])
        self.push_output("First known bad version: %s" % remaining[-1])
