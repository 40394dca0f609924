# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""
The bisection algorithm over an ordered list of versions.
"""

import math
from collections import namedtuple

#: The bisection goes on, *version* is the next one to test.
Continuing = namedtuple("Continuing", "version")

#: The bisection is over. *good* is the last known good version and *bad*
#: the first known bad one.
Terminated = namedtuple("Terminated", "good, bad")


def compute_steps_left(steps):
    if steps <= 1:
        return 0
    return math.trunc(math.log(steps, 2))


class Bisector(object):
    """
    Hold the state of a bisection over *versions*.

    *versions* must be a non-empty sequence sorted from the oldest to the
    newest version. The regression is searched between ``min_rev`` (known
    good) and ``max_rev`` (known bad), which are indexes in *versions*.

    A Bisector holds no resources; create one per bisection session and
    drop it when :meth:`next_step` returns a :class:`Terminated`.
    """

    def __init__(self, versions):
        self.versions = versions
        self.min_rev = 0
        self.max_rev = len(versions) - 1
        self.pivot = (self.max_rev - self.min_rev) // 2

    def __len__(self):
        return self.max_rev - self.min_rev + 1

    @property
    def remaining(self):
        """The versions still in the bisection range."""
        return self.versions[self.min_rev : self.max_rev + 1]

    def steps_left(self):
        return compute_steps_left(len(self))

    def get_current_version(self):
        return self.versions[self.pivot]

    def next_step(self, is_good_version):
        """
        Record the verdict for the current version.

        If the version is good, the regression is above the pivot:
        [G, ?, ?, G, ?, B] becomes [G, ?, B]. If it is bad, the regression
        is at or below the pivot: [G, ?, ?, B, ?, B] becomes [G, ?, ?, B].

        Returns a :class:`Continuing` with the next version to test, or a
        :class:`Terminated` holding the (good, bad) boundary when the range
        can not be split anymore.
        """
        if self.max_rev - self.min_rev <= 1:
            # already minimal, the bounds are left untouched
            return Terminated(self.versions[self.min_rev], self.versions[self.max_rev])

        is_over = False
        if is_good_version:
            up_pivot = self.pivot + (self.max_rev - self.pivot) // 2
            self.min_rev = self.pivot
            if up_pivot != self.max_rev and up_pivot != self.pivot:
                self.pivot = up_pivot
            else:
                is_over = True
        else:
            down_pivot = self.min_rev + (self.pivot - self.min_rev) // 2
            self.max_rev = self.pivot
            if down_pivot != self.min_rev and down_pivot != self.pivot:
                self.pivot = down_pivot
            else:
                is_over = True

        if is_over:
            return Terminated(self.versions[self.min_rev], self.versions[self.max_rev])
        return Continuing(self.versions[self.pivot])
