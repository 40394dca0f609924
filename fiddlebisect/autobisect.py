# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""
Unattended bisection: run a test against each pivot version until the
regression is located.
"""

from contextlib import contextmanager

from mozlog import get_proxy_logger

from fiddlebisect.bisector import Bisector, Terminated
from fiddlebisect.config import COMPARE_BASE_URL
from fiddlebisect.log import output_sink
from fiddlebisect.test_runner import RunResult, result_string

LOG = get_proxy_logger("Autobisect")

PREFIX = "Runner: autobisect"


def compare_url(good, bad, base_url=COMPARE_BASE_URL):
    """
    Returns the url listing the commits between the *good* and *bad*
    versions.
    """
    return "%s/v%s...v%s" % (base_url.rstrip("/"), good, bad)


class AutoBisector(object):
    """
    Drive a :class:`fiddlebisect.bisector.Bisector` to completion without
    human intervention.

    :param run_version: the oracle, a callable taking a version and
                        returning a :class:`RunResult` value.
    :param push_output: a callable receiving the human readable progress
                        lines. Defaults to logging them.
    :param compare_url_base: base url used to show the commits between the
                             two boundary versions.
    """

    def __init__(self, run_version, push_output=None, compare_url_base=COMPARE_BASE_URL):
        self.run_version = run_version
        self.push_output = push_output or output_sink("Autobisect")
        self.compare_url_base = compare_url_base
        self.is_running = False
        self.last_range = None
        self._results = {}

    @contextmanager
    def _running(self):
        self.is_running = True
        try:
            yield
        finally:
            self.is_running = False

    def _test(self, version):
        """
        Run the oracle on *version*, at most once per bisection.
        """
        result = self._results.get(version)
        if result is None:
            pre = "%s checking %s" % (PREFIX, version)
            self.push_output("%s - setting version" % pre)
            self.push_output("%s - starting test" % pre)
            result = self.run_version(version)
            self.push_output("%s - finished test %s" % (pre, result_string(result)))
            self._results[version] = result
        else:
            LOG.debug("Reusing result %s for %s" % (result, version))
        return result

    def _abort(self, version):
        # an indeterminate result poisons the whole bisection
        self.push_output(
            "%s %s returned %s, aborting" % (PREFIX, version, result_string(RunResult.INVALID))
        )
        return RunResult.INVALID

    def bisect(self, versions):
        """
        Bisect *versions*, sorted from oldest to newest.

        Returns RunResult.SUCCESS when the regression was located (the
        boundary is then available in :attr:`last_range`), else
        RunResult.INVALID.
        """
        with self._running():
            return self._bisect(versions)

    def _bisect(self, versions):
        self.last_range = None
        self._results = {}

        # can't bisect unless we have >= 2 versions
        if len(versions) < 2:
            self.push_output("%s needs at least two Electron versions" % PREFIX)
            return RunResult.INVALID

        bisector = Bisector(versions)
        version = bisector.get_current_version()
        while True:
            result = self._test(version)
            if result == RunResult.INVALID:
                return self._abort(version)
            step = bisector.next_step(result == RunResult.SUCCESS)
            if isinstance(step, Terminated):
                break
            version = step.version
            LOG.debug(
                "Narrowed range to [%s, %s] (~%d steps left)"
                % (bisector.remaining[0], bisector.remaining[-1], bisector.steps_left())
            )

        good, bad = step
        results = []
        for version in step:
            result = self._test(version)
            if result == RunResult.INVALID:
                return self._abort(version)
            results.append(result)

        result_good, result_bad = results
        if result_good == result_bad:
            self.push_output(
                "%s 'good' %s and 'bad' %s both returned %s"
                % (PREFIX, good, bad, result_string(result_good))
            )
            return RunResult.INVALID

        self.last_range = step
        for msg in (
            "%s complete" % PREFIX,
            "%s %s %s" % (PREFIX, result_string(RunResult.SUCCESS), good),
            "%s %s %s" % (PREFIX, result_string(RunResult.FAILURE), bad),
            "%s Commits between versions:" % PREFIX,
            compare_url(good, bad, self.compare_url_base),
        ):
            self.push_output(msg)
        return RunResult.SUCCESS
