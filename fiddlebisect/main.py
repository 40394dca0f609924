# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""
Entry point for the fiddlebisect command line.
"""

import os
import sys

import colorama
from mozlog import get_proxy_logger

from fiddlebisect.autobisect import AutoBisector
from fiddlebisect.cli import cli
from fiddlebisect.errors import FiddleBisectError
from fiddlebisect.interactive import InteractiveBisection
from fiddlebisect.test_runner import (
    CommandTestRunner,
    ManualTestRunner,
    RunResult,
    result_string,
)

LOG = get_proxy_logger("main")


class Application(object):
    def __init__(self, options, versions=None):
        self.options = options
        self.versions = versions
        self._test_runner = None

    @property
    def test_runner(self):
        if self._test_runner is None:
            if self.options.command is None:
                self._test_runner = ManualTestRunner()
            else:
                self._test_runner = CommandTestRunner(self.options.command)
        return self._test_runner

    def autobisect(self):
        bisector = AutoBisector(
            self.test_runner.evaluate,
            push_output=LOG.info,
            compare_url_base=self.options.compare_url,
        )
        result = bisector.bisect(self.versions)
        LOG.info("Bisect result: %s" % result_string(result))
        return 0 if result == RunResult.SUCCESS else 1

    def bisect_manually(self):
        session = InteractiveBisection(
            self.versions, push_output=LOG.info, compare_url_base=self.options.compare_url
        )
        version = session.start()
        while version is not None:
            verdict = self.test_runner.evaluate(version)
            if verdict == RunResult.INVALID:
                session.cancel()
                return 1
            version = session.mark(verdict == RunResult.SUCCESS)
        return 0

    def launch(self):
        result = self.test_runner.evaluate(self.options.launch)
        LOG.info("Version %s %s" % (self.options.launch, result_string(result)))
        return 0 if result == RunResult.SUCCESS else 1


def main(argv=None, namespace=None):
    """
    main entry point of fiddlebisect command line.
    """
    # terminal color support on windows
    if os.name == "nt":
        colorama.init()

    config, app = None, None
    try:
        config = cli(argv=argv, namespace=namespace)
        config.validate()
        app = Application(config.options, config.versions)

        method = getattr(app, config.action)
        sys.exit(method())

    except KeyboardInterrupt:
        sys.exit("\nInterrupted.")
    except FiddleBisectError as exc:
        LOG.error(str(exc)) if config else sys.exit(str(exc))
        sys.exit(1)


if __name__ == "__main__":
    main()
