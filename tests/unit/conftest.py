from io import StringIO

import pytest

from fiddlebisect import log
from fiddlebisect.test_runner import RunResult


@pytest.fixture(autouse=True, scope="session")
def default_logger():
    """proxy loggers need a default logger to be installed"""
    return log.init_logger(debug=True, allow_color=False, output=StringIO())


def generate_versions(count):
    return ["%d.0.0" % (i + 1) for i in range(count)]


class RecordingOracle(object):
    """
    An oracle classifying versions with a predicate, recording each call.
    """

    def __init__(self, is_good, invalid=()):
        self.is_good = is_good
        self.invalid = set(invalid)
        self.calls = []

    def __call__(self, version):
        self.calls.append(version)
        if version in self.invalid:
            return RunResult.INVALID
        return RunResult.SUCCESS if self.is_good(version) else RunResult.FAILURE


@pytest.fixture
def versions():
    return generate_versions(9)


@pytest.fixture
def oracle_factory():
    return RecordingOracle
