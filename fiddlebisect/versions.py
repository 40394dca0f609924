# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""
Version utilities functions.

Electron versions follow semver, with three prerelease channels that
sort as nightly < alpha < beta < stable for the same major.minor.patch.
"""

from functools import cmp_to_key

from mozlog import get_proxy_logger
from semver import Version

from fiddlebisect.errors import VersionFormatError, VersionNotFoundError

LOG = get_proxy_logger("Versions")

PRE_TAGS = ("nightly", "alpha", "beta")


def normalize_version(version):
    """
    Strip surrounding spaces and a leading 'v' from a version string.
    """
    if not version:
        return version
    version = version.strip()
    if version[:1] in ("v", "V"):
        version = version[1:]
    return version


def parse_version(version):
    """
    Returns a :class:`semver.Version` from a string.

    A leading 'v' is accepted.
    """
    try:
        return Version.parse(normalize_version(version))
    except (TypeError, ValueError):
        raise VersionFormatError(version)


def is_valid_version(version):
    if not version:
        return False
    return Version.is_valid(normalize_version(version))


def _channel_rank(version):
    if version.prerelease:
        tag = version.prerelease.split(".")[0]
        if tag in PRE_TAGS:
            return PRE_TAGS.index(tag)
    return None


def semver_compare(a, b):
    """
    Compare two version strings. Returns -1, 0 or 1.

    A prerelease sorts before its stable release. For the same
    major.minor.patch, electron prerelease channels sort as
    nightly < alpha < beta.
    """
    va, vb = parse_version(a), parse_version(b)
    if va.finalize_version() == vb.finalize_version():
        rank_a, rank_b = _channel_rank(va), _channel_rank(vb)
        if rank_a is not None and rank_b is not None and rank_a != rank_b:
            return 1 if rank_a > rank_b else -1
    return va.compare(vb)


def sort_versions(versions):
    """
    Returns the valid versions in *versions*, sorted from newest to oldest.
    """
    valid = []
    for version in versions:
        if is_valid_version(version):
            valid.append(version)
        else:
            LOG.debug("Ignoring invalid version %r" % version)
    return sorted(valid, key=cmp_to_key(semver_compare), reverse=True)


def get_release_channel(version):
    if "beta" in version or "alpha" in version:
        return "beta"
    if "nightly" in version:
        return "nightly"
    return "stable"


def filter_channels(versions, betas=True, nightlies=True):
    """
    Returns *versions* without the hidden release channels.

    Alpha releases belong to the beta channel.
    """
    hidden = set()
    if not betas:
        hidden.add("beta")
    if not nightlies:
        hidden.add("nightly")
    return [v for v in versions if get_release_channel(v) not in hidden]


def get_version_range(old_version, new_version, versions):
    """
    Returns the subset of *versions* bounded in [old_version, new_version],
    sorted from oldest to newest.

    *old_version* and *new_version* are swapped if given in the wrong
    order. *versions* may be sorted either way.
    """
    old_version = normalize_version(old_version)
    new_version = normalize_version(new_version)
    # ensure that old_version is older than new_version
    if semver_compare(old_version, new_version) > 0:
        old_version, new_version = new_version, old_version

    versions = list(versions)
    try:
        old_idx = versions.index(old_version)
    except ValueError:
        raise VersionNotFoundError(old_version)
    try:
        new_idx = versions.index(new_version)
    except ValueError:
        raise VersionNotFoundError(new_version)

    result = versions[min(old_idx, new_idx) : max(old_idx, new_idx) + 1]
    if old_idx > new_idx:
        result.reverse()
    return result


def read_versions_file(path):
    """
    Read a list of versions from a file, one per line.

    Blank lines and lines starting with '#' are ignored.
    """
    with open(path) as f:
        lines = [line.strip() for line in f]
    return [normalize_version(line) for line in lines if line and not line.startswith("#")]
