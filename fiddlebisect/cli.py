# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""
This module parses and checks the command line with :func:`cli` and return a
:class:`Configuration` object that hold information for running the
application.

:func:`cli` is intended to be the only public interface of this module.
"""

import os
from argparse import SUPPRESS, Action, ArgumentParser

from fiddlebisect import __version__
from fiddlebisect.config import DEFAULT_CONF_FNAME, as_bool, get_config, write_config
from fiddlebisect.errors import FiddleBisectError
from fiddlebisect.log import colorize, init_logger
from fiddlebisect.versions import (
    filter_channels,
    get_version_range,
    normalize_version,
    read_versions_file,
    sort_versions,
)


class WriteConfigAction(Action):
    def __init__(self, option_strings, dest=SUPPRESS, default=SUPPRESS, help=None):
        super(WriteConfigAction, self).__init__(
            option_strings=option_strings, dest=dest, default=default, nargs=0, help=help,
        )

    def __call__(self, parser, namespace, values, option_string=None):
        write_config(DEFAULT_CONF_FNAME)
        parser.exit()


def parse_args(argv=None, defaults=None):
    """
    Parse command line options.
    """
    parser = create_parser(defaults=defaults)
    return parser.parse_args(argv)


def create_parser(defaults):
    """
    Create the fiddlebisect command line parser (ArgumentParser instance).
    """
    usage = (
        "\n"
        " %(prog)s [OPTIONS] --good VERSION --bad VERSION"
        "\n"
        " %(prog)s [OPTIONS] --launch VERSION --command COMMAND"
        "\n"
        " %(prog)s --write-config"
    )

    parser = ArgumentParser(usage=usage)
    parser.add_argument(
        "--version",
        action="version",
        version=__version__,
        help="print the fiddlebisect version number and exits.",
    )

    parser.add_argument(
        "-g", "--good", metavar="VERSION", help="a version known to not have the regression.",
    )

    parser.add_argument(
        "-b", "--bad", metavar="VERSION", help="a version known to have the regression.",
    )

    parser.add_argument(
        "--launch",
        metavar="VERSION",
        help="run the test command once against the given version and exit.",
    )

    parser.add_argument(
        "-c",
        "--command",
        default=defaults["command"],
        help=(
            "test command to evaluate each version. `{version}` in the"
            " command is replaced by the tested version, which is also"
            " available as the FIDDLEBISECT_VERSION environment variable."
            " An exit code of 0 means the version is good, any other exit"
            " code means it is bad. Without a command, you are asked to"
            " evaluate each version."
        ),
    )

    parser.add_argument(
        "--versions",
        metavar="V1,V2,...",
        help="comma separated list of the available versions.",
    )

    parser.add_argument(
        "--versions-file",
        default=defaults["versions-file"],
        help="file listing the available versions, one per line.",
    )

    parser.add_argument(
        "--no-betas",
        dest="betas",
        action="store_false",
        default=as_bool(defaults["betas"]),
        help="omit beta and alpha releases.",
    )

    parser.add_argument(
        "--no-nightlies",
        dest="nightlies",
        action="store_false",
        default=as_bool(defaults["nightlies"]),
        help="omit nightly releases.",
    )

    parser.add_argument(
        "--compare-url",
        default=defaults["compare-url"],
        help="base url used to show the commits between two versions.",
    )

    parser.add_argument("--debug", "-d", action="store_true", help="Show the debug output.")

    parser.add_argument(
        "--write-config",
        action=WriteConfigAction,
        help="Write a configuration file skeleton and exit.",
    )

    return parser


class Configuration(object):
    """
    Holds the configuration extracted from the command line + configuration file.

    This is usually instantiated by calling :func:`cli`.

    The configuration should not be used (except for the logger attribute)
    until :meth:`validate` is called.

    :attr logger: the mozlog logger, created using the command line options
    :attr options: the raw command line options
    :attr action: the action that the user want to do. This is a string
                  ("autobisect", "bisect_manually" or "launch")
    :attr versions: the versions to bisect, sorted from oldest to newest
    """

    def __init__(self, options, config):
        self.options = options
        self.config = config
        self.logger = init_logger(debug=options.debug)
        self.action = None
        self.versions = None

    def _load_versions(self):
        options = self.options
        if options.versions:
            versions = [normalize_version(v) for v in options.versions.split(",") if v.strip()]
        elif options.versions_file:
            path = os.path.expanduser(options.versions_file)
            try:
                versions = read_versions_file(path)
            except (IOError, OSError) as exc:
                raise FiddleBisectError("Unable to read the versions file %s: %s" % (path, exc))
        else:
            raise FiddleBisectError("No versions given. Use --versions or --versions-file.")
        versions = filter_channels(
            sort_versions(versions), betas=options.betas, nightlies=options.nightlies
        )
        self.logger.debug("%d versions available" % len(versions))
        return versions

    def validate(self):
        """
        Validate the options, define the `action` and `versions` that
        should be used to run the application.
        """
        options = self.options

        if options.launch:
            if not options.command:
                raise FiddleBisectError("--launch requires a test --command")
            options.launch = normalize_version(options.launch)
            self.action = "launch"
            return

        if not options.good or not options.bad:
            raise FiddleBisectError("Both --good and --bad versions are required to bisect")
        options.good = normalize_version(options.good)
        options.bad = normalize_version(options.bad)

        self.versions = get_version_range(options.good, options.bad, self._load_versions())
        self.logger.info("Bisecting [%s]" % ", ".join(self.versions))
        self.action = "autobisect" if options.command else "bisect_manually"


def cli(argv=None, conf_file=DEFAULT_CONF_FNAME, namespace=None):
    """
    parse cli args basically and returns a :class:`Configuration`.

    if namespace is given, it will be used as a arg parsing result, so no
    arg parsing will be done.
    """
    config = get_config(conf_file)
    if namespace:
        options = namespace
    else:
        options = parse_args(argv=argv, defaults=config)
    if conf_file and not os.path.isfile(conf_file):
        print("*" * 10)
        print(
            colorize(
                "You can use a config file. Please use the "
                + "{sBRIGHT}--write-config{sRESET_ALL}"
                + " command line flag to create one."
            )
        )
        print("*" * 10)
        print()
    return Configuration(options, config)
