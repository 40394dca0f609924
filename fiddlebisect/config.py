# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""
Reading and writing of the configuration file.
"""

import os

from configobj import ConfigObj, ConfigObjError

from fiddlebisect.errors import ConfigError
from fiddlebisect.log import colorize

DEFAULT_CONF_FNAME = os.path.expanduser(
    os.path.join("~", ".fiddlebisect", "fiddlebisect.cfg")
)
COMPARE_BASE_URL = "https://github.com/electron/electron/compare"

# default values when not defined in config file.
# Note that this is also the list of options that can be used in config file
DEFAULTS = {
    "command": None,
    "versions-file": None,
    "compare-url": COMPARE_BASE_URL,
    "betas": "yes",
    "nightlies": "yes",
}

CONF_HELP = """\
# ------ fiddlebisect configuration file ------

# Most of the command line options can be used in here.
# Just remove the -- from the long option names, e.g.

# command = npx electron-fiddle-test {version}
# versions-file = ~/.fiddlebisect/versions.txt
# nightlies = no


"""


def get_config(conf_path):
    """
    Get custom defaults from configuration file in argument.
    """
    defaults = dict(DEFAULTS)
    try:
        config = ConfigObj(conf_path)
    except ConfigObjError as exc:
        raise ConfigError("Error while reading the config file %s:\n  %s" % (conf_path, exc))
    defaults.update(config)

    return defaults


def as_bool(value):
    """
    Interpret a config value as a boolean. Accepts the configobj spellings.
    """
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "yes", "true", "on")


def write_config(conf_path):
    """
    Write a commented configuration file skeleton, keeping existing values.
    """
    conf_dir = os.path.dirname(conf_path)
    if conf_dir and not os.path.isdir(conf_dir):
        os.makedirs(conf_dir)

    config = ConfigObj(conf_path)
    if not config.initial_comment:
        config.initial_comment = CONF_HELP.splitlines()
    config.write()

    print(colorize("Config file {sBRIGHT}%s{sRESET_ALL} written." % conf_path))
    return conf_path
