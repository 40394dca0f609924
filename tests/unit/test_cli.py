import os
import tempfile
import unittest

import pytest

from fiddlebisect import cli, errors

VERSIONS = "4.0.0,3.0.0,3.0.0-beta.2,3.0.0-nightly.20200101,2.0.0,1.0.0"


def do_cli(*argv, **kwargs):
    conf = cli.cli(argv=argv, conf_file=kwargs.get("conf_file"))
    conf.validate()
    return conf


class TestCli(unittest.TestCase):
    def _create_conf_file(self, content):
        handle, filepath = tempfile.mkstemp()
        self.addCleanup(os.unlink, filepath)

        with os.fdopen(handle, "w") as conf_file:
            conf_file.write(content)
        return filepath

    def test_autobisect_action(self):
        conf = do_cli("--good=1.0.0", "--bad=3.0.0", "--versions", VERSIONS, "-c", "run {version}")
        self.assertEqual(conf.action, "autobisect")
        self.assertEqual(
            conf.versions,
            ["1.0.0", "2.0.0", "3.0.0-nightly.20200101", "3.0.0-beta.2", "3.0.0"],
        )

    def test_manual_bisect_action(self):
        conf = do_cli("--good=v1.0.0", "--bad=v2.0.0", "--versions", VERSIONS)
        self.assertEqual(conf.action, "bisect_manually")
        self.assertEqual(conf.versions, ["1.0.0", "2.0.0"])

    def test_hide_channels(self):
        conf = do_cli(
            "-g", "1.0.0", "-b", "4.0.0", "--versions", VERSIONS, "--no-betas", "--no-nightlies"
        )
        self.assertEqual(conf.versions, ["1.0.0", "2.0.0", "3.0.0", "4.0.0"])

    def test_versions_file(self):
        filepath = self._create_conf_file("\n".join(VERSIONS.split(",")))
        conf = do_cli("-g", "2.0.0", "-b", "3.0.0", "--versions-file", filepath, "--no-nightlies")
        self.assertEqual(conf.versions, ["2.0.0", "3.0.0-beta.2", "3.0.0"])

    def test_missing_versions_file(self):
        with self.assertRaises(errors.FiddleBisectError) as ctx:
            do_cli("-g", "2.0.0", "-b", "3.0.0", "--versions-file", "/does/not/exist")
        self.assertIn("Unable to read the versions file", str(ctx.exception))

    def test_no_versions(self):
        with self.assertRaises(errors.FiddleBisectError) as ctx:
            do_cli("-g", "2.0.0", "-b", "3.0.0")
        self.assertIn("No versions given", str(ctx.exception))

    def test_good_and_bad_required(self):
        self.assertRaises(errors.FiddleBisectError, do_cli, "-g", "2.0.0", "--versions", VERSIONS)

    def test_unknown_version(self):
        self.assertRaises(
            errors.VersionNotFoundError, do_cli, "-g", "1.0.0", "-b", "9.0.0", "--versions", VERSIONS
        )

    def test_launch_action(self):
        conf = do_cli("--launch", "v3.0.0", "--command", "run {version}")
        self.assertEqual(conf.action, "launch")
        self.assertEqual(conf.options.launch, "3.0.0")

    def test_launch_needs_a_command(self):
        self.assertRaises(errors.FiddleBisectError, do_cli, "--launch", "3.0.0")

    def test_get_defaults_from_config_file(self):
        filepath = self._create_conf_file(
            "command = run-fiddle {version}\n"
            "betas = no\n"
            "compare-url = https://example.com/compare\n"
        )
        conf = do_cli("--launch", "3.0.0", conf_file=filepath)
        self.assertEqual(conf.options.command, "run-fiddle {version}")
        self.assertFalse(conf.options.betas)
        self.assertTrue(conf.options.nightlies)
        self.assertEqual(conf.options.compare_url, "https://example.com/compare")

    def test_command_line_overrides_config_file(self):
        filepath = self._create_conf_file("command = run-fiddle {version}\n")
        conf = do_cli("--launch", "3.0.0", "-c", "other {version}", conf_file=filepath)
        self.assertEqual(conf.options.command, "other {version}")


def test_write_config(mocker):
    write_config = mocker.patch("fiddlebisect.cli.write_config")
    with pytest.raises(SystemExit) as exc:
        cli.parse_args(["--write-config"], defaults=dict(cli.get_config(None)))
    assert exc.value.code == 0
    write_config.assert_called_once_with(cli.DEFAULT_CONF_FNAME)


def test_suggest_config_file(capsys, mocker):
    mocker.patch("fiddlebisect.cli.init_logger")
    cli.cli(argv=["--launch", "1.0.0"], conf_file="/does/not/exist.cfg")
    assert "--write-config" in capsys.readouterr().out
