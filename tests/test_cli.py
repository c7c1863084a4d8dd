# tests/test_cli.py
"""
End-to-end tests for the pelp command line: profile resolution, device
streaming and the exit codes of the failure paths.
"""

import pytest

from pelp.cli import build_parser, main
from pelp.render import CLEAR_SCREEN


@pytest.fixture
def device(tmp_path):
    path = tmp_path / "ttyUSB0"
    path.write_text("2024 ERROR disk full\nall clear\n\nI (42) wifi up\n", encoding="utf-8")
    return path


class TestBuildParser:
    def test_short_options(self):
        args = build_parser().parse_args(["-p", "esp32", "-d", "/dev/ttyUSB0"])
        assert args.profile == "esp32"
        assert args.device == "/dev/ttyUSB0"
        assert args.no_clear is False

    def test_profile_is_optional(self):
        assert build_parser().parse_args(["-d", "/dev/ttyUSB0"]).profile is None


class TestMain:
    def test_annotates_device(self, clean_env, config_file, device, capsys):
        code = main(["-p", "esp32", "-d", str(device), "--config", str(config_file), "--no-clear"])

        assert code == 0
        out = capsys.readouterr().out
        assert CLEAR_SCREEN not in out
        assert "PELP opened device successfully!" in out
        annotated = out.split("PELP opened device successfully!\n", 1)[1]
        assert annotated.splitlines() == [
            "\x1b[31m2024 ERROR disk full\x1b[0m",
            "2024 ERROR disk full",
            "all clear",
            "all clear",
            "I (42) wifi up",
            "\x1b[32mI (42) wifi up\x1b[0m",
        ]

    def test_clears_screen_and_prints_banner(self, clean_env, config_file, device, capsys):
        assert main(["-p", "esp32", "-d", str(device), "--config", str(config_file)]) == 0
        assert capsys.readouterr().out.startswith(CLEAR_SCREEN)

    def test_config_from_home(self, clean_env, config_file, device, capsys):
        config_dir = clean_env / ".config"
        config_dir.mkdir()
        config_file.rename(config_dir / "pelp.toml")

        assert main(["-p", "quiet", "-d", str(device), "--no-clear"]) == 0
        out = capsys.readouterr().out
        assert "retrying with $HOME" in out
        assert "all clear\n" in out

    def test_unknown_profile_uses_default(self, clean_env, config_file, device, capsys):
        assert main(["-p", "nope", "-d", str(device), "--config", str(config_file), "--no-clear"]) == 0
        captured = capsys.readouterr()
        assert 'failed to find profile "nope"' in captured.err
        assert "\x1b[mall clear\x1b[0m" in captured.out

    def test_env_supplies_device_and_profile(self, clean_env, config_file, device, capsys, monkeypatch):
        monkeypatch.setenv("PELP_DEVICE", str(device))
        monkeypatch.setenv("PELP_PROFILE", "quiet")
        monkeypatch.setenv("PELP_CONFIG", str(config_file))
        monkeypatch.setenv("PELP_NO_CLEAR", "true")

        assert main([]) == 0
        assert 'profile "quiet"' in capsys.readouterr().out

    def test_device_open_failure_is_fatal(self, clean_env, config_file, tmp_path, capsys):
        code = main(["-d", str(tmp_path / "missing"), "--config", str(config_file), "--no-clear"])

        assert code == 1
        captured = capsys.readouterr()
        assert "PELP failed to open device" in captured.out
        assert "failed to open" in captured.err

    def test_device_is_required(self, clean_env, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--no-clear"])
        assert exc_info.value.code == 2

    def test_list_profiles(self, clean_env, config_file, capsys):
        assert main(["--list", "--config", str(config_file)]) == 0
        assert capsys.readouterr().out.splitlines() == ["esp32", "quiet"]

    def test_log_file(self, clean_env, config_file, device, tmp_path):
        log_file = tmp_path / "pelp.log"
        main(["-p", "esp32", "-d", str(device), "--config", str(config_file),
              "--no-clear", "--log-file", str(log_file)])

        content = log_file.read_text()
        assert "Opened device" in content
        assert "Substitution for 'I ('" in content

    def test_no_home_directory_exits_1(self, clean_env, device, capsys, monkeypatch):
        monkeypatch.delenv("HOME", raising=False)

        assert main(["-d", str(device), "--no-clear"]) == 1
        assert "neither $SUDO_HOME nor $HOME is set" in capsys.readouterr().err

    def test_list_without_home_directory_exits_1(self, clean_env, capsys, monkeypatch):
        monkeypatch.delenv("HOME", raising=False)

        assert main(["--list"]) == 1
        captured = capsys.readouterr()
        assert "neither $SUDO_HOME nor $HOME is set" in captured.err
        assert captured.out.endswith("retrying with $HOME\n")

    def test_ctrl_c_exits_130(self, clean_env, config_file, device, capsys, monkeypatch):
        def interrupted(stream):
            raise KeyboardInterrupt

        monkeypatch.setattr("pelp.cli.read_lines", interrupted)

        assert main(["-d", str(device), "--config", str(config_file), "--no-clear"]) == 130
