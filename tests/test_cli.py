import pytest

from poppingpenguin.cli import load_config, main


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


def test_load_config_explicit_file(tmp_path):
    cfg = tmp_path / "settings.yaml"
    cfg.write_text("level: 50\n")
    path, data = load_config(str(cfg))
    assert path == cfg
    assert data == {"level": 50}


def test_load_config_missing_explicit_file(tmp_path):
    assert load_config(str(tmp_path / "absent.yaml")) is None


def test_load_config_invalid_yaml(tmp_path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("key: [unclosed\n")
    assert load_config(str(cfg)) is None


def test_load_config_default_in_home(home):
    cfg = home / ".poppingpenguin.yaml"
    cfg.write_text("")
    path, data = load_config()
    assert path == cfg
    assert data == {}


def test_load_config_default_missing(home):
    assert load_config(None) is None


def test_version_command(home, capsys):
    assert main(["version"]) == 0
    assert capsys.readouterr().out.startswith("poppingpenguin version: ")


def test_config_file_is_announced(tmp_path, home, capsys):
    cfg = tmp_path / "conf.yaml"
    cfg.write_text("a: 1\n")
    assert main(["--config", str(cfg), "version"]) == 0
    assert f"Using config file: {cfg}" in capsys.readouterr().err


def test_shrink_requires_files(home, capsys):
    assert main(["shrink"]) == 1
    assert "Missing argument" in capsys.readouterr().err


def test_shrink_with_no_matches_warns_when_verbose(tmp_path, home, capsys):
    pattern = str(tmp_path / "*.png")
    assert main(["shrink", "-v", pattern]) == 0
    err = capsys.readouterr().err
    assert f"WARNING: No files found matching pattern: {pattern}" in err


def test_group_level_verbose_flag(tmp_path, home, capsys):
    assert main(["-vvv", "shrink", str(tmp_path / "*.png")]) == 0
    assert "DEBUG: Found 0 files to process" in capsys.readouterr().err


def test_shrink_quiet_by_default(tmp_path, home, capsys):
    assert main(["shrink", str(tmp_path / "*.png")]) == 0
    assert capsys.readouterr().err == ""


def test_shrink_bad_pattern_fails(tmp_path, home, capsys):
    assert main(["shrink", str(tmp_path / "[")]) == 1
    assert "invalid pattern" in capsys.readouterr().err


def test_shrink_zero_concurrency_fails(tmp_path, home, capsys):
    assert main(["shrink", "-c", "0", str(tmp_path / "*.png")]) == 1
    assert "concurrency level" in capsys.readouterr().err