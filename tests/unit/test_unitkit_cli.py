"""Unit tests for unitkit.cli."""

from unitkit.cli import main


def test_no_command_shows_help(capsys):
    assert main([]) == 0
    assert "Usage: " in capsys.readouterr().out


def test_render(config_file, unit_file, capsys):
    assert main(["render", str(config_file)]) == 0
    assert capsys.readouterr().out == unit_file.render()


def test_validate(config_file, capsys):
    assert main(["validate", str(config_file)]) == 0
    assert "foo.service: valid" in capsys.readouterr().out


def test_validate_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text('{"name": "foo", "service": {"execution": {"nice": 25}}}', encoding="utf-8")

    assert main(["validate", str(path)]) == 1
    assert "Validation Error: Nice level 25" in capsys.readouterr().err


def test_missing_config_reports_error(tmp_path, capsys):
    assert main(["render", str(tmp_path / "missing.json")]) == 1
    assert "not found" in capsys.readouterr().err


def test_install(config_file, unit_dir, fake_systemctl, capsys):
    assert main(["install", str(config_file), "--unit-dir", str(unit_dir)]) == 0
    assert (unit_dir / "foo.service").exists()
    assert fake_systemctl.subcommands == ["enable", "daemon-reload"]
    assert "Installed" in capsys.readouterr().out


def test_install_does_not_write_invalid_unit(tmp_path, unit_dir, fake_systemctl, capsys):
    path = tmp_path / "bad.json"
    path.write_text('{"name": "foo", "unit": {"documentation": ["ftp://x"]}}', encoding="utf-8")

    assert main(["install", str(path), "--unit-dir", str(unit_dir)]) == 1
    assert not (unit_dir / "foo.service").exists()
    assert fake_systemctl.calls == []


def test_start_failure(config_file, unit_dir, fake_systemctl, capsys):
    fake_systemctl.responses["start"] = (1, "", "Access denied")

    assert main(["start", str(config_file), "--unit-dir", str(unit_dir)]) == 1
    assert "Command Error: Access denied" in capsys.readouterr().err


def test_status(config_file, unit_dir, fake_systemctl, capsys):
    fake_systemctl.responses["is-active"] = (0, "active\n", "")

    assert main(["status", str(config_file), "--unit-dir", str(unit_dir)]) == 0
    assert "foo.service: Running" in capsys.readouterr().out


def test_available(monkeypatch, capsys):
    monkeypatch.setattr("shutil.which", lambda name: None)
    assert main(["available"]) == 1
    assert "systemctl not found" in capsys.readouterr().err

    monkeypatch.setattr("shutil.which", lambda name: f"/usr/bin/{name}")
    assert main(["available"]) == 0


def test_unknown_command(capsys):
    assert main(["explode"]) == 2
    assert "No such command" in capsys.readouterr().err


def test_missing_argument_is_usage_error(capsys):
    assert main(["render"]) == 2


def test_help_exits_cleanly(capsys):
    assert main(["--help"]) == 0
    assert "render" in capsys.readouterr().out


def test_unreadable_config_reports_error(tmp_path, capsys):
    assert main(["render", str(tmp_path)]) == 1
    assert "I/O Error: Failed to read config file" in capsys.readouterr().err


def test_log_file_records_systemctl_calls(config_file, unit_dir, fake_systemctl, tmp_path, fresh_logging):
    log_file = tmp_path / "logs" / "unitkit.log"

    assert main(["--log-file", str(log_file), "--verbose", "start", str(config_file), "--unit-dir", str(unit_dir)]) == 0
    for handler in fresh_logging.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "unitkit.service - INFO - Starting foo.service" in content
    assert "unitkit.service - DEBUG - Running systemctl start foo.service" in content
