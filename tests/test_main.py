"""Tests for the command-line entry point."""

from pathlib import Path

import pytest

from carbon_tracker.cli import main


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CARBON_TRACKER_LOG_PATH", raising=False)
    monkeypatch.setenv("CARBON_TRACKER_TIMEZONE", "UTC")


def test_main_without_command_prints_help(capsys) -> None:
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "Carbon Tracker" in captured.out


def test_add_then_history_and_summary(tmp_path: Path, capsys) -> None:
    log_path = tmp_path / "log.csv"
    base = ["--log-path", str(log_path)]

    status = main(
        [*base, "add", "--car-km", "10", "--electricity-kwh", "5", "--meat-meals", "1"]
    )
    out = capsys.readouterr().out

    assert status == 0
    assert "11.35 kg CO2" in out
    assert "Top contributor: Food (meals)" in out
    assert log_path.exists()

    assert main([*base, "summary"]) == 0
    out = capsys.readouterr().out
    assert "Last 7 days:" in out
    assert "Total: 11.35 kg CO2" in out

    assert main([*base, "history", "--bars"]) == 0
    assert "11.35 kg" in capsys.readouterr().out

    assert main([*base, "tips"]) == 0
    assert "Remember to recycle today." in capsys.readouterr().out

    assert main([*base, "habits"]) == 0
    assert "Recycled on 0 of 1 recorded days" in capsys.readouterr().out


def test_add_rejects_negative_values(tmp_path: Path, capsys) -> None:
    log_path = tmp_path / "log.csv"

    status = main(["--log-path", str(log_path), "add", "--car-km", "-5"])

    assert status == 1
    assert "car_km must be a finite non-negative number" in capsys.readouterr().err
    assert not log_path.exists()


def test_init_and_export(tmp_path: Path, capsys) -> None:
    log_path = tmp_path / "log.csv"
    report = tmp_path / "report.txt"
    base = ["--log-path", str(log_path)]

    assert main([*base, "init"]) == 0
    assert main([*base, "add", "--date", "2024-06-01", "--veg-meals", "2"]) == 0
    assert main([*base, "export", str(report)]) == 0

    lines = report.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("Carbon footprint report generated on ")
    assert lines[1] == "2024-06-01 , 3.00 kg CO2"
    assert lines[-1] == "Total: 3.00 kg CO2"
    assert "Exported 1 entries" in capsys.readouterr().out


def test_summary_without_log(tmp_path: Path, capsys) -> None:
    assert main(["--log-path", str(tmp_path / "none.csv"), "summary"]) == 0
    assert "No entry log yet" in capsys.readouterr().out


def test_add_rejects_nan(tmp_path: Path, capsys) -> None:
    log_path = tmp_path / "log.csv"

    status = main(["--log-path", str(log_path), "add", "--car-km", "nan"])

    assert status == 1
    assert "car_km" in capsys.readouterr().err
    assert not log_path.exists()


def test_add_reports_storage_failure(tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    status = main(["--log-path", str(blocker / "log.csv"), "add", "--veg-meals", "1"])

    assert status == 1
    assert "Error: Failed to create entry log" in capsys.readouterr().err


def test_invalid_timezone_is_a_configuration_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys
) -> None:
    monkeypatch.setenv("CARBON_TRACKER_TIMEZONE", "Mars/Olympus_Mons")

    status = main(["--log-path", str(tmp_path / "log.csv"), "summary"])

    assert status == 1
    assert "Configuration error" in capsys.readouterr().err
