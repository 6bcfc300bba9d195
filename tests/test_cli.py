"""Tests for the command-line dispatcher."""

import json

import pytest
import structlog

from src.cli import USAGE, main, show_results
from src.config import TrackerSettings, get_settings


class TestUsage:
    """Tests for help and unknown commands."""

    @pytest.mark.parametrize("argv", [[], ["-h"], ["--help"], ["frobnicate"], ["-h", "list"]])
    def test_prints_usage_and_exits_zero(self, argv, settings, capsys):
        assert main(argv, settings=settings) == 0
        assert capsys.readouterr().out == USAGE

    def test_usage_lists_every_command(self):
        for command in ("add", "delete", "list", "summary"):
            assert command in USAGE

    def test_usage_does_not_touch_store(self, settings, store_path):
        main(["frobnicate"], settings=settings)
        assert not store_path.exists()


class TestAddCommand:
    """Tests for `add`."""

    def test_add_prints_confirmation(self, settings, store_path, fixed_clock, capsys):
        status = main(["add", "--amount", "1000", "--description", "lunch"], settings=settings, clock=fixed_clock)

        assert status == 0
        assert capsys.readouterr().out == "Expense added successfully (ID: 1)\n"
        assert json.loads(store_path.read_text())[0]["date"] == "2024-01-02T11:01:58.135Z"

    @pytest.mark.parametrize("argv", [
        ["add"],
        ["add", "--amount", "100"],
        ["add", "--description", "lunch"],
        ["add", "--amount", "--description", "lunch"],
    ])
    def test_missing_options_fail_before_store(self, argv, settings, store_path, capsys):
        """Test that add is never invoked with missing options."""
        assert main(argv, settings=settings) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Invalid options" in captured.err
        assert not store_path.exists()

    def test_non_integer_amount_fails(self, settings, store_path, capsys):
        assert main(["add", "--amount", "12.50", "--description", "tea"], settings=settings) == 1
        assert "Invalid options" in capsys.readouterr().err
        assert not store_path.exists()

    @pytest.mark.parametrize("amount", ["1_000", "\u0661\u0662", "+5", "0x10"])
    def test_amount_must_be_plain_digits(self, amount, settings, store_path, capsys):
        """Test that only ASCII decimal integers are accepted as amounts."""
        assert main(["add", "--amount", amount, "--description", "tea"], settings=settings) == 1
        assert "Invalid options" in capsys.readouterr().err
        assert not store_path.exists()


class TestDeleteCommand:
    """Tests for `delete`."""

    def test_delete_existing(self, settings, fixed_clock, store_path, capsys):
        main(["add", "--amount", "1", "--description", "a"], settings=settings, clock=fixed_clock)
        main(["add", "--amount", "2", "--description", "b"], settings=settings, clock=fixed_clock)
        capsys.readouterr()

        assert main(["delete", "--id", "1"], settings=settings) == 0
        assert capsys.readouterr().out == "Expense deleted successfully\n"
        assert [item["id"] for item in json.loads(store_path.read_text())] == [2]

    def test_delete_unknown_id(self, settings, capsys):
        assert main(["delete", "--id", "42"], settings=settings) == 1
        assert "Invalid ID" in capsys.readouterr().err

    def test_delete_non_numeric_id(self, settings, capsys):
        assert main(["delete", "--id", "abc"], settings=settings) == 1
        assert "Invalid ID" in capsys.readouterr().err

    def test_delete_non_ascii_digit_id(self, settings, capsys):
        assert main(["delete", "--id", "\u0663"], settings=settings) == 1
        assert "Invalid ID" in capsys.readouterr().err

    def test_delete_without_id(self, settings, capsys):
        assert main(["delete"], settings=settings) == 1
        assert "Invalid options" in capsys.readouterr().err


class TestListCommand:
    """Tests for `list`."""

    def test_list_empty(self, settings, capsys):
        assert main(["list"], settings=settings) == 0
        assert capsys.readouterr().out == ""

    def test_list_prints_aligned_lines(self, settings, fixed_clock, capsys):
        main(["add", "--amount", "1000", "--description", "lunch"], settings=settings, clock=fixed_clock)
        main(["add", "--amount", "25", "--description", "bus"], settings=settings, clock=fixed_clock)
        capsys.readouterr()

        assert main(["list"], settings=settings) == 0
        assert capsys.readouterr().out == (
            "1 2024-01-02 lunch $1000\n"
            "2 2024-01-02 bus   $25\n"
        )

    def test_corrupt_store_fails(self, settings, store_path, capsys):
        store_path.write_text("[{")
        assert main(["list"], settings=settings) == 1
        assert "corrupt" in capsys.readouterr().err


class TestSummaryCommand:
    """Tests for `summary`."""

    def test_summary_all(self, settings, fixed_clock, capsys):
        main(["add", "--amount", "1000", "--description", "a"], settings=settings, clock=fixed_clock)
        main(["add", "--amount", "5", "--description", "b"], settings=settings, clock=fixed_clock)
        capsys.readouterr()

        assert main(["summary"], settings=settings) == 0
        assert capsys.readouterr().out == "Total expenses: $1005\n"

    def test_summary_for_month(self, settings, fixed_clock, capsys):
        main(["add", "--amount", "1000", "--description", "a"], settings=settings, clock=fixed_clock)
        capsys.readouterr()

        assert main(["summary", "--month", "1"], settings=settings) == 0
        assert capsys.readouterr().out == "Total expenses for January: $1000\n"

    @pytest.mark.parametrize("month", ["0", "13", "may"])
    def test_summary_invalid_month(self, month, settings, capsys):
        assert main(["summary", "--month", month], settings=settings) == 1
        assert "Invalid month number" in capsys.readouterr().err

    def test_summary_month_without_value(self, settings, capsys):
        assert main(["summary", "--month"], settings=settings) == 1
        assert "Invalid month number" in capsys.readouterr().err


class TestSettingsIntegration:
    """Tests for settings-driven store location."""

    def test_store_path_from_environment(self, tmp_path, monkeypatch, fixed_clock, capsys):
        store = tmp_path / "from-env.json"
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("EXPENSE_TRACKER_STORE_PATH", str(store))

        assert main(["add", "--amount", "7", "--description", "gum"], clock=fixed_clock) == 0
        assert json.loads(store.read_text())[0]["description"] == "gum"

    def test_relative_store_path_resolves_against_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        settings = TrackerSettings(store_path="data/expenses.json")
        assert settings.resolved_store_path == tmp_path.resolve() / "data" / "expenses.json"

    def test_settings_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        for name in ("STORE_PATH", "JSON_INDENT", "LOG_LEVEL", "LOG_FORMAT"):
            monkeypatch.delenv(f"EXPENSE_TRACKER_{name}", raising=False)
        settings = get_settings()
        assert settings.store_path.name == "expenses.json"
        assert settings.json_indent == 2
        assert settings.log_level == "WARNING"

    def test_bad_settings_fail_without_stdout_noise(self, tmp_path, monkeypatch, capsys):
        """Test that a settings failure is reported on stderr only."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("EXPENSE_TRACKER_LOG_LEVEL", "chatty")
        structlog.reset_defaults()

        assert main(["list"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Unknown log level" in captured.err
        assert "command_failed" in captured.err

    def test_log_level_is_normalized(self):
        assert TrackerSettings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValueError):
            TrackerSettings(log_level="chatty")


class TestShowResults:
    """Tests for result printing."""

    def test_one_line_per_result(self, capsys):
        show_results(["a", "b"])
        assert capsys.readouterr().out == "a\nb\n"
