"""Tests for the devai command surface."""

import pytest
from typer.testing import CliRunner

from devai import __version__
from devai import main
from devai.errors import ConfigurationError
from devai.tools import today_label

runner = CliRunner()


@pytest.fixture
def use_client(monkeypatch):
    def install(client):
        monkeypatch.setattr(main, "make_client", lambda settings: client)
        return client

    return install


class TestRoute:
    def test_free_text_goes_to_ask(self):
        assert main.route(["how", "to", "center", "a", "div"]) == ["ask", "how", "to", "center", "a", "div"]

    def test_known_commands_are_kept(self):
        assert main.route(["format-standup", "fixed bug"]) == ["format-standup", "fixed bug"]
        assert main.route(["formatStandup", "fixed bug"]) == ["formatStandup", "fixed bug"]

    def test_global_options_come_first(self):
        assert main.route(["-v", "explain", "async"]) == ["-v", "ask", "explain", "async"]

    def test_today_without_output_is_a_question(self):
        assert main.route(["today", "is", "friday"]) == ["ask", "today", "is", "friday"]

    def test_today_with_output_is_the_command(self):
        assert main.route(["today", "-o", "job.txt"]) == ["today", "-o", "job.txt"]
        assert main.route(["today", "--output=job.txt"]) == ["today", "--output=job.txt"]

    def test_options_only(self):
        assert main.route(["--version"]) == ["--version"]
        assert main.route([]) == []


class TestAsk:
    def test_prints_answer(self, use_client, fake_client):
        client = use_client(fake_client("Use `display: flex`"))
        result = runner.invoke(main.app, ["ask", "how", "to", "center", "a", "div"])
        assert result.exit_code == 0
        assert "Done!" in result.output
        assert "display: flex" in result.output
        assert client.calls[0][0] == "how to center a div"

    def test_model_failure_exits_with_error(self, use_client, failing_client):
        use_client(failing_client)
        result = runner.invoke(main.app, ["ask", "hello"])
        assert result.exit_code == 1
        assert "Something went wrong!" in result.output
        assert "quota exceeded" in result.output

    def test_missing_api_key(self, monkeypatch):
        def no_key(settings):
            raise ConfigurationError("No API key configured.")

        monkeypatch.setattr(main, "make_client", no_key)
        result = runner.invoke(main.app, ["ask", "hello"])
        assert result.exit_code == 1
        assert "No API key configured." in result.output

    def test_speak_flag(self, use_client, fake_client, monkeypatch):
        use_client(fake_client("hello there"))
        spoken = []
        monkeypatch.setattr(main, "speak", spoken.append)
        result = runner.invoke(main.app, ["ask", "--speak", "hi"])
        assert result.exit_code == 0
        assert spoken == ["hello there"]


class TestFormatStandup:
    def fragment(self, task="Fixed bug"):
        return f"Updates [{today_label()}]:-\nHuntgate:\n- {task}"

    def test_prints_fragment(self, use_client, fake_client):
        use_client(fake_client(self.fragment()))
        result = runner.invoke(main.app, ["format-standup", "huntgate", "fixed", "bug"])
        assert result.exit_code == 0
        assert "Standup formatted!" in result.output
        assert "- Fixed bug" in result.output

    def test_camel_case_alias(self, use_client, fake_client):
        use_client(fake_client(self.fragment()))
        result = runner.invoke(main.app, ["formatStandup", "huntgate fixed bug"])
        assert result.exit_code == 0
        assert "- Fixed bug" in result.output

    def test_output_and_show_all_today(self, use_client, fake_client, tmp_path):
        path = tmp_path / "notes" / "job.txt"
        use_client(fake_client(self.fragment()))
        runner.invoke(main.app, ["format-standup", "huntgate fixed bug", "-o", str(path)])
        use_client(fake_client(self.fragment("Fixed CSS issues")))
        result = runner.invoke(main.app, ["format-standup", "huntgate css", "-o", str(path), "--show-all-today"])
        assert result.exit_code == 0
        assert "- Fixed bug" in result.output
        assert "- Fixed CSS issues" in result.output
        content = path.read_text(encoding="utf-8")
        assert content.count("Fixed bug") == 1

    def test_directory_output_is_reported(self, use_client, fake_client, tmp_path):
        client = use_client(fake_client(self.fragment()))
        result = runner.invoke(main.app, ["format-standup", "x", "-o", str(tmp_path)])
        assert result.exit_code == 1
        assert "Failed to format standup!" in result.output
        assert "is a directory" in result.output
        assert client.calls == []

    def test_model_failure(self, use_client, failing_client, tmp_path):
        use_client(failing_client)
        result = runner.invoke(main.app, ["format-standup", "x", "-o", str(tmp_path / "job.txt")])
        assert result.exit_code == 1
        assert not (tmp_path / "job.txt").exists()


class TestToday:
    def test_prints_todays_block(self, tmp_path):
        path = tmp_path / "job.txt"
        path.write_text(
            "Updates [01/01/2000 - Saturday]:-\nOld:\n- ancient\n\n"
            f"Updates [{today_label()}]:-\nHuntgate:\n- Fixed bug",
            encoding="utf-8",
        )
        result = runner.invoke(main.app, ["today", "-o", str(path)])
        assert result.exit_code == 0
        assert "- Fixed bug" in result.output
        assert "ancient" not in result.output

    def test_nothing_for_today(self, tmp_path):
        result = runner.invoke(main.app, ["today", "-o", str(tmp_path / "missing.txt")])
        assert result.exit_code == 0
        assert "No updates for today" in result.output

    def test_directory_is_rejected(self, tmp_path):
        result = runner.invoke(main.app, ["today", "-o", str(tmp_path)])
        assert result.exit_code == 1


class TestGlobalOptions:
    def test_version(self):
        result = runner.invoke(main.app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_configuration(self, monkeypatch):
        monkeypatch.setenv("DEVAI_TEMPERATURE", "warm")
        result = runner.invoke(main.app, ["today", "-o", "job.txt"])
        assert result.exit_code == 1
        assert "Invalid configuration!" in result.output
