"""CLI command tests using Click CliRunner.

Each test runs against an explicit config file so the user's own config is
never read.
"""

import json

import pytest
from click.testing import CliRunner

from cli.commands.shell import run_command
from cli.main import cli
from cli.utils import console, link_fragment
from lab import Laboratory

NEG_ZERO = "Object.is(#[-0].at(0), -0)"


@pytest.fixture
def runner(monkeypatch):
    # Wide console so table cells are not wrapped mid-phrase
    monkeypatch.setattr(console, "width", 200)
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "rtlab.yaml"
    path.write_text(
        "share:\n"
        "  base_url: https://example.test/lab/\n"
        "shuffle:\n"
        "  seed: 11\n"
    )
    return path


@pytest.fixture
def invoke(runner, config_file):
    def _invoke(*args, **kwargs):
        return runner.invoke(cli, ["--config", str(config_file), *args], **kwargs)

    return _invoke


class TestTable:
    def test_defaults(self, invoke):
        result = invoke("table")
        assert result.exit_code == 0
        assert "typeof Box" in result.output
        assert "complexity moved to ecosystem" in result.output
        assert "typeof Box === 'undefined'" in result.output

    def test_details(self, invoke):
        result = invoke("table", "--details")
        assert result.exit_code == 0
        assert "symbols-as-weakmap-keys" in result.output

    def test_link_issues_printed(self, invoke):
        result = invoke("table", "--link", 'https://example.test/lab/#{"typeof Box":"object","bogus":1}')
        assert result.exit_code == 0
        assert "Unknown item in url: 'bogus'" in result.output
        assert "was not set by the URL" in result.output


class TestSet:
    def test_set_boolean(self, invoke):
        result = invoke("set", f"{NEG_ZERO}=false")
        assert result.exit_code == 0
        assert f"Set {NEG_ZERO} = false" in result.output
        assert "no negative zero" in result.output
        assert "Link: https://example.test/lab/#" in result.output

    def test_rejected_value(self, invoke):
        result = invoke("set", "typeof Box=function")
        assert result.exit_code == 0
        assert "Rejected" in result.output

    def test_unchanged_value(self, invoke):
        result = invoke("set", "typeof Box=undefined")
        assert result.exit_code == 0
        assert "Unchanged" in result.output

    def test_unavailable_not_editable(self, invoke):
        result = invoke("set", "typeof #[Box({})]=object")
        assert result.exit_code == 0
        assert "Not editable" in result.output

    def test_available_after_box_set(self, invoke):
        result = invoke("set", "typeof Box=object", "typeof #[Box({})]=\"object\"")
        assert result.exit_code == 0
        assert "Not editable" not in result.output
        assert 'Set typeof #[Box({})] = "object"' in result.output

    def test_bad_assignment(self, invoke):
        result = invoke("set", "typeof Box")
        assert result.exit_code == 1


class TestLinks:
    def test_bare_fragment_round_trip(self, invoke):
        lab = Laboratory()
        lab.select("typeof Box", "box")
        fragment = lab.save_link().split("#", 1)[1]
        assert "#" in fragment

        result = invoke("export", "--link", fragment)
        assert result.exit_code == 0
        state = json.loads(result.stdout)
        assert state["typeof Box"] == "box"
        assert state["typeof #[]"] == "tuple"

    def test_full_url_round_trip(self, invoke):
        lab = Laboratory(base_url="https://example.test/lab/")
        lab.select("typeof Box", "box")
        result = invoke("export", "--link", lab.save_link())
        assert json.loads(result.stdout) == lab.state()

    def test_link_fragment(self):
        assert link_fragment("https://x.test/#%7B%22a%22:1%7D") == "%7B%22a%22:1%7D"
        assert link_fragment("%7B%22typeof%20#[]%22:1%7D") == "%7B%22typeof%20#[]%22:1%7D"
        assert link_fragment('#{"typeof #[]":1}') == '{"typeof #[]":1}'
        assert link_fragment("https://x.test/#") == ""
        assert link_fragment("") == ""


class TestShuffle:
    def test_shuffle(self, invoke):
        result = invoke("shuffle", "--seed", "3")
        assert result.exit_code == 0
        assert "Link:" in result.output


class TestExportImport:
    def test_export_json(self, invoke):
        result = invoke("export")
        assert result.exit_code == 0
        state = json.loads(result.stdout)
        assert state["typeof Box"] == "undefined"
        assert state[NEG_ZERO] is True
        assert "typeof #[Box({})]" not in state

    def test_export_from_link(self, invoke):
        result = invoke("export", "--link", '{"typeof Box":"box"}')
        assert json.loads(result.stdout)["typeof Box"] == "box"

    def test_export_url(self, invoke):
        result = invoke("export", "--url")
        assert result.exit_code == 0
        assert result.stdout.startswith("https://example.test/lab/#%7B")

    def test_export_to_file(self, invoke, tmp_path):
        out = tmp_path / "state.json"
        result = invoke("export", "-o", str(out))
        assert result.exit_code == 0
        assert "Exported" in result.output
        assert json.loads(out.read_text())["typeof #[]"] == "tuple"

    def test_import_file(self, invoke, tmp_path):
        src = tmp_path / "in.json"
        src.write_text(json.dumps({"typeof #[]": "object"}))
        result = invoke("import", str(src))
        assert result.exit_code == 0
        assert "Link:" in result.output

    def test_import_stdin_malformed(self, invoke):
        result = invoke("import", "-", input="{not json")
        assert result.exit_code == 1
        assert "Could not parse" in result.output

    def test_import_empty(self, invoke):
        result = invoke("import", "-", input="  ")
        assert result.exit_code == 0
        assert "Nothing to import" in result.output


class TestReport:
    def test_single_decision(self, invoke):
        result = invoke("report", "Object.is(#[+0], #[-0])")
        assert result.exit_code == 0
        assert "impossible equality" in result.output
        assert "Object.is semantics" in result.output

    def test_full_report(self, invoke):
        result = invoke("report")
        assert result.exit_code == 0
        assert "Box(42) // throws?" in result.output

    def test_unknown_decision(self, invoke):
        result = invoke("report", "typeof Foo")
        assert result.exit_code == 1


class TestShell:
    def test_session(self, invoke):
        script = "\n".join([
            "set typeof Box=object",
            "set typeof Box=object",
            "export",
            "report typeof #[]",
            "frobnicate",
            "quit",
        ])
        result = invoke("shell", input=script + "\n")
        assert result.exit_code == 0
        assert '"typeof Box": "object"' in result.output
        assert "No change" in result.output
        assert "slot sensitive typeof" in result.output
        assert "Unknown command" in result.output

    def test_bare_report_covers_catalogue(self, runner, capsys):
        assert run_command(Laboratory(), "report") is True
        out = capsys.readouterr().out
        assert "Unknown decision" not in out
        assert "Box(42) // throws?" in out
        assert "impossible equality" in out

    def test_link_issues_precede_table(self, invoke):
        result = invoke("shell", "--link", '{"typeof Box":"box","bogus":1}', input="quit\n")
        assert result.exit_code == 0
        assert result.output.index("Unknown item in url: 'bogus'") < result.output.index("Record and Tuple Laboratory")

    def test_eof_exits(self, invoke):
        result = invoke("shell", input="")
        assert result.exit_code == 0


class TestConfigErrors:
    def test_invalid_yaml(self, runner, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("share: [unclosed\n")
        result = runner.invoke(cli, ["--config", str(bad), "table"])
        assert result.exit_code == 1
        assert "Config error" in result.output

    def test_invalid_value(self, runner, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("logging:\n  level: LOUD\n")
        result = runner.invoke(cli, ["--config", str(bad), "table"])
        assert result.exit_code == 1
