# tests/test_cli.py
"""
CLI smoke tests.
"""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from asyncontract.catalog import load_catalog
from asyncontract.cli import app
from asyncontract.document.io import read_document

runner = CliRunner()


@pytest.mark.tier1
class TestHelp:
    """Every command loads."""

    def test_root_help(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "AsyncAPI" in result.stdout

    @pytest.mark.parametrize("command", ["catalog", "spec", "contracts"])
    def test_command_help(self, command):
        result = runner.invoke(app, [command, "--help"])

        assert result.exit_code == 0, f"Help failed for '{command}'"


@pytest.mark.tier1
class TestCatalogCommand:
    """asyncontract catalog"""

    def test_writes_catalog(self, tmp_path):
        out = tmp_path / "shop.yaml"

        result = runner.invoke(app, ["catalog", "shopdemo.models", "-o", str(out), "-n", "models"])

        assert result.exit_code == 0, result.stdout
        catalog = load_catalog(out)
        assert catalog.name == "models"
        assert len(catalog) == 4

    def test_rejects_unknown_suffix(self, tmp_path):
        result = runner.invoke(app, ["catalog", "shopdemo", "-o", str(tmp_path / "shop.txt")])

        assert result.exit_code == 1
        assert not (tmp_path / "shop.txt").exists()

    def test_unknown_module(self, tmp_path):
        result = runner.invoke(app, ["catalog", "no_such_module_for_tests", "-o", str(tmp_path / "x.yaml")])

        assert result.exit_code == 1


@pytest.mark.tier1
class TestSpecCommand:
    """asyncontract spec"""

    def test_generates_document(self, tmp_path):
        out = tmp_path / "shop.json"

        result = runner.invoke(
            app,
            [
                "spec",
                "-m",
                "shopdemo",
                "-p",
                "shopdemo.orders.events.*",
                "-p",
                "shopdemo.orders.commands.*=command",
                "-t",
                "shop",
                "--version",
                "2.0.0",
                "-o",
                str(out),
            ],
        )

        assert result.exit_code == 0, result.stdout
        document = read_document(out)
        assert document.info.title == "shop"
        assert document.info.version == "2.0.0"
        assert document.operations["ShipOrderOperation"].action.value == "send"

    def test_values_from_config(self, tmp_path, monkeypatch):
        (tmp_path / "asyncontract.yaml").write_text(
            "server:\n"
            "  module: shopdemo\n"
            "  patterns: [StockEvent]\n"
            "  output: specs/stock.yaml\n"
        )
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["spec"])

        assert result.exit_code == 0, result.stdout
        document = read_document(tmp_path / "specs" / "stock.yaml")
        assert list(document.components.messages) == ["StockReserved", "StockReleased"]

    def test_no_producer(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["spec", "-p", "x.**"])

        assert result.exit_code == 1
        assert "No producer given" in result.stdout

    def test_no_matches_is_not_an_error(self, tmp_path):
        out = tmp_path / "x.yaml"

        result = runner.invoke(app, ["spec", "-m", "shopdemo", "-p", "nothing.**", "-o", str(out)])

        assert result.exit_code == 0
        assert not out.exists()

    def test_unknown_format(self, tmp_path):
        result = runner.invoke(app, ["spec", "-m", "shopdemo", "-p", "x.**", "-f", "xml"])

        assert result.exit_code == 1

    def test_bad_config(self, tmp_path):
        config = tmp_path / "bad.yaml"
        config.write_text("server:\n  nope: 1\n")

        result = runner.invoke(app, ["spec", "-c", str(config)])

        assert result.exit_code == 1


@pytest.mark.tier1
class TestContractsCommand:
    """asyncontract contracts (paths that generate nothing)"""

    def test_no_documents(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["contracts"])

        assert result.exit_code == 0
        assert "No AsyncAPI documents" in result.stdout

    def test_unknown_class_style(self, tmp_path):
        result = runner.invoke(app, ["contracts", str(tmp_path / "a.yaml"), "--class-style", "record"])

        assert result.exit_code == 1

    def test_malformed_document(self, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("asyncapi: [\n")

        result = runner.invoke(app, ["contracts", str(bad), "-o", str(tmp_path / "out")])

        assert result.exit_code == 1


@pytest.mark.tier2
class TestRoundTrip:
    """spec then contracts through the CLI."""

    def test_spec_then_contracts(self, tmp_path):
        spec = tmp_path / "shop.yaml"
        out = tmp_path / "src"

        first = runner.invoke(app, ["spec", "-m", "shopdemo", "-p", "ShipOrder=command", "-o", str(spec)])
        second = runner.invoke(
            app, ["contracts", str(spec), "-o", str(out), "-r", "shopdemo.models", "--class-style", "value"]
        )

        assert first.exit_code == 0, first.stdout
        assert second.exit_code == 0, second.stdout
        generated = out / "shopdemo" / "orders" / "commands" / "generated.py"
        content = generated.read_text()
        assert "class ShipOrder(" in content
        assert "from shopdemo.models import Address\n" in content
        assert not (out / "shopdemo" / "models" / "generated.py").exists()
