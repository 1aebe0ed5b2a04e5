"""Tests for the command-line interface."""

import json

from typer.testing import CliRunner

from dealiq.cli import app

runner = CliRunner()


def test_analyze_json():
    result = runner.invoke(
        app, ["analyze", "--price", "200000", "--repair", "50000", "--arv", "350000", "--json"]
    )
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["netProfit"] == 62_000
    assert data["mao"] == 195_000
    assert data["hasRentalData"] is False


def test_analyze_with_criteria_options():
    result = runner.invoke(
        app,
        [
            "analyze", "--arv", "300000", "--repair", "40000",
            "--profit-pct", "30", "--commission-pct", "8", "--json",
        ],
    )
    assert result.exit_code == 0
    assert json.loads(result.output)["mao"] == 146_000


def test_analyze_with_rental_options():
    result = runner.invoke(
        app,
        [
            "analyze", "--price", "200000", "--repair", "50000", "--arv", "350000",
            "--rent", "2000", "--loan", "160000", "--json",
        ],
    )
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["monthlyCashFlow"] == 126
    assert data["hasRentalData"] is True


def test_analyze_table_output():
    result = runner.invoke(
        app, ["analyze", "--price", "200000", "--arv", "350000", "--rent", "2000"]
    )
    assert result.exit_code == 0
    assert "Deal Metrics" in result.output
    assert "Net Profit" in result.output


def test_invalid_config_exits(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text("[rental]\nmonthly_rnet = 1\n")
    result = runner.invoke(app, ["analyze", "--price", "1", "--config", str(path)])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_config_show():
    result = runner.invoke(app, ["config-show"])
    assert result.exit_code == 0
    assert "interest_rate" in result.output
