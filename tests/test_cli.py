from pathlib import Path
import json

import pytest
from click.testing import CliRunner

from huffcodec import __version__
from huffcodec.cli import cli


ABC = ["--code", "a=0", "--code", "b=10", "--code", "c=11"]


@pytest.fixture()
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def codebook_file(tmp_path: Path) -> Path:
    p = tmp_path / "codes.json"
    p.write_text(json.dumps({"a": "0", "b": "10", "c": "11"}), encoding="utf-8")
    return p


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_encode_inline_codes(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["encode", *ABC, "abc"])
    assert result.exit_code == 0
    assert result.output.strip() == "01011"


def test_encode_codebook_file(cli_runner: CliRunner, codebook_file: Path):
    result = cli_runner.invoke(cli, ["encode", "--codebook", str(codebook_file), "cab"])
    assert result.exit_code == 0
    assert result.output.strip() == "11010"


def test_encode_missing_symbol_fails(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["encode", *ABC, "abz"])
    assert result.exit_code != 0
    assert "'z'" in result.output


def test_encode_without_codes_fails(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["encode", "abc"])
    assert result.exit_code != 0


def test_decode_round_trip(cli_runner: CliRunner, codebook_file: Path):
    result = cli_runner.invoke(cli, ["decode", "--codebook", str(codebook_file), "01011"])
    assert result.exit_code == 0
    assert result.output.strip() == "abc"


def test_decode_truncated_fails(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["decode", *ABC, "0101"])
    assert result.exit_code != 0
    assert "--lenient" in result.output


def test_decode_truncated_lenient(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["decode", *ABC, "--lenient", "0101"])
    assert result.exit_code == 0
    assert result.output.strip().splitlines()[-1] == "ab"


def test_decode_invalid_bits(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["decode", *ABC, "01x"])
    assert result.exit_code != 0


def test_inspect_reports_validity(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["inspect", *ABC])
    assert result.exit_code == 0
    info = json.loads(result.output)
    assert info["entries"] == 3
    assert info["prefix_free"] is True
    assert info["trie_valid"] is True
    assert info["trie_depth"] == 2
    assert info["codes"] == {"a": "0", "b": "10", "c": "11"}


def test_inspect_incomplete_code(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["inspect", "--code", "c=0"])
    assert result.exit_code == 0
    info = json.loads(result.output)
    assert info["trie_valid"] is False
