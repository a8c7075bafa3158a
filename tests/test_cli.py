from __future__ import annotations

import pytest

import microuid.cli as cli
from microuid.codec import ALPHABET, generate
from microuid.serialization import json_decode


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MICROUID_LENGTH", "MICROUID_SEPARATOR", "MICROUID_TIMEZONE"):
        monkeypatch.delenv(name, raising=False)


def test_generate_prints_requested_count(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["generate", "--count", "3", "--length", "12", "--no-separator"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    for line in lines:
        assert len(line) == 12
        assert set(line) <= set(ALPHABET)


def test_generate_uses_separator_by_default(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["generate"]) == 0
    line = capsys.readouterr().out.strip()
    assert [len(group) for group in line.split("-")] == [3, 4, 3]


def test_generate_reads_defaults_from_environment(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("MICROUID_LENGTH", "14")
    monkeypatch.setenv("MICROUID_SEPARATOR", "false")
    assert cli.main(["generate"]) == 0
    line = capsys.readouterr().out.strip()
    assert len(line) == 14
    assert "-" not in line


def test_generate_reports_invalid_length(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["generate", "--length", "5"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert json_decode(captured.err.strip().encode())["error"]["type"] == "InvalidLength"


def test_validate_prints_one_result_per_uid(capsys: pytest.CaptureFixture[str]) -> None:
    uid = generate()
    assert cli.main(["validate", uid, "not-a-uid", "--timezone", "UTC"]) == 1
    results = [json_decode(line.encode()) for line in capsys.readouterr().out.splitlines()]
    assert results[0]["uid"] == uid
    assert results[1] == {"uid": "not-a-uid", "valid": False, "timestamp": None}


def test_validate_succeeds_for_past_identifiers(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["validate", "18888bc118", "188-88bc-118"]) == 0
    results = [json_decode(line.encode()) for line in capsys.readouterr().out.splitlines()]
    assert all(result["valid"] for result in results)
    assert results[0]["timestamp"] == "2024-12-31T20:01:40-04:00"


def test_validate_reports_unknown_timezone(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["validate", "18888bc118", "--timezone", "Nope/Zone"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    error = json_decode(captured.err.strip().encode())["error"]
    assert error["type"] == "ConfigurationError"
    assert "Nope/Zone" in error["detail"]


@pytest.mark.parametrize(
    ("name", "value"),
    [("MICROUID_LENGTH", "5"), ("MICROUID_LENGTH", "ten"), ("MICROUID_TIMEZONE", "Nope/Zone")],
)
def test_invalid_environment_is_reported(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)
    assert cli.main(["validate", "18888bc118"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    error = json_decode(captured.err.strip().encode())["error"]
    assert error["type"] == "ConfigurationError"
    assert "MICROUID_" in error["detail"]
