"""Regression tests for the `import-run` command file execution."""

import json
from pathlib import Path

import pytest

from actual_importer.config import AppSettings
from actual_importer.main import main_run_import_file

_REQUEST_PAYLOAD = {
    "rows": [
        {"Datum": "2024-01-01", "Bedrag": "1.234,56", "Omschrijving": "Salaris"},
        {"Datum": "2024-01-02", "Bedrag": "", "Omschrijving": "Leeg"},
    ],
    "mapping": {
        "date": {"column": "Datum"},
        "amount": {"column": "Bedrag"},
        "payee": {"type": "merge", "columns": ["Omschrijving", "Datum"], "separator": " / "},
    },
    "accountMapping": {"<all rows>": "acc-checking"},
    "dryRun": False,
}


def _write_request(tmp_path: Path, payload: object) -> Path:
    request_path = tmp_path / "request.json"
    request_path.write_text(json.dumps(payload), encoding="utf-8")
    return request_path


def test_main_run_import_file_defaults_to_dry_run(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Print a dry-run summary unless `--live` is passed, ignoring file `dryRun`.

    Args:
        tmp_path: Pytest temporary directory fixture.
        capsys: Pytest output capture fixture.

    Returns:
        None: Assertions validate printed summary.

    Raises:
        AssertionError: Raised when summary or exit status is incorrect.
    """

    exit_code = main_run_import_file(
        settings=AppSettings(environment_name="test", actual_server_url=""),
        request_path=_write_request(tmp_path, _REQUEST_PAYLOAD),
        live=False,
    )

    printed_result = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert printed_result["dryRun"] is True
    assert printed_result["totalInvalid"] == 1
    assert printed_result["groups"][0]["preview"][0] == {
        "date": "2024-01-01",
        "payee": "Salaris / 2024-01-01",
        "notes": "",
        "amount": 1234.56,
    }


def test_main_run_import_file_live_in_mock_mode(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Run a live import against the mock ledger client.

    Args:
        tmp_path: Pytest temporary directory fixture.
        capsys: Pytest output capture fixture.

    Returns:
        None: Assertions validate live mock run.

    Raises:
        AssertionError: Raised when live mock run fails.
    """

    exit_code = main_run_import_file(
        settings=AppSettings(environment_name="test", mock_actual=True),
        request_path=_write_request(tmp_path, _REQUEST_PAYLOAD),
        live=True,
    )

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out)["dryRun"] is False


def test_main_run_import_file_returns_failure_status(tmp_path: Path) -> None:
    """Return status 1 for malformed files and configuration errors.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate failure statuses.

    Raises:
        AssertionError: Raised when failures exit with success.
    """

    malformed_path = tmp_path / "malformed.json"
    malformed_path.write_text("{not json", encoding="utf-8")
    settings = AppSettings(environment_name="test", actual_server_url="")

    assert main_run_import_file(settings=settings, request_path=malformed_path, live=False) == 1
    assert main_run_import_file(settings=settings, request_path=_write_request(tmp_path, {"rows": []}), live=False) == 1
    assert (
        main_run_import_file(settings=settings, request_path=_write_request(tmp_path, _REQUEST_PAYLOAD), live=True)
        == 1
    )
