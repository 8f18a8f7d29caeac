"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service
or runs one import from a request file.
"""

import argparse
import json
from dataclasses import replace
from pathlib import Path

import uvicorn
from pydantic import ValidationError

from actual_importer.api.routers.ledger import api_open_ledger_client
from actual_importer.api.schemas import ApiImportRequestPayload, api_resolve_ledger_config, api_serialize_import_result
from actual_importer.bootstrap import (
    bootstrap_create_application,
    bootstrap_create_import_orchestrator,
    bootstrap_create_ledger_client_factory,
)
from actual_importer.config import AppSettings, config_load_settings
from actual_importer.jobs import GroupImportError, ImportConfigurationError
from actual_importer.logging_setup import configure_logging, get_logger

logger = get_logger(__name__)


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with status 1 when an import run fails.
    """

    argument_parser = argparse.ArgumentParser(description="Actual importer runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "import-run"),
        help="Runtime command: `api` starts server, `import-run` executes one import request file",
        type=str,
    )
    argument_parser.add_argument(
        "--request",
        dest="request_path",
        type=Path,
        help="Import request JSON file for `import-run` (same shape as POST /api/import)",
    )
    argument_parser.add_argument(
        "--live",
        dest="live",
        action="store_true",
        help="Post transactions to Actual for `import-run`; dry-run otherwise",
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    configure_logging(settings.log_level)

    if parsed_arguments.command == "import-run":
        if parsed_arguments.request_path is None:
            argument_parser.error("--request is required for import-run")
        exit_code = main_run_import_file(
            settings=settings,
            request_path=parsed_arguments.request_path,
            live=parsed_arguments.live,
        )
        if exit_code != 0:
            raise SystemExit(exit_code)
        return

    application = bootstrap_create_application(settings)
    uvicorn.run(
        application,
        host=settings.app_host,
        port=settings.app_port,
    )


def main_run_import_file(settings: AppSettings, request_path: Path, live: bool) -> int:
    """Run one import request read from a JSON file and print the result.

    Args:
        settings: Validated runtime settings.
        request_path: Path to the request JSON file.
        live: Whether transactions are posted to Actual.

    Returns:
        int: Process exit status, 0 on success and 1 on failure.

    Raises:
        OSError: Raised when the request file cannot be read.
    """

    try:
        payload = ApiImportRequestPayload.model_validate(json.loads(request_path.read_text(encoding="utf-8")))
    except (ValueError, ValidationError) as error:
        logger.error("Invalid import request file %s: %s", request_path, error)
        return 1

    import_request = replace(payload.api_to_import_request(), dry_run=not live)

    ledger_client = None
    if live:
        ledger_client = api_open_ledger_client(
            settings,
            bootstrap_create_ledger_client_factory(settings),
            api_resolve_ledger_config(payload.actual_config, settings),
        )

    orchestrator = bootstrap_create_import_orchestrator(settings)
    try:
        import_result = orchestrator.job_execute_import(import_request, ledger_client)
    except ImportConfigurationError as error:
        logger.error("Import configuration error: %s", error)
        return 1
    except GroupImportError as error:
        logger.error("%s Details: %s", error, error.detail)
        return 1
    finally:
        if ledger_client is not None:
            ledger_client.adapter_close()

    print(json.dumps(api_serialize_import_result(import_result), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    main()
