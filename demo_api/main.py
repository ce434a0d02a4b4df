"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import argparse

import uvicorn

from demo_api.bootstrap import bootstrap_create_application
from demo_api.config import config_load_settings


def main() -> None:
    """Run the API server with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="Demo API runtime entrypoint")
    argument_parser.add_argument(
        "--host",
        dest="host",
        type=str,
        help="Optional bind host override for APPLICATION_HOST",
    )
    argument_parser.add_argument(
        "--port",
        dest="port",
        type=int,
        help="Optional bind port override for APPLICATION_PORT",
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    application = bootstrap_create_application(settings=settings)
    uvicorn.run(
        application,
        host=parsed_arguments.host or settings.application_host,
        port=parsed_arguments.port or settings.application_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
