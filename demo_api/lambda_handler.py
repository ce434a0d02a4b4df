"""AWS Lambda entry point.

Mangum translates API Gateway and ALB events into ASGI requests for the
FastAPI application and converts responses back into the event format.
The handler is built once per process at import time; a configuration
failure raises here and fails the cold start instead of the first request.
"""

from fastapi import FastAPI
from mangum import Mangum

from demo_api.bootstrap import bootstrap_create_application


def lambda_create_handler(application: FastAPI) -> Mangum:
    """Wrap an application in a Lambda-compatible ASGI adapter.

    Args:
        application: Fully initialized FastAPI application.

    Returns:
        Mangum: Callable `handler(event, context)` for the Lambda runtime.

    Raises:
        ValueError: Raised when application is None.
    """

    if application is None:
        raise ValueError("application must not be None")
    return Mangum(application, lifespan="off")


handler = lambda_create_handler(bootstrap_create_application())
