"""
Lambda handler for direct invocation of the bucket operations

Expects {"operation": ..., ...} payloads, see DirectInvocationRequest.
"""

import traceback
from typing import Any
from aws_lambda_powertools.utilities.typing import LambdaContext
from botocore.exceptions import BotoCoreError, ClientError

from bucket_sync.core.config import logger
from bucket_sync.core.types import (
    DirectInvocationResponse,
    create_error_response,
    create_result_response,
)
from bucket_sync.services.exceptions import ConfigurationError
from bucket_sync.services.folder_copy import copy_folder
from bucket_sync.services.folder_download import fetch_folder
from bucket_sync.services.object_upload import save_object

REQUIRED_FIELDS = {
    "fetch_folder": ("prefix", "local_dir"),
    "copy_folder": ("source_prefix", "destination_prefix"),
    "save_object": ("prefix", "relative_path", "content"),
}


def validate_request(event: dict[str, Any]) -> str | None:
    """returns an error message for a malformed payload, None when it is usable"""
    if not isinstance(event, dict):
        return "Request must be a JSON object"

    operation = event.get("operation")
    if not isinstance(operation, str) or operation not in REQUIRED_FIELDS:
        return f"Unknown operation: {operation}"

    missing = [name for name in REQUIRED_FIELDS[operation] if not isinstance(event.get(name), str)]
    if missing:
        return f"Missing required fields for {operation}: {', '.join(missing)}"
    return None


def dispatch(event: dict[str, Any]) -> DirectInvocationResponse:
    operation = event["operation"]

    if operation == "fetch_folder":
        result = fetch_folder(event["prefix"], event["local_dir"])
        return create_result_response(operation, result)

    if operation == "copy_folder":
        result = copy_folder(event["source_prefix"], event["destination_prefix"], event.get("continuation_token"))
        return create_result_response(operation, result)

    key = f"{event['prefix']}{event['relative_path']}"
    save_object(event["prefix"], event["relative_path"], event["content"])
    return {"statusCode": 200, "response": {"operation": operation, "status": "success", "key": key}}


@logger.inject_lambda_context(clear_state=True)
def handler(event: dict[str, Any], context: LambdaContext) -> DirectInvocationResponse:
    """
    Runs one of fetch_folder, copy_folder or save_object.
    200 on success, 207 on partial failure, 400 for bad payloads, 500 otherwise.
    """
    event = event or {}

    error_message = validate_request(event)
    if error_message:
        logger.warning("Invalid request", extra={"error": error_message})
        return create_error_response(400, error_message)

    # content is never logged, only where it goes
    logger.info(
        "Direct invocation",
        extra={name: event[name] for name in ("operation", *REQUIRED_FIELDS[event["operation"]]) if name != "content"},
    )

    try:
        return dispatch(event)
    except ConfigurationError as e:
        logger.error("Configuration error", extra={"error": traceback.format_exc()})
        return create_error_response(500, str(e))
    except (ClientError, BotoCoreError) as e:
        logger.error(f"AWS service error: {str(e)}", extra={"operation": event["operation"]})
        return create_error_response(500, str(e))
