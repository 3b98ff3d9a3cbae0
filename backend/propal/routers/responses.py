"""
HTTP status mapping for operation results.
"""
from fastapi import Response, status

from propal.schemas.results import ActionResult

STATUS_BY_KIND = {
    "ValidationFailed": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "DuplicateKey": status.HTTP_409_CONFLICT,
    "NotFound": status.HTTP_404_NOT_FOUND,
    "InvalidCredentials": status.HTTP_401_UNAUTHORIZED,
    "InvalidResetToken": status.HTTP_400_BAD_REQUEST,
    "InitializationFailed": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "StoreUnavailable": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def with_status(
    response: Response,
    result: ActionResult,
    success_status: int = status.HTTP_200_OK,
) -> ActionResult:
    """Set the response status from the result and hand the result back."""
    if result.success:
        response.status_code = success_status
    else:
        response.status_code = STATUS_BY_KIND.get(
            result.kind, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return result
