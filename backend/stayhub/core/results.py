"""Translate simulated-call failures into HTTP errors."""

from fastapi import HTTPException, status

from stayhub.services.processing import Err

_STATUS_BY_CODE = {
    "rejected": status.HTTP_401_UNAUTHORIZED,
    "failed": status.HTTP_503_SERVICE_UNAVAILABLE,
    "timeout": status.HTTP_504_GATEWAY_TIMEOUT,
}


def http_error(err: Err, rejected_status: int = status.HTTP_401_UNAUTHORIZED) -> HTTPException:
    """HTTPException for a failed call; retryable failures carry a Retry-After hint."""
    code = rejected_status if err.code == "rejected" else _STATUS_BY_CODE.get(
        err.code, status.HTTP_503_SERVICE_UNAVAILABLE
    )
    headers = {"Retry-After": "1"} if err.retryable else None
    return HTTPException(status_code=code, detail=err.reason, headers=headers)
