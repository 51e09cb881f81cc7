"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from cleancity.application.use_cases import InvalidPostError, InvalidReportError, RepositoryError

UNPROCESSABLE = 422


def to_http_exception(exc: Exception) -> HTTPException:
    """Translate a use case error into the matching HTTP error."""

    if isinstance(exc, InvalidReportError):
        return HTTPException(
            status_code=UNPROCESSABLE, detail={"errors": exc.errors}
        )
    if isinstance(exc, InvalidPostError):
        return HTTPException(
            status_code=UNPROCESSABLE,
            detail={"errors": list(exc.errors)},
        )
    if isinstance(exc, PermissionError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))
    if isinstance(exc, RepositoryError):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))

    detail = str(exc)
    if detail.endswith("not found"):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
