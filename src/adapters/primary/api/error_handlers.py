from fastapi import Request, status
from fastapi.responses import JSONResponse
from src.domain.workflow.exceptions import WorkflowException
from src.shared.logger import get_logger

logger = get_logger(__name__)

# Error codes not listed here map to 400
STATUS_BY_ERROR_CODE = {
    "WORKFLOW_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "TEMPLATE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "WORKFLOW_ACCESS_DENIED": status.HTTP_403_FORBIDDEN,
    "WORKFLOW_INACTIVE": status.HTTP_409_CONFLICT,
    "WARNINGS_NOT_CONFIRMED": status.HTTP_409_CONFLICT,
    "WORKFLOW_VALIDATION_FAILED": status.HTTP_422_UNPROCESSABLE_CONTENT,
    "WORKFLOW_TOO_LARGE": status.HTTP_422_UNPROCESSABLE_CONTENT,
}

async def workflow_exception_handler(request: Request, exc: WorkflowException):
    """
    Global exception handler for WorkflowException and its subclasses.
    Converts domain exceptions to structured JSON responses.
    """
    status_code = STATUS_BY_ERROR_CODE.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    logger.warning(
        "workflow_error",
        error_code=exc.error_code,
        message=exc.message,
        status_code=status_code,
        path=request.url.path
    )

    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "message": exc.message,
                "error_code": exc.error_code,
                "context": exc.context
            }
        }
    )

async def general_exception_handler(request: Request, exc: Exception):
    """
    Fallback handler for all unhandled exceptions.
    """
    logger.exception("unhandled_exception", path=request.url.path)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "message": "Internal processing error",
                "error_code": "INTERNAL_SERVER_ERROR",
                "context": {"type": str(type(exc).__name__)}
            }
        }
    )
