import importlib
import json
import warnings
from unittest.mock import MagicMock

import pytest

from src.adapters.primary.api import error_handlers
from src.domain.workflow.exceptions import WorkflowTooLargeError


def request(path="/api/v1/workflows"):
    req = MagicMock()
    req.url.path = path
    return req


def test_status_map_uses_current_starlette_names():
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        importlib.reload(error_handlers)

    assert error_handlers.STATUS_BY_ERROR_CODE["WORKFLOW_VALIDATION_FAILED"] == 422
    assert error_handlers.STATUS_BY_ERROR_CODE["WORKFLOW_TOO_LARGE"] == 422


@pytest.mark.asyncio
async def test_oversized_graph_is_unprocessable():
    exc = WorkflowTooLargeError(node_count=600, max_nodes=500)

    response = await error_handlers.workflow_exception_handler(request(), exc)

    assert response.status_code == 422
    body = json.loads(response.body)
    assert body["error"]["error_code"] == "WORKFLOW_TOO_LARGE"
