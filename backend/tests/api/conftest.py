"""Route test fixtures — FastAPI client wired to a mocked EmployeeService.

Invariants:
    - get_employee_service dependency overridden with a MagicMock whose
      service methods are AsyncMocks, so no database is touched
    - Unhandled exceptions surface as 500 responses, not test-side raises

Design Decisions:
    - raise_app_exceptions=False: Starlette re-raises after the catch-all handler
      has sent its 500, and the tests assert on that response
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from httpx import ASGITransport, AsyncClient

from onlineshop.main import app
from onlineshop.services.employee_service import get_employee_service


def _make_mock_service():
    """Create a mock EmployeeService with awaitable methods."""
    service = MagicMock()
    service.get_all_employees = AsyncMock(return_value=[])
    service.get_employee_by_id = AsyncMock()
    service.create_employee = AsyncMock()
    service.update_employee = AsyncMock()
    service.delete_employee = AsyncMock(return_value=None)
    return service


@pytest.fixture
def mock_service():
    return _make_mock_service()


@pytest.fixture
async def client(mock_service):
    """FastAPI test client with the service dependency overridden."""
    app.dependency_overrides[get_employee_service] = lambda: mock_service

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
