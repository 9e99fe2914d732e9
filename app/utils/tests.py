from typing import Any, Callable, Dict, Optional

import httpx
from fastapi import FastAPI

from api.dependencies.rate_limits import setup_rate_limiter


def create_test_app(
    routers,
    overrides: Optional[Dict[Callable[..., Any], Any]] = None,
    middlewares=None,
) -> FastAPI:
    """
    Create a FastAPI test application with the given routers.

    Args:
        routers: A router or list of routers to include.
        overrides: Optional mapping of provider function -> value to inject
            in its place (e.g. {get_settings: fake_settings}).
        middlewares: Optional list of (middleware_class, config_dict) tuples.

    Returns:
        FastAPI: A configured FastAPI application.

    Example:
        app = create_test_app(webhooks_router, overrides={get_settings: settings})
    """
    app = FastAPI()
    setup_rate_limiter(app)

    for provider, value in (overrides or {}).items():
        app.dependency_overrides[provider] = _returning(value)

    if middlewares:
        for middleware_class, middleware_config in middlewares:
            app.add_middleware(middleware_class, **middleware_config)

    if not isinstance(routers, list):
        routers = [routers]
    for router in routers:
        app.include_router(router)

    return app


def _returning(value):
    def override():
        return value

    return override


async def rate_limiting_helper(
    app,
    endpoint: str,
    request_limit: int,
    method: str = "get",
    expected_status: int = 200,
    headers: Optional[dict] = None,
):
    """
    Send ``request_limit`` requests to an endpoint, then assert the next one
    is rejected with the rate limit response.
    """
    transport = httpx.ASGITransport(app=app)
    headers = headers or {}

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        http_method = getattr(client, method.lower())

        for i in range(request_limit):
            response = await http_method(endpoint, headers=headers)
            assert (
                response.status_code == expected_status
            ), f"Request {i+1} failed with status {response.status_code}"

        response = await http_method(endpoint, headers=headers)
        assert response.status_code == 429, "Expected rate limiting to trigger"
        assert response.json() == {"message": "Rate limit exceeded"}
