"""Request authentication dependencies.

Ghost webhooks carry a shared secret in the ``secret`` query parameter and
the administrative endpoints a Bearer token. Both are compared in constant
time and an unset secret rejects every request.
"""

from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException, Query, Request

from infrastructure.logging import get_module_logger
from infrastructure.security import extract_bearer_token, timing_safe_equal
from infrastructure.services import SettingsDep

logger = get_module_logger()


def require_webhook_secret(
    request: Request,
    settings: SettingsDep,
    secret: Annotated[Optional[str], Query()] = None,
) -> None:
    if not timing_safe_equal(secret, settings.server.WEBHOOK_SECRET):
        logger.warning("webhook_unauthorized", path=request.url.path)
        raise HTTPException(status_code=401, detail="Unauthorized")


def require_admin_token(
    request: Request,
    settings: SettingsDep,
    authorization: Annotated[Optional[str], Header()] = None,
) -> None:
    token = extract_bearer_token(authorization)
    if not timing_safe_equal(token, settings.server.ADMIN_SECRET):
        logger.warning(
            "admin_unauthorized",
            path=request.url.path,
            has_auth_header=bool(authorization),
        )
        raise HTTPException(status_code=401, detail="Unauthorized")


WebhookAuth = Depends(require_webhook_secret)
AdminAuth = Depends(require_admin_token)
