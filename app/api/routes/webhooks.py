"""Ghost member webhook receivers.

Ghost is configured with three webhooks: member.added and member.updated
both point at ``/webhook``, member.deleted at ``/webhook/deleted``. Each
URL carries ``?secret=<WEBHOOK_SECRET>``.
"""

import json

from fastapi import APIRouter, HTTPException, Request

from api.dependencies.auth import WebhookAuth
from api.dependencies.rate_limits import WEBHOOK_RATE_LIMIT, get_limiter
from infrastructure.logging import get_module_logger
from infrastructure.services import EventReconcilerDep
from modules.membership.errors import InvalidPayloadError
from modules.membership.events import parse_membership_event

logger = get_module_logger()
router = APIRouter(tags=["Webhooks"], dependencies=[WebhookAuth])
limiter = get_limiter()


async def _handle(request: Request, reconciler: EventReconcilerDep, deleted: bool):
    try:
        payload = json.loads(await request.body())
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("webhook_invalid_json", path=request.url.path, error=str(e))
        raise HTTPException(status_code=400, detail="Invalid JSON") from e

    try:
        event = parse_membership_event(payload, deleted=deleted)
    except InvalidPayloadError as e:
        logger.warning("webhook_invalid_payload", path=request.url.path, error=e.message)
        raise HTTPException(status_code=400, detail=e.message) from e

    logger.info(
        "membership_event_received",
        kind=event.kind.value,
        email=event.email,
        status=event.current_status.value,
        previous_status=(
            event.previous_status.value if event.previous_status else None
        ),
    )

    result = await reconciler.reconcile(event)
    if result.data is not None and result.data.skipped:
        return {"ok": True, "skipped": True, "reason": result.data.reason}
    return {"ok": True}


@router.post("/webhook")
@limiter.limit(WEBHOOK_RATE_LIMIT)
async def handle_member_webhook(request: Request, reconciler: EventReconcilerDep):
    """Handle member.added and member.updated events."""
    return await _handle(request, reconciler, deleted=False)


@router.post("/webhook/deleted")
@limiter.limit(WEBHOOK_RATE_LIMIT)
async def handle_member_deleted_webhook(
    request: Request, reconciler: EventReconcilerDep
):
    """Handle member.deleted events."""
    return await _handle(request, reconciler, deleted=True)
