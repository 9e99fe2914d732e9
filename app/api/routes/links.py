"""Administrative identity mapping endpoints.

Protected by ``Authorization: Bearer <ADMIN_SECRET>``. These bypass the
membership check and overwrite existing mappings.
"""

from fastapi import APIRouter, HTTPException, Request

from api.dependencies.auth import AdminAuth
from api.dependencies.rate_limits import ADMIN_RATE_LIMIT, get_limiter
from infrastructure.operations import OperationResult, OperationStatus
from infrastructure.services import MappingAdminDep
from models.links import LinkCreateRequest, LinkDeleteRequest

router = APIRouter(tags=["Admin"], dependencies=[AdminAuth])
limiter = get_limiter()

STATUS_CODES = {
    OperationStatus.INVALID_INPUT: 400,
    OperationStatus.NOT_FOUND: 404,
    OperationStatus.CONFLICT: 409,
    OperationStatus.UPSTREAM_UNAVAILABLE: 502,
}


def _raise_for_result(result: OperationResult) -> None:
    if not result.is_success:
        raise HTTPException(
            status_code=STATUS_CODES.get(result.status, 500), detail=result.message
        )


@router.post("/link")
@limiter.limit(ADMIN_RATE_LIMIT)
async def create_link(
    request: Request,  # pylint: disable=unused-argument
    body: LinkCreateRequest,
    admin: MappingAdminDep,
):
    """Map an email to a Discord user id, replacing any existing mapping."""
    result = await admin.create_mapping(body.email, body.discord_user_id)
    _raise_for_result(result)
    return {"ok": True, **result.data}


@router.delete("/link")
@limiter.limit(ADMIN_RATE_LIMIT)
async def delete_link(
    request: Request,  # pylint: disable=unused-argument
    body: LinkDeleteRequest,
    admin: MappingAdminDep,
):
    result = await admin.delete_mapping(body.email)
    _raise_for_result(result)
    return {"ok": True, "email": result.data["email"]}


@router.get("/link/{email}")
@limiter.limit(ADMIN_RATE_LIMIT)
async def get_link(
    request: Request,  # pylint: disable=unused-argument
    email: str,
    admin: MappingAdminDep,
):
    result = await admin.get_mapping(email)
    _raise_for_result(result)
    return result.data
