"""Ghost Admin API client.

Only the member lookup the relay needs is implemented. Requests are
authenticated with a short-lived HS256 token signed with the Admin API key.
"""

import calendar
import time
from typing import Optional

import httpx
import jwt
from pydantic import ValidationError

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult
from models.ghost import GhostMember
from modules.membership.contracts import MembershipDirectory

logger = get_module_logger()

ADMIN_AUDIENCE = "/admin/"
MEMBERS_PATH = "/ghost/api/admin/members/"
USER_AGENT = "GhostDiscordRelay/1.0"


def epoch_seconds():
    return calendar.timegm(time.gmtime())


def email_filter(email: str) -> str:
    """NQL filter matching one member by email, with quotes escaped."""
    escaped = email.replace("\\", "\\\\").replace("'", "\\'")
    return f"email:'{escaped}'"


def create_admin_token(admin_api_key: str, ttl_seconds: int = 300) -> str:
    """
    Generate a JWT for the Ghost Admin API

    The Admin API key has the form ``<id>:<hex secret>``. The token header
    carries the key id as ``kid`` and is signed with the decoded secret.

    Claims are:
    iss: the key id
    iat: epoch seconds for the token (UTC)
    exp: iat + ttl_seconds
    aud: /admin/

    Raises ValueError if the key is missing or malformed.
    """
    if not admin_api_key or ":" not in admin_api_key:
        logger.error("ghost_token_creation_failed", error="Malformed admin API key")
        raise ValueError("GHOST_ADMIN_API_KEY must have the form <id>:<secret>")

    key_id, secret = admin_api_key.split(":", 1)
    try:
        signing_key = bytes.fromhex(secret)
    except ValueError as e:
        logger.error("ghost_token_creation_failed", error="Secret is not hex")
        raise ValueError("GHOST_ADMIN_API_KEY secret must be hex encoded") from e

    iat = epoch_seconds()
    claims = {"iss": key_id, "iat": iat, "exp": iat + ttl_seconds, "aud": ADMIN_AUDIENCE}
    headers = {"typ": "JWT", "alg": "HS256", "kid": key_id}
    return jwt.encode(payload=claims, key=signing_key, headers=headers)


class GhostClient(MembershipDirectory):
    """Looks members up through the Ghost Admin API.

    Attributes:
        base_url: Ghost site URL, without trailing slash
        admin_api_key: ``<id>:<hex secret>`` Admin API key
        http_client: shared httpx.AsyncClient
        token_ttl: lifetime of each request token in seconds
    """

    def __init__(
        self,
        base_url: Optional[str],
        admin_api_key: Optional[str],
        http_client: httpx.AsyncClient,
        token_ttl: int = 300,
    ) -> None:
        self.base_url = (base_url or "").rstrip("/")
        self.admin_api_key = admin_api_key
        self.http_client = http_client
        self.token_ttl = token_ttl

    async def get_member(self, email: str) -> OperationResult:
        if not self.base_url:
            logger.error("ghost_lookup_failed", error="GHOST_URL is missing")
            return OperationResult.upstream_unavailable("Ghost API is not configured.")
        try:
            token = create_admin_token(self.admin_api_key or "", self.token_ttl)
        except ValueError:
            return OperationResult.upstream_unavailable("Ghost API is not configured.")

        try:
            response = await self.http_client.get(
                f"{self.base_url}{MEMBERS_PATH}",
                params={"filter": email_filter(email), "limit": 1},
                headers={
                    "Authorization": f"Ghost {token}",
                    "User-Agent": USER_AGENT,
                    "Accept": "application/json",
                },
            )
        except httpx.HTTPError as e:
            logger.error("ghost_lookup_failed", email=email, error=str(e))
            return OperationResult.upstream_unavailable("Unable to reach Ghost API.")

        if not response.is_success:
            logger.error(
                "ghost_lookup_failed",
                email=email,
                status_code=response.status_code,
                body=response.text,
            )
            return OperationResult.upstream_unavailable(
                f"Ghost API returned {response.status_code}."
            )

        try:
            members = response.json().get("members") or []
            if not members:
                return OperationResult.not_found("Member not found")
            member = GhostMember.model_validate(members[0])
        except (ValueError, AttributeError, ValidationError) as e:
            logger.error("ghost_lookup_unexpected_response", email=email, error=str(e))
            return OperationResult.upstream_unavailable(
                "Ghost API returned an unexpected response."
            )

        logger.info("ghost_member_found", email=email, status=member.status.value)
        return OperationResult.success(data=member)
