"""Discord interactions endpoint for the /link and /unlink slash commands."""

import json

from fastapi import APIRouter, HTTPException, Request
from pydantic import ValidationError

from infrastructure.logging import get_module_logger
from infrastructure.security import (
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    verify_discord_signature,
)
from infrastructure.services import LinkManagerDep, SettingsDep
from models.discord import Interaction, InteractionResponseType, InteractionType
from modules.membership.commands import handle_command

logger = get_module_logger()
router = APIRouter(tags=["Discord"])


@router.post("/discord")
async def handle_interaction(
    request: Request, settings: SettingsDep, manager: LinkManagerDep
):
    """Verify and dispatch a Discord interaction.

    Discord rejects the endpoint configuration unless invalid signatures get
    a 401, so verification runs before anything reads the body as JSON.
    """
    body = await request.body()
    if not verify_discord_signature(
        settings.discord.DISCORD_PUBLIC_KEY,
        request.headers.get(SIGNATURE_HEADER),
        request.headers.get(TIMESTAMP_HEADER),
        body,
    ):
        raise HTTPException(status_code=401, detail="Invalid request signature")

    try:
        interaction = Interaction.model_validate(json.loads(body))
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        logger.warning("interaction_invalid_body", error=str(e))
        raise HTTPException(status_code=400, detail="Invalid JSON") from e

    if interaction.type == InteractionType.PING:
        return {"type": InteractionResponseType.PONG.value}

    if interaction.type == InteractionType.APPLICATION_COMMAND:
        response = await handle_command(interaction, manager)
        return response.to_interaction_response()

    logger.info("unknown_interaction_type", interaction_type=interaction.type)
    raise HTTPException(status_code=400, detail="Unknown interaction type")
