"""Discord slash command handling for /link and /unlink."""

from typing import Callable, Dict, Awaitable

from infrastructure.logging import get_module_logger
from models.discord import CommandResponse, Interaction
from modules.membership.linking import LinkManager

logger = get_module_logger()

EMAIL_OPTION = "email"


async def _handle_link(interaction: Interaction, manager: LinkManager) -> CommandResponse:
    email = None
    if interaction.data and interaction.data.options:
        email = interaction.data.option_value(EMAIL_OPTION)
        if email is None and interaction.data.options[0].value is not None:
            email = str(interaction.data.options[0].value)
    result = await manager.link(email, interaction.requester_id)
    return CommandResponse(result.message)


async def _handle_unlink(
    interaction: Interaction, manager: LinkManager
) -> CommandResponse:
    result = await manager.unlink(interaction.requester_id)
    return CommandResponse(result.message)


COMMAND_HANDLERS: Dict[
    str, Callable[[Interaction, LinkManager], Awaitable[CommandResponse]]
] = {
    "link": _handle_link,
    "unlink": _handle_unlink,
}


async def handle_command(
    interaction: Interaction, manager: LinkManager
) -> CommandResponse:
    """Dispatch an application command interaction to its handler."""
    name = interaction.data.name if interaction.data else None
    handler = COMMAND_HANDLERS.get(name or "")
    if handler is None:
        logger.info("unknown_command", command=name)
        return CommandResponse("Unknown command.")

    if not interaction.requester_id:
        logger.warning("command_missing_requester", command=name)
        return CommandResponse("Could not determine your Discord account.")

    logger.info(
        "command_received", command=name, external_id=interaction.requester_id
    )
    return await handler(interaction, manager)
