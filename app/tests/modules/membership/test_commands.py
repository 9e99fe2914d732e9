from unittest.mock import AsyncMock

import pytest

from infrastructure.operations import OperationResult
from models.discord import EPHEMERAL_FLAG, Interaction
from modules.membership.commands import handle_command
from modules.membership.linking import LinkManager


@pytest.fixture
def manager():
    manager = AsyncMock(spec=LinkManager)
    manager.link.return_value = OperationResult.success(message="linked!")
    manager.unlink.return_value = OperationResult.success(message="unlinked!")
    return manager


def _interaction(name, options=None, member_id="U1"):
    body = {"type": 2, "data": {"name": name, "options": options or []}}
    if member_id:
        body["member"] = {"user": {"id": member_id}}
    return Interaction.model_validate(body)


@pytest.mark.asyncio
async def test_link_command_passes_email_option(manager):
    interaction = _interaction("link", [{"name": "email", "type": 3, "value": "A@x.com"}])

    response = await handle_command(interaction, manager)

    manager.link.assert_awaited_once_with("A@x.com", "U1")
    assert response.to_interaction_response() == {
        "type": 4,
        "data": {"content": "linked!", "flags": EPHEMERAL_FLAG},
    }


@pytest.mark.asyncio
async def test_link_command_falls_back_to_first_option(manager):
    interaction = _interaction("link", [{"name": "address", "value": "a@x.com"}])

    await handle_command(interaction, manager)

    manager.link.assert_awaited_once_with("a@x.com", "U1")


@pytest.mark.asyncio
async def test_link_command_without_options(manager):
    await handle_command(_interaction("link"), manager)

    manager.link.assert_awaited_once_with(None, "U1")


@pytest.mark.asyncio
async def test_unlink_command(manager):
    response = await handle_command(_interaction("unlink"), manager)

    manager.unlink.assert_awaited_once_with("U1")
    assert response.message == "unlinked!"


@pytest.mark.asyncio
async def test_direct_message_uses_user_id(manager):
    interaction = Interaction.model_validate(
        {"type": 2, "data": {"name": "unlink"}, "user": {"id": "U7"}}
    )

    await handle_command(interaction, manager)

    manager.unlink.assert_awaited_once_with("U7")


@pytest.mark.asyncio
async def test_unknown_command(manager):
    response = await handle_command(_interaction("dance"), manager)

    assert response.message == "Unknown command."
    manager.link.assert_not_called()
    manager.unlink.assert_not_called()


@pytest.mark.asyncio
async def test_missing_requester(manager):
    response = await handle_command(_interaction("unlink", member_id=None), manager)

    assert response.message == "Could not determine your Discord account."
    manager.unlink.assert_not_called()
