"""Discord interaction models."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

EPHEMERAL_FLAG = 1 << 6


class InteractionType(IntEnum):
    PING = 1
    APPLICATION_COMMAND = 2


class InteractionResponseType(IntEnum):
    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4


class DiscordUser(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    username: Optional[str] = None


class DiscordGuildMember(BaseModel):
    model_config = ConfigDict(extra="ignore")

    user: Optional[DiscordUser] = None


class CommandOption(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    type: Optional[int] = None
    value: Any = None


class CommandData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    options: List[CommandOption] = []

    def option_value(self, name: str) -> Optional[str]:
        """Return the string value of the named option, if it was supplied."""
        for option in self.options:
            if option.name == name and option.value is not None:
                return str(option.value)
        return None


class Interaction(BaseModel):
    """Incoming Discord interaction (only the fields the relay reads)."""

    model_config = ConfigDict(extra="ignore")

    type: int
    data: Optional[CommandData] = None
    member: Optional[DiscordGuildMember] = None
    user: Optional[DiscordUser] = None

    @property
    def requester_id(self) -> Optional[str]:
        """Discord user id of the invoker.

        Guild interactions carry it in ``member.user``, direct messages in
        ``user``.
        """
        if self.member and self.member.user:
            return self.member.user.id
        if self.user:
            return self.user.id
        return None


@dataclass
class CommandResponse:
    """Reply to a slash command."""

    message: str
    ephemeral: bool = True

    def to_interaction_response(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"content": self.message}
        if self.ephemeral:
            data["flags"] = EPHEMERAL_FLAG
        return {
            "type": InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE.value,
            "data": data,
        }
