"""Application command schema: /rinfo and the Reaction Info context menu.

Callbacks only translate arguments and hand off to the bot's dispatcher.
"""

from typing import TYPE_CHECKING, List, Optional, Union

import discord
from discord import app_commands

from rinfo.domain.models import RinfoOptions

if TYPE_CHECKING:
    from rinfo.adapters.discord.bot import ReactionInfoBot

RINFO_NAME = "rinfo"
RINFO_DESCRIPTION = "Get reaction information for a message"
CONTEXT_MENU_NAME = "Reaction Info"


def register_commands(
    tree: app_commands.CommandTree, bot: "ReactionInfoBot"
) -> List[Union[app_commands.Command, app_commands.ContextMenu]]:
    """Add both commands to the tree. Syncing happens in setup_hook."""

    @tree.command(name=RINFO_NAME, description=RINFO_DESCRIPTION)
    @app_commands.describe(
        message="Message URL or ID",
        exclude_user="Users to exclude from the results",
        exclude_reaction="Reactions to exclude from the results",
        include_message_user="Include the message author in the results",
        user_only="Only show users, not grouped by reaction",
    )
    async def rinfo(
        interaction: discord.Interaction,
        message: str,
        exclude_user: Optional[str] = None,
        exclude_reaction: Optional[str] = None,
        include_message_user: Optional[bool] = None,
        user_only: Optional[bool] = None,
    ):
        options = RinfoOptions(
            message=message,
            exclude_user=exclude_user,
            exclude_reaction=exclude_reaction,
            include_message_user=bool(include_message_user),
            user_only=bool(user_only),
        )
        await bot.submit_rinfo(interaction, options)

    @tree.context_menu(name=CONTEXT_MENU_NAME)
    async def reaction_info(interaction: discord.Interaction, message: discord.Message):
        await bot.submit_context_menu(interaction, message.id)

    return [rinfo, reaction_info]
