from ravenhttp.request.guild.emoji.create_emoji import CreateEmoji
from ravenhttp.request.guild.emoji.delete_emoji import DeleteEmoji
from ravenhttp.request.guild.emoji.get_emoji import GetEmoji
from ravenhttp.request.guild.emoji.get_emojis import GetEmojis

__all__ = ["CreateEmoji", "DeleteEmoji", "GetEmoji", "GetEmojis"]
