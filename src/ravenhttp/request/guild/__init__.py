from ravenhttp.request.guild.ban import CreateBan, DeleteBan, GetBan, GetBans
from ravenhttp.request.guild.emoji import CreateEmoji, DeleteEmoji, GetEmoji, GetEmojis

__all__ = [
    "CreateBan",
    "DeleteBan",
    "GetBan",
    "GetBans",
    "CreateEmoji",
    "DeleteEmoji",
    "GetEmoji",
    "GetEmojis",
]
