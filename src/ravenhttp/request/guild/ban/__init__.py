from ravenhttp.request.guild.ban.create_ban import CreateBan
from ravenhttp.request.guild.ban.delete_ban import DeleteBan
from ravenhttp.request.guild.ban.get_ban import GetBan
from ravenhttp.request.guild.ban.get_bans import GetBans

__all__ = ["CreateBan", "DeleteBan", "GetBan", "GetBans"]
