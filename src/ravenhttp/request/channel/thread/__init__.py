from ravenhttp.request.channel.thread.get_joined_private_archived_threads import GetJoinedPrivateArchivedThreads
from ravenhttp.request.channel.thread.get_private_archived_threads import GetPrivateArchivedThreads
from ravenhttp.request.channel.thread.get_public_archived_threads import GetPublicArchivedThreads

__all__ = [
    "GetJoinedPrivateArchivedThreads",
    "GetPrivateArchivedThreads",
    "GetPublicArchivedThreads",
]
