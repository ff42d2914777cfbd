from ravenhttp.request.channel.create_pin import CreatePin
from ravenhttp.request.channel.delete_pin import DeletePin
from ravenhttp.request.channel.get_pins import GetPins
from ravenhttp.request.channel.thread import (
    GetJoinedPrivateArchivedThreads,
    GetPrivateArchivedThreads,
    GetPublicArchivedThreads,
)

__all__ = [
    "CreatePin",
    "DeletePin",
    "GetPins",
    "GetJoinedPrivateArchivedThreads",
    "GetPrivateArchivedThreads",
    "GetPublicArchivedThreads",
]
