"""Transmote - a command client for the Transmission RPC daemon."""

__version__ = "0.1.0"
__description__ = (
    "Typed command builders, executor and result ordering for driving a "
    "remote Transmission daemon over its JSON RPC protocol"
)

from .builders import (
    TORRENT_FIELDS,
    encode_file,
    new_add_cmd,
    new_add_cmd_by_file,
    new_add_cmd_by_filename,
    new_add_cmd_by_magnet,
    new_add_cmd_by_url,
    new_del_cmd,
    new_get_torrent_cmd,
    new_get_torrents_cmd,
    new_set_cmd,
    new_simple_cmd,
    new_start_cmd,
    new_stop_cmd,
    new_verify_cmd,
)
from .client import TransmissionClient
from .command import Arguments, Command, Response, RpcMethod, decode_command, encode_command
from .errors import (
    CommandEncodeError,
    NoResultsError,
    ResponseDecodeError,
    TorrentFileError,
    TransmoteError,
    TransportError,
)
from .models import File, Torrent, TorrentAdded, Torrents, TorrentStatus, TrackerStat
from .transport import HttpTransport, Transport, create_transport

__all__ = [
    "__version__",
    "__description__",
    # Envelope and codec
    "Arguments",
    "Command",
    "Response",
    "RpcMethod",
    "decode_command",
    "encode_command",
    # Records
    "File",
    "Torrent",
    "TorrentAdded",
    "Torrents",
    "TorrentStatus",
    "TrackerStat",
    # Builders
    "TORRENT_FIELDS",
    "encode_file",
    "new_add_cmd",
    "new_add_cmd_by_file",
    "new_add_cmd_by_filename",
    "new_add_cmd_by_magnet",
    "new_add_cmd_by_url",
    "new_del_cmd",
    "new_get_torrent_cmd",
    "new_get_torrents_cmd",
    "new_set_cmd",
    "new_simple_cmd",
    "new_start_cmd",
    "new_stop_cmd",
    "new_verify_cmd",
    # Execution
    "TransmissionClient",
    "Transport",
    "HttpTransport",
    "create_transport",
    # Errors
    "TransmoteError",
    "TorrentFileError",
    "CommandEncodeError",
    "TransportError",
    "ResponseDecodeError",
    "NoResultsError",
]
