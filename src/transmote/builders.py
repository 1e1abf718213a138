"""
Command Builders Module

Each builder returns a ready-to-execute ``Command`` for one daemon operation.
Builders never talk to the daemon; the only one that touches storage is
``new_add_cmd_by_file``, which reads the .torrent file into the request.
"""

import base64

from .command import Command, RpcMethod
from .errors import TorrentFileError

# Every Torrent attribute, so callers never see partially populated records
TORRENT_FIELDS = [
    "id",
    "name",
    "hashString",
    "status",
    "addedDate",
    "leftUntilDone",
    "eta",
    "uploadRatio",
    "rateDownload",
    "rateUpload",
    "downloadDir",
    "isFinished",
    "percentDone",
    "seedRatioMode",
    "error",
    "errorString",
    "trackerStats",
    "files",
]


def new_get_torrents_cmd() -> Command:
    """Build a ``torrent-get`` command for all torrents with the full field set."""
    cmd = Command(method=RpcMethod.TorrentGet)
    cmd.arguments.fields = list(TORRENT_FIELDS)
    return cmd


def new_get_torrent_cmd(torrent_id: int) -> Command:
    """Build a ``torrent-get`` command restricted to one torrent."""
    cmd = new_get_torrents_cmd()
    cmd.arguments.ids = [torrent_id]
    return cmd


def new_add_cmd() -> Command:
    """Build the bare ``torrent-add`` command the add variants start from."""
    return Command(method=RpcMethod.TorrentAdd)


def new_add_cmd_by_magnet(magnet_link: str) -> Command:
    cmd = new_add_cmd()
    cmd.arguments.filename = magnet_link
    return cmd


def new_add_cmd_by_url(url: str) -> Command:
    cmd = new_add_cmd()
    cmd.arguments.filename = url
    return cmd


def new_add_cmd_by_filename(filename: str) -> Command:
    """Build an add command for a .torrent path resolved on the daemon's host."""
    cmd = new_add_cmd()
    cmd.arguments.filename = filename
    return cmd


def encode_file(path: str) -> str:
    """Read a file and return its content as standard base64 text.

    Args:
        path: Local file path.

    Returns:
        str: Base64 encoded file content.

    Raises:
        TorrentFileError: If the file cannot be read.
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise TorrentFileError(path, e.strerror or str(e)) from e
    return base64.b64encode(data).decode("ascii")


def new_add_cmd_by_file(path: str) -> Command:
    """Build an add command carrying the content of a local .torrent file.

    Args:
        path: Local .torrent file path.

    Returns:
        Command: ``torrent-add`` command with ``metainfo`` set.

    Raises:
        TorrentFileError: If the file cannot be read.
    """
    metainfo = encode_file(path)
    cmd = new_add_cmd()
    cmd.arguments.metainfo = metainfo
    return cmd


def new_set_cmd(torrent_id: int) -> Command:
    """Build a ``torrent-set`` command; the caller sets the fields to change."""
    cmd = Command(method=RpcMethod.TorrentSet)
    cmd.arguments.ids = [torrent_id]
    return cmd


def new_del_cmd(torrent_id: int, remove_file: bool) -> Command:
    cmd = Command(method=RpcMethod.TorrentRemove)
    cmd.arguments.ids = [torrent_id]
    cmd.arguments.delete_local_data = remove_file
    return cmd


def new_simple_cmd(method: str, torrent_id: int) -> Command:
    """Build a command that carries nothing but a method and one torrent id."""
    cmd = Command(method=method)
    cmd.arguments.ids = [torrent_id]
    return cmd


def new_start_cmd(torrent_id: int) -> Command:
    return new_simple_cmd(RpcMethod.TorrentStart, torrent_id)


def new_stop_cmd(torrent_id: int) -> Command:
    return new_simple_cmd(RpcMethod.TorrentStop, torrent_id)


def new_verify_cmd(torrent_id: int) -> Command:
    return new_simple_cmd(RpcMethod.TorrentVerify, torrent_id)
