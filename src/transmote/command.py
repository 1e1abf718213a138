"""
Command Envelope Module

The daemon speaks a single JSON envelope in both directions:
``{"method": ..., "arguments": {...}, "result": ...}``. ``Command`` is that
envelope. Optional argument fields use ``msgspec.UNSET`` as an explicit
absent marker, so only fields that were set are written to the wire. The
``torrent-added`` descriptor is the one exception and is always written.

Requests are assembled with the builders in ``transmote.builders`` and the
``set_*`` methods below; replies are read through the ``Response`` view.
"""

from enum import StrEnum

import msgspec
from msgspec import UNSET, UnsetType

from .errors import CommandEncodeError, ResponseDecodeError
from .models import Torrent, TorrentAdded, Torrents

SUCCESS = "success"


class RpcMethod(StrEnum):
    """Method names understood by the daemon."""

    TorrentGet = "torrent-get"
    TorrentAdd = "torrent-add"
    TorrentSet = "torrent-set"
    TorrentRemove = "torrent-remove"
    TorrentStart = "torrent-start"
    TorrentStop = "torrent-stop"
    TorrentVerify = "torrent-verify"


class Arguments(msgspec.Struct, rename="kebab"):
    """Method payload. Each field is meaningful only for some methods."""

    fields: list[str] | UnsetType = UNSET
    torrents: list[Torrent] | UnsetType = UNSET
    ids: list[int] | UnsetType = UNSET
    delete_local_data: bool | UnsetType = UNSET
    download_dir: str | UnsetType = UNSET
    metainfo: str | UnsetType = UNSET
    filename: str | UnsetType = UNSET
    torrent_added: TorrentAdded = msgspec.field(default_factory=TorrentAdded)
    torrent_duplicate: TorrentAdded | UnsetType = UNSET
    paused: bool | UnsetType = UNSET
    location: str | UnsetType = UNSET


class Command(msgspec.Struct):
    """Request/response envelope."""

    method: str | UnsetType = UNSET
    arguments: Arguments = msgspec.field(default_factory=Arguments)
    result: str | UnsetType = UNSET

    def set_download_dir(self, download_dir: str) -> None:
        """Override the directory the daemon stores the torrent's data in."""
        self.arguments.download_dir = download_dir

    def set_paused(self, paused: bool) -> None:
        self.arguments.paused = paused

    def set_location(self, location: str) -> None:
        self.arguments.location = location


class Response:
    """Read-only view over a command decoded from a daemon reply."""

    __slots__ = ("_command",)

    def __init__(self, command: Command):
        self._command = command

    @property
    def method(self) -> str | None:
        method = self._command.method
        return None if method is UNSET else method

    @property
    def result(self) -> str:
        """Result string reported by the daemon, empty when it sent none."""
        result = self._command.result
        return "" if result is UNSET else result

    @property
    def succeeded(self) -> bool:
        return self.result == SUCCESS

    @property
    def torrents(self) -> Torrents:
        """A fresh collection of the returned torrents, in response order."""
        torrents = self._command.arguments.torrents
        return Torrents() if torrents is UNSET else Torrents(torrents)

    @property
    def torrent_added(self) -> TorrentAdded:
        return self._command.arguments.torrent_added

    @property
    def torrent_duplicate(self) -> TorrentAdded | None:
        """Descriptor of an already-known torrent the daemon refused to add again."""
        duplicate = self._command.arguments.torrent_duplicate
        return None if duplicate is UNSET else duplicate


def encode_command(command: Command) -> bytes:
    """Serialize a command to its JSON wire form.

    Args:
        command: Command to serialize.

    Returns:
        bytes: UTF-8 JSON body.

    Raises:
        CommandEncodeError: If the command holds values that cannot be encoded.
    """
    try:
        return msgspec.json.encode(command)
    except (msgspec.EncodeError, TypeError, ValueError, OverflowError) as e:
        raise CommandEncodeError(f"Failed to encode {command.method!r} command: {e}") from e


def decode_command(data: bytes | str) -> Command:
    """Deserialize a daemon reply into a fresh command.

    Unknown keys are ignored and absent keys keep their defaults.

    Args:
        data: Raw JSON reply body.

    Returns:
        Command: Decoded envelope.

    Raises:
        ResponseDecodeError: If the body is not a well-formed envelope.
    """
    try:
        return msgspec.json.decode(data, type=Command)
    except msgspec.DecodeError as e:
        raise ResponseDecodeError(f"Failed to decode daemon reply: {e}") from e
