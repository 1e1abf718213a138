"""
Transmission Client Module

Executes commands against the daemon: a command is encoded, handed to the
transport, and the reply is decoded into a fresh command. The typed
accessors below cover the common operations; anything else can be built
with ``transmote.builders`` and run through ``execute_command``.
"""

from . import builders, logger
from .command import Command, Response, decode_command, encode_command
from .errors import NoResultsError
from .models import Torrent, TorrentAdded, Torrents
from .transport import DEFAULT_TIMEOUT, Transport, create_transport


class TransmissionClient:
    """Client for a Transmission daemon. Holds no state besides its transport."""

    def __init__(self, transport: Transport):
        self.transport = transport
        self.logger = logger.get_logger("client")

    @classmethod
    def from_url(
        cls,
        url: str,
        username: str | None = None,
        password: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "TransmissionClient":
        """Create a client talking HTTP to the daemon at ``url``.

        Raises:
            ValueError: If the URL is malformed or not supported.
        """
        return cls(create_transport(url, username=username, password=password, timeout=timeout))

    def execute_command(self, command: Command) -> Command:
        """Run one request/response exchange.

        Args:
            command (Command): Request to send.

        Returns:
            Command: The decoded reply.

        Raises:
            CommandEncodeError: If the request cannot be serialized.
            TransportError: If the transport fails to deliver it.
            ResponseDecodeError: If the reply is not well-formed.
        """
        body = encode_command(command)
        self.logger.debug("Sending %s request", command.method)

        output = self.transport.post(body)

        reply = decode_command(output)
        response = Response(reply)
        if not response.succeeded:
            self.logger.warning("%s request returned result %r", command.method, response.result)
        return reply

    def execute_add_command(self, command: Command) -> TorrentAdded:
        """Run an add command and return the descriptor of the added torrent.

        The descriptor is empty when the daemon did not add anything.
        """
        reply = Response(self.execute_command(command))
        if reply.torrent_duplicate is not None:
            self.logger.info("Torrent already known to daemon: %s", reply.torrent_duplicate.hash_string)
        return reply.torrent_added

    def get_torrents(self) -> Torrents:
        """Get all torrents, in the order the daemon returned them."""
        reply = self.execute_command(builders.new_get_torrents_cmd())
        return Response(reply).torrents

    def get_torrent(self, torrent_id: int) -> Torrent:
        """Get a single torrent by id.

        Raises:
            NoResultsError: If the daemon returned zero or several torrents.
        """
        reply = self.execute_command(builders.new_get_torrent_cmd(torrent_id))
        torrents = Response(reply).torrents
        if len(torrents) != 1:
            raise NoResultsError(f"no results found for torrent {torrent_id} ({len(torrents)} returned)")
        return torrents[0]

    def start_torrent(self, torrent_id: int) -> str:
        return self._send_simple_command(builders.new_start_cmd(torrent_id))

    def stop_torrent(self, torrent_id: int) -> str:
        return self._send_simple_command(builders.new_stop_cmd(torrent_id))

    def verify_torrent(self, torrent_id: int) -> str:
        return self._send_simple_command(builders.new_verify_cmd(torrent_id))

    def remove_torrent(self, torrent_id: int, delete_data: bool = False) -> str:
        return self._send_simple_command(builders.new_del_cmd(torrent_id, delete_data))

    def _send_simple_command(self, command: Command) -> str:
        return Response(self.execute_command(command)).result
