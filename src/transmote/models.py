"""
Torrent Records Module

Snapshots of daemon-reported torrent state and the ordering helpers used on
result sets. Attribute names follow the daemon's camelCase wire names through
msgspec's rename policy.
"""

from enum import IntEnum
from operator import attrgetter

import msgspec


class TorrentStatus(IntEnum):
    """Torrent lifecycle status as reported by the daemon."""

    PAUSED = 0
    WAIT = 1
    CHECK = 2
    DOWNLOAD_WAIT = 3
    DOWNLOAD = 4
    SEED_WAIT = 5
    SEED = 6


class TrackerStat(msgspec.Struct, rename="camel", frozen=True):
    """Announce/scrape history of one tracker for a torrent."""

    announce: str = ""
    announce_state: int = 0
    download_count: int = 0
    has_announced: bool = False
    has_scraped: bool = False
    host: str = ""
    id: int = 0
    is_backup: bool = False
    last_announce_peer_count: int = 0
    last_announce_result: str = ""
    last_announce_start_time: int = 0
    last_announce_succeeded: bool = False
    last_announce_time: int = 0
    last_announce_timed_out: bool = False
    last_scrape_result: str = ""
    last_scrape_start_time: int = 0
    last_scrape_succeeded: bool = False
    last_scrape_time: int = 0
    last_scrape_timed_out: int = 0
    leecher_count: int = 0
    next_announce_time: int = 0
    next_scrape_time: int = 0
    scrape: str = ""
    scrape_state: int = 0
    seeder_count: int = 0
    tier: int = 0


class File(msgspec.Struct, rename="camel", frozen=True):
    """One constituent file of a torrent."""

    name: str = ""
    length: int = 0
    bytes_completed: int = 0

    @property
    def progress(self) -> float:
        """Completed fraction of the file (0.0 to 1.0)."""
        return self.bytes_completed / self.length if self.length > 0 else 0.0


class Torrent(msgspec.Struct, rename="camel", frozen=True):
    """Snapshot of one torrent's state and metadata."""

    id: int = 0
    name: str = ""
    status: int = 0
    added_date: int = 0
    left_until_done: int = 0
    eta: int = 0
    upload_ratio: float = 0.0
    rate_download: int = 0
    rate_upload: int = 0
    download_dir: str = ""
    is_finished: bool = False
    percent_done: float = 0.0
    seed_ratio_mode: int = 0
    hash_string: str = ""
    error: int = 0
    error_string: str = ""
    tracker_stats: list[TrackerStat] = []
    files: list[File] = []

    @property
    def state(self) -> TorrentStatus:
        return TorrentStatus(self.status)


class TorrentAdded(msgspec.Struct, rename="camel", frozen=True):
    """Descriptor returned by the daemon for a newly accepted torrent."""

    hash_string: str = ""
    id: int = 0
    name: str = ""


class Torrents(list):
    """Torrent records in response order until one of the sort methods is applied."""

    def sort_by_id(self, reverse: bool = False) -> None:
        self.sort(key=attrgetter("id"), reverse=reverse)

    def sort_by_name(self, reverse: bool = False) -> None:
        self.sort(key=attrgetter("name"), reverse=reverse)

    def sort_by_added_date(self, reverse: bool = False) -> None:
        self.sort(key=attrgetter("added_date"), reverse=reverse)
