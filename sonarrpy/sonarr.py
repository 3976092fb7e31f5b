"""
Sonarr API Client
"""

import logging
from typing import Any, List

from .base_client import BaseArrClient, require_positive_id
from .exceptions import DecodeError
from .models import (
    Calendar,
    DiskSpace,
    Episode,
    EpisodeFile,
    Queue,
    Series,
    SystemStatus,
    Tag,
)

logger = logging.getLogger(__name__)

CALENDAR_ENDPOINT = "calendar"
DISK_SPACE_ENDPOINT = "diskspace"
EPISODE_ENDPOINT = "episode"
EPISODE_FILE_ENDPOINT = "episodefile"
QUEUE_ENDPOINT = "queue"
SERIES_ENDPOINT = "series"
SYSTEM_STATUS_ENDPOINT = "system/status"
TAG_ENDPOINT = "tag"


def _decode_list(model, data: Any) -> list:
    if not isinstance(data, list):
        raise DecodeError(
            f"expected a JSON array of {model.__name__}, got {type(data).__name__}"
        )
    return [model.from_dict(item) for item in data]


class SonarrClient(BaseArrClient):
    """Client to interact with Sonarr API

    ``url`` is the API root (e.g. ``http://localhost:8989/api``); endpoint
    paths are resolved relative to it.
    """

    def get_calendar(self, start: str = "", end: str = "") -> List[Calendar]:
        """Fetch episodes airing between ``start`` and ``end``

        Both dates are passed through as given. Without them the server
        returns episodes airing today and tomorrow.
        """
        params = {}
        if start:
            params["start"] = start
        if end:
            params["end"] = end

        data = self._get(CALENDAR_ENDPOINT, params=params)
        return _decode_list(Calendar, data)

    def get_disk_space(self) -> List[DiskSpace]:
        """Fetch free/total space of every drive mounted on the server"""
        return _decode_list(DiskSpace, self._get(DISK_SPACE_ENDPOINT))

    def get_episodes(self, series_id: int) -> List[Episode]:
        """Fetch all episodes of a series"""
        require_positive_id(series_id, "series_id")
        data = self._get(EPISODE_ENDPOINT, params={"seriesId": str(series_id)})
        return _decode_list(Episode, data)

    def get_episode(self, episode_id: int) -> Episode:
        """Fetch a single episode"""
        require_positive_id(episode_id, "episode_id")
        return Episode.from_dict(self._get(f"{EPISODE_ENDPOINT}/{episode_id}"))

    def update_episode(self, episode: Episode) -> Episode:
        """Send back an episode previously fetched and locally modified

        Sonarr only honours changes to ``monitored``; the returned episode is
        what the server actually stored.
        """
        require_positive_id(episode.id, "episode.id")
        logger.debug(
            f"Updating episode {episode.id} (monitored={episode.monitored})"
        )
        data = self._put(f"{EPISODE_ENDPOINT}/{episode.id}", episode)
        return Episode.from_dict(data)

    def get_episode_files(self, series_id: int) -> List[EpisodeFile]:
        """Fetch all episode files of a series"""
        require_positive_id(series_id, "series_id")
        data = self._get(EPISODE_FILE_ENDPOINT, params={"seriesId": str(series_id)})
        return _decode_list(EpisodeFile, data)

    def get_episode_file(self, episode_file_id: int) -> EpisodeFile:
        """Fetch a single episode file"""
        require_positive_id(episode_file_id, "episode_file_id")
        data = self._get(f"{EPISODE_FILE_ENDPOINT}/{episode_file_id}")
        return EpisodeFile.from_dict(data)

    def delete_episode_file(self, episode_file_id: int) -> EpisodeFile:
        """Delete an episode file. This also removes the media file from disk!"""
        require_positive_id(episode_file_id, "episode_file_id")
        logger.debug(f"Deleting episode file ID {episode_file_id}")
        data = self._delete(f"{EPISODE_FILE_ENDPOINT}/{episode_file_id}")
        return EpisodeFile.from_dict(data)

    def get_all_series(self) -> List[Series]:
        """Fetch all series"""
        return _decode_list(Series, self._get(SERIES_ENDPOINT))

    def get_monitored_series(self) -> List[Series]:
        """Fetch all monitored series"""
        all_series = self.get_all_series()
        return [s for s in all_series if s.monitored]

    def get_series(self, series_id: int) -> Series:
        """Fetch a single series"""
        require_positive_id(series_id, "series_id")
        return Series.from_dict(self._get(f"{SERIES_ENDPOINT}/{series_id}"))

    def update_series(self, series: Series) -> Series:
        """Send back a series previously fetched and locally modified"""
        require_positive_id(series.id, "series.id")
        data = self._put(f"{SERIES_ENDPOINT}/{series.id}", series)
        return Series.from_dict(data)

    def delete_series(self, series_id: int, delete_files: bool = False) -> Series:
        """Delete a series

        With ``delete_files`` the series folder and all its files are
        removed from disk as well.
        """
        require_positive_id(series_id, "series_id")
        params = {}
        if delete_files:
            params["deleteFiles"] = "true"

        logger.debug(f"Deleting series ID {series_id} (delete_files={delete_files})")
        data = self._delete(f"{SERIES_ENDPOINT}/{series_id}", params=params)
        return Series.from_dict(data)

    def get_queue(self) -> List[Queue]:
        """Fetch the items currently being downloaded"""
        return _decode_list(Queue, self._get(QUEUE_ENDPOINT))

    def get_system_status(self) -> SystemStatus:
        """Fetch build and runtime information of the server"""
        return SystemStatus.from_dict(self._get(SYSTEM_STATUS_ENDPOINT))

    def get_tags(self) -> List[Tag]:
        """Fetch all tags"""
        return _decode_list(Tag, self._get(TAG_ENDPOINT))
