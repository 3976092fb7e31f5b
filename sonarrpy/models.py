"""
Data models for the Sonarr API

Every field carries the exact JSON key used by the server in its metadata,
so ``from_dict``/``to_dict`` map snake_case attributes onto the wire schema
without renaming anything. Some keys are irregular on purpose (for example
``episodeFileID`` on Episode vs ``episodeFileId`` on Calendar); they mirror
what the server and existing clients exchange and must not be unified.
"""

from dataclasses import MISSING, dataclass, field, fields
from typing import Any, List, get_args, get_type_hints

from .exceptions import DecodeError


def wire(
    key: str,
    default: Any = MISSING,
    *,
    default_factory: Any = MISSING,
    model: type | None = None,
    many: bool = False,
):
    """Declare a dataclass field bound to the JSON key ``key``"""
    metadata = {"wire": key, "model": model, "many": many}
    if default_factory is not MISSING:
        return field(default_factory=default_factory, metadata=metadata)
    if many:
        return field(default_factory=list, metadata=metadata)
    if model is not None:
        return field(default_factory=model, metadata=metadata)
    return field(default=default, metadata=metadata)


def _scalar_kind(annotation: Any) -> type:
    """Plain type behind ``str | None`` or the item type of ``List[int]``"""
    args = [a for a in get_args(annotation) if a is not type(None)]
    if args:
        return args[0]
    return annotation


def _check_scalar(value: Any, kind: type, where: str) -> Any:
    # bool is an int subclass but JSON keeps them apart
    if kind is float:
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
        if ok:
            value = float(value)
    elif kind is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
    else:
        ok = isinstance(value, kind)

    if not ok:
        raise DecodeError(
            f"expected {kind.__name__} for {where}, got {type(value).__name__}"
        )
    return value


class WireModel:
    """Mixin giving dataclasses a JSON object mapping"""

    @classmethod
    def from_dict(cls, data: Any):
        """Build an instance from a decoded JSON object

        Unknown keys are ignored, missing or null keys keep the field default.
        A value of the wrong JSON type raises DecodeError.
        """
        if not isinstance(data, dict):
            raise DecodeError(
                f"expected a JSON object for {cls.__name__}, got {type(data).__name__}"
            )

        hints = get_type_hints(cls)
        values = {}
        for f in fields(cls):
            raw = data.get(f.metadata["wire"])
            if raw is None:
                continue

            where = f"{cls.__name__}.{f.name}"
            model = f.metadata["model"]
            kind = _scalar_kind(hints[f.name])
            if f.metadata["many"]:
                if not isinstance(raw, list):
                    raise DecodeError(
                        f"expected a JSON array for {where}, got {type(raw).__name__}"
                    )
                if model is not None:
                    raw = [model.from_dict(item) for item in raw]
                else:
                    # null items decode to the zero value
                    raw = [
                        kind() if item is None else _check_scalar(item, kind, where)
                        for item in raw
                    ]
            elif model is not None:
                raw = model.from_dict(raw)
            else:
                raw = _check_scalar(raw, kind, where)

            values[f.name] = raw

        return cls(**values)

    def to_dict(self) -> dict:
        """Encode to a JSON-ready dict keyed by wire names"""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            model = f.metadata["model"]
            if f.metadata["many"]:
                if model is not None:
                    value = [item.to_dict() for item in value]
                else:
                    value = list(value)
            elif model is not None:
                value = value.to_dict()
            data[f.metadata["wire"]] = value
        return data


@dataclass
class AlternateTitle(WireModel):
    """Alternate (scene) title of a series"""

    title: str = wire("title", "")
    season_number: int = wire("seasonNumber", 0)


@dataclass
class Image(WireModel):
    """Artwork reference of a series"""

    cover_type: str = wire("coverType", "")


@dataclass
class SeasonStatistics(WireModel):
    """File and episode counters for one season"""

    previous_airing: str | None = wire("previousAiring", None)
    episode_file_count: int = wire("episodeFileCount", 0)
    episode_count: int = wire("episodeCount", 0)
    total_episode_count: int = wire("totalEpisodeCount", 0)
    size_on_disk: int = wire("sizeOnDisk", 0)
    percent_of_episodes: int = wire("percentOfEpisodes", 0)


@dataclass
class Season(WireModel):
    """Represents a season in Sonarr"""

    season_number: int = wire("seasonNumber", 0)
    monitored: bool = wire("monitored", False)
    statistics: SeasonStatistics = wire("statistics", model=SeasonStatistics)


@dataclass
class Ratings(WireModel):
    """Represents the audience rating of a series"""

    votes: int = wire("votes", 0)
    value: float = wire("value", 0.0)


@dataclass
class Series(WireModel):
    """Represents a series in Sonarr"""

    title: str = wire("title", "")
    alternate_titles: List[AlternateTitle] = wire(
        "alternateTitles", model=AlternateTitle, many=True
    )
    sort_title: str = wire("sortTitle", "")
    season_count: int = wire("seasonCount", 0)
    total_episode_count: int = wire("totalEpisodeCount", 0)
    episode_count: int = wire("episodeCount", 0)
    episode_file_count: int = wire("episodeFileCount", 0)
    size_on_disk: int = wire("sizeOnDisk", 0)
    status: str = wire("status", "")
    overview: str = wire("overview", "")
    previous_airing: str | None = wire("previousAiring", None)
    network: str = wire("network", "")
    air_time: str = wire("airTime", "")
    images: List[Image] = wire("images", model=Image, many=True)
    seasons: List[Season] = wire("seasons", model=Season, many=True)
    year: int = wire("year", 0)
    path: str = wire("path", "")
    profile_id: int = wire("profileId", 0)
    season_folder: bool = wire("seasonFolder", False)
    monitored: bool = wire("monitored", False)
    use_scene_numbering: bool = wire("useSceneNumbering", False)
    runtime: int = wire("runtime", 0)
    tvdb_id: int = wire("tvdbId", 0)
    tv_rage_id: int = wire("tvRageId", 0)
    tv_maze_id: int = wire("tvMazeId", 0)
    first_aired: str | None = wire("firstAired", None)
    last_info_sync: str | None = wire("lastInfoSync", None)
    series_type: str = wire("seriesType", "")
    clean_title: str = wire("cleanTitle", "")
    imdb_id: str = wire("imdbId", "")
    title_slug: str = wire("titleSlug", "")
    certification: str = wire("certification", "")
    genres: List[str] = wire("genres", many=True)
    tags: List[int] = wire("tags", many=True)
    added: str | None = wire("added", None)
    ratings: Ratings = wire("ratings", model=Ratings)
    quality_profile_id: int = wire("qualityProfileId", 0)
    id: int = wire("id", 0)


@dataclass
class Episode(WireModel):
    """Represents an episode in Sonarr"""

    series_id: int = wire("seriesId", 0)
    # capital "ID" is what this endpoint uses, Calendar uses "Id"
    episode_file_id: int = wire("episodeFileID", 0)
    season_number: int = wire("seasonNumber", 0)
    episode_number: int = wire("episodeNumber", 0)
    title: str = wire("title", "")
    air_date: str = wire("airDate", "")
    air_date_utc: str | None = wire("airDateUTC", None)
    overview: str = wire("overview", "")
    has_file: bool = wire("hasFile", False)
    monitored: bool = wire("monitored", False)
    unverified_scene_numbering: bool = wire("unverifiedSceneNumbering", False)
    id: int = wire("id", 0)


@dataclass
class QualityDefinition(WireModel):
    """Represents a quality level (e.g. Bluray-1080p)"""

    id: int = wire("id", 0)
    name: str = wire("name", "")


@dataclass
class Revision(WireModel):
    """Represents the release revision of a file"""

    version: int = wire("version", 0)
    real: int = wire("real", 0)


@dataclass
class Quality(WireModel):
    """Quality of a file"""

    quality: QualityDefinition = wire("quality", model=QualityDefinition)
    revision: Revision = wire("revision", model=Revision)
    proper: bool = wire("proper", False)


@dataclass
class EpisodeFile(WireModel):
    """A file stored on disk for an episode"""

    series_id: int = wire("seriesId", 0)
    season_number: int = wire("seasonNumber", 0)
    relative_path: str = wire("relativePath", "")
    path: str = wire("path", "")
    size: int = wire("size", 0)
    date_added: str = wire("dateAdded", "")
    scene_name: str = wire("sceneName", "")
    quality: Quality = wire("quality", model=Quality)
    quality_cutoff_not_met: bool = wire("qualityCutoffNotMet", False)
    id: int = wire("id", 0)


@dataclass
class StatusMessage(WireModel):
    """Represents a warning attached to a queue item"""

    title: str = wire("title", "")
    messages: List[str] = wire("messages", many=True)


@dataclass
class Queue(WireModel):
    """Queue item currently being downloaded"""

    series: Series = wire("series", model=Series)
    episode: Episode = wire("episode", model=Episode)
    quality: Quality = wire("quality", model=Quality)
    size: int = wire("size", 0)
    title: str = wire("title", "")
    size_left: int = wire("sizeLeft", 0)
    status: str = wire("status", "")
    tracked_download_status: str = wire("trackedDownloadStatus", "")
    status_messages: List[StatusMessage] = wire(
        "statusMessages", model=StatusMessage, many=True
    )
    download_id: str = wire("downloadId", "")
    protocol: str = wire("protocol", "")
    id: int = wire("id", 0)


@dataclass
class Calendar(WireModel):
    """Calendar entry for a past or upcoming airing"""

    series_id: int = wire("seriesId", 0)
    episode_file_id: int = wire("episodeFileId", 0)
    season_number: int = wire("seasonNumber", 0)
    episode_number: int = wire("episodeNumber", 0)
    title: str = wire("title", "")
    air_date: str = wire("airDate", "")
    air_date_utc: str | None = wire("airDateUtc", None)
    has_file: bool = wire("hasFile", False)
    monitored: bool = wire("monitored", False)
    absolute_episode_number: int = wire("absoluteEpisodeNumber", 0)
    series: Series = wire("series", model=Series)
    unverified_scene_numbering: bool = wire("unverifiedSceneNumbering", False)


@dataclass
class DiskSpace(WireModel):
    """Disk space remaining on a drive mounted on the server"""

    path: str = wire("path", "")
    label: str = wire("label", "")
    free_space: int = wire("freeSpace", 0)
    total_space: int = wire("totalSpace", 0)


@dataclass
class Tag(WireModel):
    """Represents a tag that can be applied to series"""

    label: str = wire("label", "")
    id: int = wire("id", 0)


@dataclass
class SystemStatus(WireModel):
    """Build and runtime information of the server"""

    version: str = wire("version", "")
    build_time: str = wire("buildTime", "")
    is_debug: bool = wire("isDebug", False)
    is_production: bool = wire("isProduction", False)
    is_admin: bool = wire("isAdmin", False)
    is_user_interactive: bool = wire("isUserInteractive", False)
    startup_time: str = wire("startupTime", "")
    app_data: str = wire("appData", "")
    os_name: str = wire("osName", "")
    os_version: str = wire("osVersion", "")
    is_mono_runtime: bool = wire("isMonoRuntime", False)
    is_mono: bool = wire("isMono", False)
    is_linux: bool = wire("isLinux", False)
    is_osx: bool = wire("isOsx", False)
    is_windows: bool = wire("isWindows", False)
    branch: str = wire("branch", "")
    # kept under "forms" for compatibility with existing payloads
    authentication: str = wire("forms", "")
    sqllite_version: str = wire("sqlliteVersion", "")
    url_base: str = wire("urlBase", "")
    runtime_version: str = wire("runtimeVersion", "")
    runtime_name: str = wire("runtimeName", "")
