import json

import pytest

from sonarrpy.exceptions import DecodeError
from sonarrpy.models import (
    Calendar,
    DiskSpace,
    Episode,
    EpisodeFile,
    Queue,
    Ratings,
    Series,
    SystemStatus,
    Tag,
)


def test_series_from_dict_maps_nested_records(series_payload: dict) -> None:
    series = Series.from_dict(series_payload)

    assert series.id == 5
    assert series.title == "Dark"
    assert series.quality_profile_id == 1
    assert series.alternate_titles[0].season_number == -1
    assert [i.cover_type for i in series.images] == ["poster", "fanart"]
    assert series.seasons[0].statistics.percent_of_episodes == 100
    assert series.ratings == Ratings(votes=1200, value=8.7)
    assert series.genres == ["Drama", "Mystery"]
    assert series.tags == [1, 3]


def test_series_json_round_trip_is_lossless(series_payload: dict) -> None:
    series = Series.from_dict(series_payload)

    encoded = json.dumps(series.to_dict())
    assert Series.from_dict(json.loads(encoded)) == series
    assert series.to_dict() == series_payload


def test_default_series_round_trip() -> None:
    series = Series()
    assert Series.from_dict(series.to_dict()) == series


def test_missing_and_null_keys_use_defaults() -> None:
    series = Series.from_dict({"id": 9, "title": None, "seasons": None})

    assert series.id == 9
    assert series.title == ""
    assert series.seasons == []
    assert series.ratings == Ratings()
    assert series.first_aired is None


def test_unknown_keys_are_ignored() -> None:
    episode = Episode.from_dict({"id": 3, "somethingNew": {"x": 1}})
    assert episode.id == 3


def test_episode_and_calendar_keep_their_own_file_id_casing() -> None:
    episode = Episode.from_dict({"episodeFileID": 10, "episodeFileId": 99})
    calendar = Calendar.from_dict({"episodeFileID": 10, "episodeFileId": 99})

    assert episode.episode_file_id == 10
    assert calendar.episode_file_id == 99
    assert "episodeFileID" in episode.to_dict()
    assert "episodeFileId" in calendar.to_dict()
    assert "airDateUTC" in episode.to_dict()
    assert "airDateUtc" in calendar.to_dict()


def test_system_status_irregular_keys() -> None:
    status = SystemStatus.from_dict(
        {"version": "3.0.10.1567", "forms": "basic", "sqlliteVersion": "3.40.0"}
    )

    assert status.authentication == "basic"
    assert status.sqllite_version == "3.40.0"
    assert status.to_dict()["forms"] == "basic"


def test_episode_file_quality_is_nested_value() -> None:
    episode_file = EpisodeFile.from_dict(
        {
            "id": 77,
            "seriesId": 5,
            "size": 2147483648,
            "quality": {
                "quality": {"id": 7, "name": "Bluray-1080p"},
                "revision": {"version": 2, "real": 0},
                "proper": True,
            },
        }
    )

    assert episode_file.quality.quality.name == "Bluray-1080p"
    assert episode_file.quality.revision.version == 2
    assert episode_file.quality.proper is True


def test_queue_embeds_series_and_episode(
    series_payload: dict, episode_payload: dict
) -> None:
    item = Queue.from_dict(
        {
            "series": series_payload,
            "episode": episode_payload,
            "size": 1000,
            "sizeLeft": 250,
            "status": "Downloading",
            "statusMessages": [{"title": "x.mkv", "messages": ["Sample"]}],
            "protocol": "torrent",
            "id": 8,
        }
    )

    assert item.series.title == "Dark"
    assert item.episode.id == 42
    assert item.status_messages[0].messages == ["Sample"]
    assert item.size_left == 250


def test_non_object_raises_decode_error() -> None:
    with pytest.raises(DecodeError):
        Series.from_dict([{"id": 1}])


def test_nested_non_object_raises_decode_error() -> None:
    with pytest.raises(DecodeError):
        Series.from_dict({"ratings": "8.7"})


def test_non_array_list_field_raises_decode_error() -> None:
    with pytest.raises(DecodeError):
        Series.from_dict({"seasons": {"seasonNumber": 1}})


@pytest.mark.parametrize(
    "value",
    [
        {"id": "five"},
        {"id": True},
        {"id": 5.5},
        {"monitored": "false"},
        {"monitored": 1},
        {"title": 42},
        {"genres": [1]},
        {"genres": ["Drama", {"x": 2}]},
        {"tags": ["x"]},
        {"tags": [True]},
        {"ratings": {"value": "8.7"}},
        {"ratings": {"value": False}},
        {"seasons": [{"statistics": {"sizeOnDisk": "1 GB"}}]},
    ],
)
def test_wrong_scalar_type_raises_decode_error(value: dict) -> None:
    with pytest.raises(DecodeError):
        Series.from_dict(value)


def test_decode_error_names_the_field() -> None:
    with pytest.raises(DecodeError, match="Series.id"):
        Series.from_dict({"id": "five"})


def test_integral_number_decodes_into_float_field() -> None:
    ratings = Ratings.from_dict({"votes": 10, "value": 8})

    assert ratings.value == 8.0
    assert isinstance(ratings.value, float)


def test_system_status_flag_rejects_number() -> None:
    with pytest.raises(DecodeError):
        SystemStatus.from_dict({"isLinux": 1})


def test_null_list_items_decode_to_zero_values() -> None:
    series = Series.from_dict({"genres": ["Drama", None], "tags": [None, 3]})

    assert series.genres == ["Drama", ""]
    assert series.tags == [0, 3]


@pytest.fixture
def populated_payloads(series_payload: dict, episode_payload: dict) -> dict:
    """One payload per top-level record, with every key set."""
    quality = {
        "quality": {"id": 7, "name": "Bluray-1080p"},
        "revision": {"version": 2, "real": 1},
        "proper": True,
    }
    return {
        Series: series_payload,
        Episode: episode_payload,
        EpisodeFile: {
            "seriesId": 5,
            "seasonNumber": 1,
            "relativePath": "Season 01/Dark - S01E02 - Lies.mkv",
            "path": "/tv/Dark/Season 01/Dark - S01E02 - Lies.mkv",
            "size": 2147483648,
            "dateAdded": "2019-04-02T18:25:00Z",
            "sceneName": "Dark.S01E02.1080p.BluRay",
            "quality": quality,
            "qualityCutoffNotMet": False,
            "id": 77,
        },
        Queue: {
            "series": series_payload,
            "episode": episode_payload,
            "quality": quality,
            "size": 2147483648,
            "title": "Dark.S01E02.1080p.BluRay",
            "sizeLeft": 1073741824,
            "status": "Downloading",
            "trackedDownloadStatus": "Warning",
            "statusMessages": [
                {"title": "Dark.S01E02.1080p.BluRay", "messages": ["Sample", "Slow"]}
            ],
            "downloadId": "SABnzbd_nzo_1234",
            "protocol": "usenet",
            "id": 8,
        },
        Calendar: {
            "seriesId": 5,
            "episodeFileId": 77,
            "seasonNumber": 1,
            "episodeNumber": 2,
            "title": "Lies",
            "airDate": "2017-12-01",
            "airDateUtc": "2017-12-01T08:00:00Z",
            "hasFile": True,
            "monitored": True,
            "absoluteEpisodeNumber": 2,
            "series": series_payload,
            "unverifiedSceneNumbering": True,
        },
        DiskSpace: {
            "path": "/tv",
            "label": "media",
            "freeSpace": 1099511627776,
            "totalSpace": 4398046511104,
        },
        Tag: {"label": "4k", "id": 3},
        SystemStatus: {
            "version": "3.0.10.1567",
            "buildTime": "2023-01-15T00:00:00Z",
            "isDebug": False,
            "isProduction": True,
            "isAdmin": True,
            "isUserInteractive": False,
            "startupTime": "2024-01-10T12:00:00Z",
            "appData": "/config",
            "osName": "ubuntu",
            "osVersion": "22.04",
            "isMonoRuntime": True,
            "isMono": True,
            "isLinux": True,
            "isOsx": False,
            "isWindows": False,
            "branch": "main",
            "forms": "forms",
            "sqlliteVersion": "3.40.0",
            "urlBase": "/sonarr",
            "runtimeVersion": "6.12.0.182",
            "runtimeName": "mono",
        },
    }


@pytest.mark.parametrize(
    "model",
    [Series, Episode, EpisodeFile, Queue, Calendar, DiskSpace, Tag, SystemStatus],
    ids=lambda model: model.__name__,
)
def test_populated_record_round_trip(model: type, populated_payloads: dict) -> None:
    payload = populated_payloads[model]

    record = model.from_dict(payload)

    assert record.to_dict() == payload
    assert model.from_dict(json.loads(json.dumps(record.to_dict()))) == record
