"""Shared fixtures: a fake ``requests.Session`` injected into the client."""

import json
from dataclasses import dataclass
from urllib.parse import parse_qs, urlsplit

import pytest

from sonarrpy.sonarr import SonarrClient

BASE_URL = "http://sonarr.local:8989/api"
API_KEY = "secret-key"


class FakeResponse:
    """Stand-in for ``requests.Response`` that records being released."""

    def __init__(self, payload=None, status_code=200, text=None):
        self.payload = payload
        self.status_code = status_code
        self.text = text
        self.closed = False

    def json(self):
        if self.text is not None:
            return json.loads(self.text)
        return self.payload

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.closed = True


@dataclass
class Call:
    method: str
    url: str
    data: str | None
    headers: dict | None

    @property
    def path(self) -> str:
        return urlsplit(self.url).path

    @property
    def query(self) -> dict[str, str]:
        return {k: v[-1] for k, v in parse_qs(urlsplit(self.url).query).items()}


class FakeSession:
    """Records every request and replays queued responses in order."""

    def __init__(self):
        self.calls: list[Call] = []
        self.responses: list[FakeResponse] = []
        self.error: Exception | None = None

    def reply(self, payload=None, status_code=200, text=None) -> FakeResponse:
        response = FakeResponse(payload, status_code=status_code, text=text)
        self.responses.append(response)
        return response

    def request(self, method, url, data=None, headers=None):
        self.calls.append(Call(method, url, data, headers))
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> SonarrClient:
    return SonarrClient(BASE_URL, API_KEY, session=session)


@pytest.fixture
def series_payload() -> dict:
    """A series as returned by GET series/{id}."""
    return {
        "title": "Dark",
        "alternateTitles": [{"title": "Dark (2017)", "seasonNumber": -1}],
        "sortTitle": "dark",
        "seasonCount": 3,
        "totalEpisodeCount": 26,
        "episodeCount": 26,
        "episodeFileCount": 24,
        "sizeOnDisk": 52428800000,
        "status": "ended",
        "overview": "A family saga with a supernatural twist.",
        "previousAiring": "2020-06-27T07:00:00Z",
        "network": "Netflix",
        "airTime": "03:00",
        "images": [{"coverType": "poster"}, {"coverType": "fanart"}],
        "seasons": [
            {
                "seasonNumber": 1,
                "monitored": True,
                "statistics": {
                    "previousAiring": "2017-12-01T08:00:00Z",
                    "episodeFileCount": 10,
                    "episodeCount": 10,
                    "totalEpisodeCount": 10,
                    "sizeOnDisk": 21474836480,
                    "percentOfEpisodes": 100,
                },
            }
        ],
        "year": 2017,
        "path": "/tv/Dark",
        "profileId": 1,
        "seasonFolder": True,
        "monitored": True,
        "useSceneNumbering": False,
        "runtime": 60,
        "tvdbId": 334824,
        "tvRageId": 0,
        "tvMazeId": 17861,
        "firstAired": "2017-12-01T00:00:00Z",
        "lastInfoSync": "2024-01-10T12:00:00Z",
        "seriesType": "standard",
        "cleanTitle": "dark",
        "imdbId": "tt5753856",
        "titleSlug": "dark",
        "certification": "TV-MA",
        "genres": ["Drama", "Mystery"],
        "tags": [1, 3],
        "added": "2019-04-02T18:20:11Z",
        "ratings": {"votes": 1200, "value": 8.7},
        "qualityProfileId": 1,
        "id": 5,
    }


@pytest.fixture
def episode_payload() -> dict:
    return {
        "seriesId": 5,
        "episodeFileID": 77,
        "seasonNumber": 1,
        "episodeNumber": 2,
        "title": "Lies",
        "airDate": "2017-12-01",
        "airDateUTC": "2017-12-01T08:00:00Z",
        "overview": "Ulrich searches for Mikkel.",
        "hasFile": True,
        "monitored": True,
        "unverifiedSceneNumbering": False,
        "id": 42,
    }
