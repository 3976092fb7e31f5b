"""
Client library for the Sonarr REST API
"""

from .exceptions import (
    ConfigurationError,
    DecodeError,
    SerializationError,
    SonarrError,
    TransportError,
    ValidationError,
)
from .models import (
    Calendar,
    DiskSpace,
    Episode,
    EpisodeFile,
    Quality,
    Queue,
    Season,
    Series,
    SystemStatus,
    Tag,
)
from .sonarr import SonarrClient

__version__ = "1.0.0"

__all__ = [
    "Calendar",
    "ConfigurationError",
    "DecodeError",
    "DiskSpace",
    "Episode",
    "EpisodeFile",
    "Quality",
    "Queue",
    "Season",
    "SerializationError",
    "Series",
    "SonarrClient",
    "SonarrError",
    "SystemStatus",
    "Tag",
    "TransportError",
    "ValidationError",
]
