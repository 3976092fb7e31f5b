"""
Exceptions raised by the Sonarr client
"""


class SonarrError(Exception):
    """Base class for all client errors"""


class ConfigurationError(SonarrError, ValueError):
    """The client could not be constructed (missing or invalid url/key)"""


class ValidationError(SonarrError, ValueError):
    """An argument was rejected before any request was sent"""


class SerializationError(SonarrError, TypeError):
    """A request payload could not be encoded to JSON"""


class TransportError(SonarrError):
    """The HTTP exchange itself failed (connection, DNS, TLS...)"""


class DecodeError(SonarrError, ValueError):
    """The response body is not JSON or does not have the expected shape"""
