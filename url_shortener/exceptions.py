"""
Exceptions raised by the URL shortener core and its storage backends.

"Not found" is deliberately absent here: expand operations return None
and the HTTP layer turns that into a 404.
"""


class ShortenerError(Exception):
    """Base class for every error raised by the shortener"""


class ConfigurationError(ShortenerError):
    """
    Raised when the shortener cannot be configured or used as configured.

    Examples:
    - data provider missing or not a put/get implementation
    - unknown hash generator
    - no base URL to compose short links with
    """


class DuplicateKeyError(ShortenerError):
    """
    Raised by a data provider when an alias is already taken.

    The offending alias is available as `key`.
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(
            f"Unable to put new value into the storage. Key: {key} isn't unique"
        )
