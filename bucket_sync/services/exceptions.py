"""Service-level exceptions for bucket sync."""


class ConfigurationError(Exception):
    """Raised when there's a configuration issue"""

    pass


class UnsupportedBodyTypeError(TypeError):
    """Raised when an object body is not bytes, str, a byte array, a stream or a chunk iterator"""

    def __init__(self, key: str, body_type: type):
        self.key = key
        self.body_type = body_type
        super().__init__(f"Unsupported data type in S3 response Body for {key}: {body_type.__name__}")


class PrefixMismatchError(ValueError):
    """Raised when a listed key does not start with the prefix it was listed under"""

    def __init__(self, key: str, prefix: str):
        self.key = key
        self.prefix = prefix
        super().__init__(f"Key {key!r} does not start with prefix {prefix!r}")


class IncompleteListingError(RuntimeError):
    """Raised when a listing says it is truncated but gives no token for the next page"""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(f"Listing under {prefix!r} is truncated but has no continuation token")
