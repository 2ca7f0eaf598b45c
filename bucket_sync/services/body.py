"""
normalizes the Body of a get_object response into bytes

boto3 hands back a StreamingBody, but fakes, compatible services and callers
wrapping the client give us bytes, str, byte arrays or chunk iterators too.
"""

from collections.abc import Iterator
from typing import Any

from bucket_sync.services.exceptions import UnsupportedBodyTypeError

CHUNK_SIZE = 1024 * 1024


def _as_bytes(chunk: Any, key: str) -> bytes:
    if isinstance(chunk, bytes):
        return chunk
    if isinstance(chunk, str):
        return chunk.encode("utf-8")
    if isinstance(chunk, (bytearray, memoryview)):
        return bytes(chunk)
    raise UnsupportedBodyTypeError(key, type(chunk))


def _read_stream(stream: Any, key: str) -> bytes:
    chunks = []
    while True:
        chunk = stream.read(CHUNK_SIZE)
        if not chunk:
            break
        chunks.append(_as_bytes(chunk, key))
    return b"".join(chunks)


def body_to_bytes(body: Any, key: str = "<unknown>") -> bytes:
    """
    Convert an object body to bytes.

    Accepts bytes, str (utf-8), bytearray/memoryview, readable streams and
    iterators of byte chunks. Raises UnsupportedBodyTypeError for anything else.
    """
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    if isinstance(body, (bytearray, memoryview)):
        return bytes(body)
    if callable(getattr(body, "read", None)):
        return _read_stream(body, key)
    if isinstance(body, Iterator):
        return b"".join(_as_bytes(chunk, key) for chunk in body)
    raise UnsupportedBodyTypeError(key, type(body))
