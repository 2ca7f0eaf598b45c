from pathlib import Path

from bucket_sync.services.exceptions import PrefixMismatchError


def strip_prefix(key: str, prefix: str) -> str:
    """returns the part of key after prefix, rejecting keys listed outside the prefix"""
    if not key.startswith(prefix):
        raise PrefixMismatchError(key, prefix)
    return key[len(prefix) :]


def rewrite_key(key: str, source_prefix: str, destination_prefix: str) -> str:
    """a/x/y.txt under a/ becomes b/x/y.txt under b/"""
    return destination_prefix + strip_prefix(key, source_prefix)


def local_path_for(key: str, prefix: str, local_dir: str | Path) -> Path:
    relative = strip_prefix(key, prefix).lstrip("/")
    # a leading slash would make pathlib discard local_dir
    return Path(local_dir) / relative
