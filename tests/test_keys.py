from pathlib import Path

import pytest

from bucket_sync.services.exceptions import PrefixMismatchError
from bucket_sync.services.keys import local_path_for, rewrite_key, strip_prefix


def test_rewrite_key_replaces_prefix():
    assert rewrite_key("a/x/y.txt", "a/", "b/") == "b/x/y.txt"


def test_rewrite_key_only_replaces_leading_prefix():
    assert rewrite_key("a/a/a.txt", "a/", "b/") == "b/a/a.txt"


def test_rewrite_key_empty_source_prefix():
    assert rewrite_key("x.txt", "", "backup/") == "backup/x.txt"


def test_strip_prefix_rejects_foreign_key():
    with pytest.raises(PrefixMismatchError) as exc_info:
        strip_prefix("other/x.txt", "a/")

    assert exc_info.value.key == "other/x.txt"
    assert exc_info.value.prefix == "a/"


def test_local_path_for_mirrors_key(tmp_path):
    assert local_path_for("code/base/src/index.js", "code/base", tmp_path) == tmp_path / "src" / "index.js"


def test_local_path_for_accepts_str_dir():
    assert local_path_for("p/file.txt", "p/", "/tmp/out") == Path("/tmp/out/file.txt")
