from unittest.mock import patch

from bucket_sync.cli import main
from bucket_sync.core.types import TransferResult
from bucket_sync.services.exceptions import ConfigurationError


@patch("bucket_sync.cli.fetch_folder")
def test_cli_fetch(mock_fetch, tmp_path, capsys):
    mock_fetch.return_value = TransferResult(transferred=["p/a.txt"])

    assert main(["fetch", "p/", str(tmp_path)]) == 0
    mock_fetch.assert_called_once_with("p/", tmp_path)
    assert "fetch complete: success" in capsys.readouterr().out


@patch("bucket_sync.cli.copy_folder")
def test_cli_copy_failure_exit_code(mock_copy, capsys):
    result = TransferResult()
    result.record_failure("a/x.txt", RuntimeError("denied"))
    mock_copy.return_value = result

    assert main(["copy", "a/", "b/"]) == 1
    out = capsys.readouterr().out
    assert "copy complete: failure" in out
    assert "a/x.txt: RuntimeError: denied" in out


@patch("bucket_sync.cli.save_object")
def test_cli_save_content(mock_save, capsys):
    assert main(["save", "pfx/", "/file.json", "--content", '{"a": 1}']) == 0
    mock_save.assert_called_once_with("pfx/", "/file.json", '{"a": 1}')
    assert "saved: pfx//file.json" in capsys.readouterr().out


@patch("bucket_sync.cli.save_object")
def test_cli_save_from_file(mock_save, tmp_path):
    source = tmp_path / "notes.md"
    source.write_text("# notes\n", encoding="utf-8")

    assert main(["save", "pfx/", "notes.md", "--file", str(source)]) == 0
    mock_save.assert_called_once_with("pfx/", "notes.md", "# notes\n")


@patch("bucket_sync.cli.save_object")
def test_cli_save_error(mock_save, capsys):
    mock_save.side_effect = RuntimeError("boom")

    assert main(["save", "pfx/", "f.txt", "--content", "x"]) == 1
    assert "upload failed -> boom" in capsys.readouterr().out


@patch("bucket_sync.cli.copy_folder")
def test_cli_configuration_error(mock_copy, capsys):
    mock_copy.side_effect = ConfigurationError("S3_BUCKET environment variable is required")

    assert main(["copy", "a/", "b/"]) == 2
    assert "S3_BUCKET" in capsys.readouterr().out


@patch("bucket_sync.cli.save_object")
def test_cli_save_missing_file(mock_save, tmp_path, capsys):
    """Test an unreadable --file exits 1 without uploading"""
    missing = tmp_path / "missing.json"

    assert main(["save", "pfx/", "f.json", "--file", str(missing)]) == 1
    assert f"cannot read {missing}" in capsys.readouterr().out
    mock_save.assert_not_called()
