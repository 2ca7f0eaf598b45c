#!/usr/bin/env python3
"""local cli for running the bucket operations without deploying lambda"""

import argparse
import sys
from pathlib import Path

from bucket_sync.services.exceptions import ConfigurationError
from bucket_sync.services.folder_copy import copy_folder
from bucket_sync.services.folder_download import fetch_folder
from bucket_sync.services.object_upload import save_object


def print_result(action: str, result) -> None:
    print("\n" + "=" * 50)
    print(f"{action} complete: {result.status}")
    print(f"  ok: {len(result.transferred)}")
    print(f"  failed: {len(result.failures)}")
    for failure in result.failures:
        print(f"  ✗ {failure.key or '<listing>'}: {failure.error}")
    print("=" * 50)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bucket-sync", description="move folders between S3 and local disk")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fetch = subparsers.add_parser("fetch", help="download every object under a prefix")
    fetch.add_argument("prefix", help="key prefix to download")
    fetch.add_argument("local_dir", type=Path, help="directory to mirror the objects into")

    copy = subparsers.add_parser("copy", help="copy every object under a prefix to another prefix")
    copy.add_argument("source_prefix")
    copy.add_argument("destination_prefix")

    save = subparsers.add_parser("save", help="store text at prefix + path")
    save.add_argument("prefix")
    save.add_argument("relative_path")
    content = save.add_mutually_exclusive_group(required=True)
    content.add_argument("--content", type=str, help="text to store")
    content.add_argument("--file", type=Path, help="read the text to store from a file")

    return parser


def run(args: argparse.Namespace) -> int:
    if args.command == "fetch":
        result = fetch_folder(args.prefix, args.local_dir)
        print_result("fetch", result)
        return 0 if result.ok else 1

    if args.command == "copy":
        result = copy_folder(args.source_prefix, args.destination_prefix)
        print_result("copy", result)
        return 0 if result.ok else 1

    if args.content is not None:
        text = args.content
    else:
        try:
            text = args.file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"error: cannot read {args.file} -> {e}")
            return 1

    try:
        save_object(args.prefix, args.relative_path, text)
    except Exception as e:
        print(f"error: upload failed -> {e}")
        return 1
    print(f"saved: {args.prefix}{args.relative_path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """cli entrypoint"""
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except ConfigurationError as e:
        print(f"error: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
