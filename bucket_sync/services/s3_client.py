from typing import Any
from mypy_boto3_s3 import S3Client

from bucket_sync.core.config import logger
from bucket_sync.core.types import ListingPage
from bucket_sync.services.exceptions import IncompleteListingError


def list_objects(client: S3Client, bucket: str, prefix: str, continuation_token: str | None = None) -> ListingPage:
    """
    List one page of objects under a prefix.

    Args:
        client: S3 client
        bucket: S3 bucket name
        prefix: Key prefix to list
        continuation_token: Token from the previous page, None for the first page
    """
    params = {"Bucket": bucket, "Prefix": prefix}
    if continuation_token:
        params["ContinuationToken"] = continuation_token

    response = client.list_objects_v2(**params)
    keys = [obj["Key"] for obj in response.get("Contents", []) if obj.get("Key")]
    page = ListingPage(
        keys=keys,
        is_truncated=bool(response.get("IsTruncated", False)),
        next_continuation_token=response.get("NextContinuationToken"),
    )
    logger.debug(
        "Listed objects",
        extra={"prefix": prefix, "count": len(keys), "is_truncated": page.is_truncated},
    )
    return page


def iter_pages(client: S3Client, bucket: str, prefix: str, continuation_token: str | None = None):
    """
    Yield listing pages in order, each request carrying the token of the page before it.
    The next page is only requested once the caller is done with the current one.
    Raises IncompleteListingError when a truncated page carries no token.
    """
    token = continuation_token
    while True:
        page = list_objects(client, bucket, prefix, token)
        yield page
        if not page.is_truncated:
            return
        if not page.next_continuation_token:
            logger.error("Truncated listing without continuation token", extra={"prefix": prefix})
            raise IncompleteListingError(prefix)
        token = page.next_continuation_token


def get_object_body(client: S3Client, bucket: str, key: str) -> Any:
    """
    Fetch an object and return its raw Body, whatever shape the client hands back.

    Args:
        client: S3 client
        bucket: S3 bucket name
        key: S3 object key
    """
    logger.info(f"Downloading s3://{bucket}/{key}")
    response = client.get_object(Bucket=bucket, Key=key)
    return response.get("Body")


def copy_s3_object(client: S3Client, source_bucket: str, source_key: str, dest_bucket: str, dest_key: str) -> None:
    """
    Copy an object within S3 without moving bytes through this process.

    Args:
        client: S3 client
        source_bucket: Source S3 bucket name
        source_key: Source S3 object key
        dest_bucket: Destination S3 bucket name
        dest_key: Destination S3 object key
    """
    logger.info(f"Copying s3://{source_bucket}/{source_key} to s3://{dest_bucket}/{dest_key}")
    copy_source = {"Bucket": source_bucket, "Key": source_key}
    client.copy_object(CopySource=copy_source, Bucket=dest_bucket, Key=dest_key)
    logger.info("Copy completed")


def put_object(client: S3Client, bucket: str, key: str, body: str | bytes) -> None:
    """
    Store a payload at a key, replacing any existing object.

    Args:
        client: S3 client
        bucket: S3 bucket name
        key: S3 object key
        body: Payload, sent as is
    """
    logger.info(f"Uploading to s3://{bucket}/{key}", extra={"size": len(body)})
    client.put_object(Bucket=bucket, Key=key, Body=body)
    logger.info("Upload completed")
