"""
Server-side copy of every object under one prefix to another prefix of the same bucket.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from mypy_boto3_s3 import S3Client

from bucket_sync.core.config import BucketConfig, get_bucket_config, get_s3_client, logger
from bucket_sync.core.types import TransferResult
from bucket_sync.services import s3_client
from bucket_sync.services.keys import rewrite_key


def copy_object(client: S3Client, bucket: str, key: str, source_prefix: str, destination_prefix: str) -> str:
    destination_key = rewrite_key(key, source_prefix, destination_prefix)
    s3_client.copy_s3_object(client, bucket, key, bucket, destination_key)
    logger.info(f"Copied {key} to {destination_key}")
    return destination_key


def copy_folder(
    source_prefix: str,
    destination_prefix: str,
    continuation_token: str | None = None,
    client: S3Client | None = None,
    config: BucketConfig | None = None,
) -> TransferResult:
    """
    Copy every object under source_prefix to the same key under destination_prefix.

    Listing starts at continuation_token. A page is only listed after every copy
    of the page before it has finished, and it is requested with that page's
    NextContinuationToken. A listing failure stops pagination; copy failures are
    recorded and the remaining objects are still copied.
    """
    config = config or get_bucket_config()
    client = client or get_s3_client(config)
    bucket = config.bucket_name
    result = TransferResult()

    logger.info(
        "Copying folder",
        extra={"bucket": bucket, "source_prefix": source_prefix, "destination_prefix": destination_prefix},
    )

    try:
        with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
            for page in s3_client.iter_pages(client, bucket, source_prefix, continuation_token):
                if not page.keys:
                    logger.info("No objects to copy", extra={"source_prefix": source_prefix})
                    continue

                futures = {
                    executor.submit(copy_object, client, bucket, key, source_prefix, destination_prefix): key
                    for key in page.keys
                }
                for future in as_completed(futures):
                    key = futures[future]
                    try:
                        future.result()
                        result.transferred.append(key)
                    except Exception as e:
                        logger.error(f"Error copying {key}: {str(e)}", extra={"key": key})
                        result.record_failure(key, e)
    except Exception as e:
        logger.error(f"Error copying folder: {str(e)}", extra={"source_prefix": source_prefix})
        result.record_failure(None, e)

    logger.info(
        f"Copy complete: {len(result.transferred)} copied, {len(result.failures)} failed",
        extra={"source_prefix": source_prefix, "destination_prefix": destination_prefix, "status": result.status},
    )
    return result
