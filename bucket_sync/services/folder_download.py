"""
Recursive download of every object under a prefix into a local directory.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from mypy_boto3_s3 import S3Client

from bucket_sync.core.config import BucketConfig, get_bucket_config, get_s3_client, logger
from bucket_sync.core.types import TransferResult
from bucket_sync.services import s3_client
from bucket_sync.services.body import body_to_bytes
from bucket_sync.services.keys import local_path_for


def write_file(file_path: Path, data: bytes) -> None:
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_bytes(data)


def download_object(client: S3Client, bucket: str, key: str, prefix: str, local_dir: str | Path) -> Path:
    """fetches one object and writes it under local_dir, returns the written path"""
    file_path = local_path_for(key, prefix, local_dir)

    # folder marker objects only get a directory
    if key.endswith("/"):
        file_path.mkdir(parents=True, exist_ok=True)
        return file_path

    body = s3_client.get_object_body(client, bucket, key)
    data = body_to_bytes(body, key)
    write_file(file_path, data)

    logger.info(f"Downloaded {key} to {file_path}", extra={"size": len(data)})
    return file_path


def fetch_folder(
    prefix: str,
    local_dir: str | Path,
    client: S3Client | None = None,
    config: BucketConfig | None = None,
) -> TransferResult:
    """
    Download every object under prefix to local_dir/<key without prefix>.

    Follows continuation tokens across listing pages. Objects of a page are
    fetched on a pool of config.max_workers threads. Failures are logged and
    recorded on the returned result, files already written are kept.
    """
    config = config or get_bucket_config()
    client = client or get_s3_client(config)
    bucket = config.bucket_name
    result = TransferResult()

    logger.info("Fetching folder", extra={"bucket": bucket, "prefix": prefix, "local_dir": str(local_dir)})

    try:
        with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
            for page in s3_client.iter_pages(client, bucket, prefix):
                futures = {
                    executor.submit(download_object, client, bucket, key, prefix, local_dir): key for key in page.keys
                }
                for future in as_completed(futures):
                    key = futures[future]
                    try:
                        future.result()
                        result.transferred.append(key)
                    except Exception as e:
                        logger.error(f"Error fetching {key}: {str(e)}", extra={"key": key})
                        result.record_failure(key, e)
    except Exception as e:
        logger.error(f"Error fetching folder: {str(e)}", extra={"prefix": prefix})
        result.record_failure(None, e)

    logger.info(
        f"Fetch complete: {len(result.transferred)} downloaded, {len(result.failures)} failed",
        extra={"prefix": prefix, "status": result.status},
    )
    return result
