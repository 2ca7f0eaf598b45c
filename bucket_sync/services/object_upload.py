from mypy_boto3_s3 import S3Client

from bucket_sync.core.config import BucketConfig, get_bucket_config, get_s3_client
from bucket_sync.services import s3_client


def save_object(
    prefix: str,
    relative_path: str,
    content: str,
    client: S3Client | None = None,
    config: BucketConfig | None = None,
) -> None:
    """
    Store content at prefix + relative_path in one put, overwriting what is there.
    The key is a plain concatenation and content is sent unchanged. Errors propagate.
    """
    config = config or get_bucket_config()
    client = client or get_s3_client(config)
    s3_client.put_object(client, config.bucket_name, f"{prefix}{relative_path}", content)
