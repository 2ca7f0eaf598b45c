"""
Core configuration for bucket sync.
Sets up the logger, the bucket settings and the S3 client we need.
"""

from dataclasses import dataclass
from functools import lru_cache
import os
import traceback
import boto3
from botocore.config import Config
from aws_lambda_powertools import Logger
from aws_lambda_powertools.logging import utils
from mypy_boto3_s3 import S3Client

from bucket_sync.services.exceptions import ConfigurationError

# we use lru_cache for configs so they are only built once


@lru_cache()
def get_logger() -> Logger:
    powertools_logger = Logger(service="bucketSync", level=os.environ.get("LOG_LEVEL", "INFO"))
    utils.copy_config_to_registered_loggers(source_logger=powertools_logger, ignore_log_level=True)
    return powertools_logger


# set up logger as its used in other functions
logger = get_logger()


@dataclass(frozen=True)
class BucketConfig:
    bucket_name: str
    endpoint_url: str | None = None
    access_key_id: str | None = None
    secret_access_key: str | None = None
    region: str = "eu-west-2"
    max_workers: int = 8
    connect_timeout: float = 10
    read_timeout: float = 60


def _read_number(name: str, default, cast):
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {raw!r}")
    return value


@lru_cache()
def get_bucket_config() -> BucketConfig:
    bucket_name = os.environ.get("S3_BUCKET", "")
    if not bucket_name:
        logger.error("Configuration error", extra={"error": "S3_BUCKET is not set"})
        raise ConfigurationError("S3_BUCKET environment variable is required")

    try:
        return BucketConfig(
            bucket_name=bucket_name,
            endpoint_url=os.environ.get("S3_ENDPOINT") or None,
            access_key_id=os.environ.get("AWS_ACCESS_KEY_ID") or None,
            secret_access_key=os.environ.get("AWS_SECRET_ACCESS_KEY") or None,
            region=os.environ.get("AWS_REGION", "eu-west-2"),
            max_workers=_read_number("S3_MAX_WORKERS", 8, int),
            connect_timeout=_read_number("S3_CONNECT_TIMEOUT", 10, float),
            read_timeout=_read_number("S3_READ_TIMEOUT", 60, float),
        )
    except ConfigurationError:
        logger.error("Configuration error", extra={"error": traceback.format_exc()})
        raise


@lru_cache()
def get_s3_client(config: BucketConfig | None = None) -> S3Client:
    config = config or get_bucket_config()

    kwargs = {
        "region_name": config.region,
        "config": Config(
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
            retries={"mode": "standard"},
        ),
    }
    if config.endpoint_url:
        kwargs["endpoint_url"] = config.endpoint_url
    # fall back to the default credential chain when no explicit keys are set
    if config.access_key_id and config.secret_access_key:
        kwargs["aws_access_key_id"] = config.access_key_id
        kwargs["aws_secret_access_key"] = config.secret_access_key

    logger.info(
        "Creating S3 client",
        extra={"bucket": config.bucket_name, "endpoint": config.endpoint_url, "region": config.region},
    )
    return boto3.client("s3", **kwargs)
