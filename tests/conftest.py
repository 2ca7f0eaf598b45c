import pytest

from unittest.mock import MagicMock, Mock, patch
import os

from bucket_sync.core.config import BucketConfig, get_bucket_config, get_s3_client


TEST_BUCKET = "test-bucket"


@pytest.fixture(autouse=True)
def clear_config_cache():
    get_bucket_config.cache_clear()
    get_s3_client.cache_clear()
    yield
    get_bucket_config.cache_clear()
    get_s3_client.cache_clear()


@pytest.fixture
def mock_env():
    """Mock environment variables"""
    env_vars = {
        "S3_BUCKET": TEST_BUCKET,
        "S3_ENDPOINT": "http://localhost:9000",
        "AWS_ACCESS_KEY_ID": "test-access-key",
        "AWS_SECRET_ACCESS_KEY": "test-secret-key",
        "AWS_REGION": "eu-west-2",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def bucket_config():
    return BucketConfig(bucket_name=TEST_BUCKET, max_workers=4)


@pytest.fixture
def mock_s3_client():
    """S3 client double, listing an empty prefix unless a test says otherwise"""
    client = MagicMock()
    client.list_objects_v2.return_value = {"IsTruncated": False}
    return client


@pytest.fixture
def lambda_context():
    """Mock Lambda context"""
    context = Mock()
    context.function_name = "test-function"
    context.aws_request_id = "test-request-id"
    return context


@pytest.fixture
def listing():
    """builds list_objects_v2 responses"""

    def build(*keys, next_token=None):
        response = {"Contents": [{"Key": key} for key in keys], "IsTruncated": next_token is not None}
        if next_token:
            response["NextContinuationToken"] = next_token
        return response

    return build
