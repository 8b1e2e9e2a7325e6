import io
import sys
from pathlib import Path

import pytest
from botocore.exceptions import ClientError
from PIL import Image

# Para testes de image_resize, força src/image_resize no topo do path
_root = Path(__file__).resolve().parents[2]
function_path = str(_root / "src" / "image_resize")
src_path = str(_root / "src")

for path in [function_path, src_path]:
    if path in sys.path:
        sys.path.remove(path)
    sys.path.insert(0, path)

from schemas import ResizeSettings  # noqa: E402

SOURCE_BUCKET = "image-bucket"
TARGET_BUCKET = "resized-bucket"
TABLE_NAME = "image-metadata"


def make_jpeg(width: int = 1024, height: int = 768, color=(200, 30, 60), mode: str = "RGB") -> bytes:
    buffer = io.BytesIO()
    Image.new(mode, (width, height), color).save(buffer, format="JPEG")
    return buffer.getvalue()


class FakeS3Client:
    """S3 em memória: get_object/put_object com os mesmos kwargs do boto3."""

    def __init__(self, objects: dict = None) -> None:
        self.objects = dict(objects or {})
        self.put_calls = []
        self.fail_put = False

    def get_object(self, Bucket: str, Key: str) -> dict:
        if (Bucket, Key) not in self.objects:
            raise ClientError(
                {"Error": {"Code": "NoSuchKey", "Message": "The specified key does not exist."}},
                "GetObject",
            )
        return {"Body": io.BytesIO(self.objects[(Bucket, Key)])}

    def put_object(self, Bucket: str, Key: str, Body: bytes, **kwargs) -> dict:
        self.put_calls.append({"Bucket": Bucket, "Key": Key, **kwargs})
        if self.fail_put:
            raise ClientError(
                {"Error": {"Code": "AccessDenied", "Message": "Access Denied"}},
                "PutObject",
            )
        self.objects[(Bucket, Key)] = Body
        return {}


class FakeDynamoDBClient:
    def __init__(self) -> None:
        self.items = []
        self.fail_put = False

    def put_item(self, TableName: str, Item: dict) -> dict:
        if self.fail_put:
            raise ClientError(
                {"Error": {"Code": "ResourceNotFoundException", "Message": "Requested resource not found"}},
                "PutItem",
            )
        self.items.append((TableName, Item))
        return {}


class FakeLambdaContext:
    function_name = "image-resize"
    memory_limit_in_mb = 128
    invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:image-resize"
    aws_request_id = "52fdfc07-2182-154f-163f-5f0f9a621d72"
    tenant_id = None


@pytest.fixture
def jpeg_factory():
    return make_jpeg


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_jpeg()


@pytest.fixture
def settings() -> ResizeSettings:
    return ResizeSettings(
        source_bucket=SOURCE_BUCKET,
        target_bucket=TARGET_BUCKET,
        table_name=TABLE_NAME,
    )


@pytest.fixture
def s3_client(jpeg_bytes: bytes) -> FakeS3Client:
    return FakeS3Client({(SOURCE_BUCKET, "test.jpg"): jpeg_bytes})


@pytest.fixture
def dynamodb_client() -> FakeDynamoDBClient:
    return FakeDynamoDBClient()


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    return FakeLambdaContext()
