import os
from typing import List
from urllib.parse import unquote_plus

from pydantic import BaseModel, ConfigDict, Field, field_validator

TARGET_WIDTH = 800
TARGET_HEIGHT = 600
JPEG_QUALITY = 90
RESIZED_PREFIX = "resized-"


class S3Bucket(BaseModel):
    name: str


class S3Object(BaseModel):
    key: str

    @field_validator("key")
    @classmethod
    def decode_key(cls, v: str) -> str:
        """Chaves chegam URL-encoded na notificação (espaço vira '+')."""
        return unquote_plus(v)


class S3Entity(BaseModel):
    bucket: S3Bucket
    object: S3Object


class S3EventRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    event_source: str = Field(..., alias="eventSource")
    event_name: str = Field(..., alias="eventName")
    s3: S3Entity

    @property
    def is_object_created(self) -> bool:
        return self.event_name.startswith("ObjectCreated")


class S3Notification(BaseModel):
    """Payload mínimo da notificação do bucket: só os campos que o pipeline lê."""

    model_config = ConfigDict(populate_by_name=True)

    records: List[S3EventRecord] = Field(..., alias="Records", min_length=1)


class ResizeSettings(BaseModel):
    """
    Configuração lida do ambiente no início da invocação.

    Valores ausentes viram string vazia e não são validados aqui: o erro
    aparece na chamada ao S3/DynamoDB.
    """

    source_bucket: str = ""
    target_bucket: str = ""
    table_name: str = ""

    @classmethod
    def from_env(cls) -> "ResizeSettings":
        return cls(
            source_bucket=os.environ.get("IMAGE_BUCKET", ""),
            target_bucket=os.environ.get("RESIZED_BUCKET", ""),
            table_name=os.environ.get("TABLE_NAME", ""),
        )


class ImageMetadata(BaseModel):
    """Linha gravada na tabela de metadados para cada imagem redimensionada."""

    source_bucket: str
    source_image: str
    target_bucket: str
    resized_image: str

    def to_dynamodb_item(self) -> dict:
        return {
            "sourceBucketName": {"S": self.source_bucket},
            "sourceImageName": {"S": self.source_image},
            "targetBucketName": {"S": self.target_bucket},
            "resizedImageName": {"S": self.resized_image},
        }
