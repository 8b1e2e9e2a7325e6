"""Repository: acesso ao S3 (imagens) e ao DynamoDB (metadados)."""

from botocore.exceptions import BotoCoreError, ClientError

from shared.aws import get_dynamodb_client, get_s3_client
from errors import FetchError, RecordError, UploadError
from schemas import ImageMetadata, RESIZED_PREFIX


class ImageBucketRepository:
    """Lê a imagem original e grava a redimensionada."""

    CONTENT_TYPE = "image/jpeg"

    def __init__(self, client=None) -> None:
        self.s3 = client or get_s3_client()

    def fetch(self, bucket: str, key: str) -> bytes:
        """Baixa o objeto inteiro. Objeto inexistente ou falha de leitura viram FetchError."""
        try:
            response = self.s3.get_object(Bucket=bucket, Key=key)
            return response["Body"].read()
        except (ClientError, BotoCoreError) as e:
            raise FetchError(bucket, key, str(e)) from e

    @staticmethod
    def resized_key(key: str) -> str:
        return f"{RESIZED_PREFIX}{key}"

    def upload(self, bucket: str, key: str, data: bytes) -> str:
        """Grava em resized-<key> (sobrescreve se existir) e retorna a chave de destino."""
        resized_key = self.resized_key(key)
        try:
            self.s3.put_object(
                Bucket=bucket,
                Key=resized_key,
                Body=data,
                ContentType=self.CONTENT_TYPE,
            )
        except (ClientError, BotoCoreError) as e:
            raise UploadError(bucket, resized_key, str(e)) from e
        return resized_key


class MetadataRepository:
    def __init__(self, client=None) -> None:
        self.dynamodb = client or get_dynamodb_client()

    def put(self, table_name: str, metadata: ImageMetadata) -> None:
        """Uma escrita por chamada; sem checagem de duplicidade."""
        try:
            self.dynamodb.put_item(TableName=table_name, Item=metadata.to_dynamodb_item())
        except (ClientError, BotoCoreError) as e:
            raise RecordError(table_name, str(e)) from e
