"""Service: pipeline fetch -> resize -> upload -> record."""

from typing import Any, Callable, List, NamedTuple, Optional

from aws_lambda_powertools import Logger

from errors import ImageResizeError
from imaging import resize_image
from repository import ImageBucketRepository, MetadataRepository
from schemas import ImageMetadata, ResizeSettings

logger = Logger(service="image-resize")


class ResizeContext:
    """Dados de uma execução do pipeline (uma imagem)."""

    def __init__(self, settings: ResizeSettings, source_key: str) -> None:
        self.settings = settings
        self.source_key = source_key
        self.resized_key: Optional[str] = None

    def log_fields(self) -> dict:
        return {
            "source_bucket": self.settings.source_bucket,
            "source_key": self.source_key,
            "target_bucket": self.settings.target_bucket,
            "resized_key": self.resized_key,
        }


class Stage(NamedTuple):
    name: str
    run: Callable[[ResizeContext, Any], Any]


def run_stages(stages: List[Stage], context: ResizeContext, value: Any = None) -> Any:
    """
    Executa as etapas em ordem, passando a saída de uma como entrada da próxima.

    Para na primeira falha e propaga o erro sem desfazer as etapas anteriores
    (ex: imagem já enviada fica no bucket se a gravação de metadados falhar).
    """
    for stage in stages:
        try:
            value = stage.run(context, value)
        except ImageResizeError:
            logger.warning(f"Etapa {stage.name} falhou", extra=context.log_fields())
            raise
        logger.info(f"Etapa {stage.name} concluída", extra=context.log_fields())
    return value


class ImageResizeService:
    """Redimensiona a imagem enviada ao bucket de origem e registra os metadados."""

    def __init__(
        self,
        settings: Optional[ResizeSettings] = None,
        s3_client=None,
        dynamodb_client=None,
    ) -> None:
        self.settings = settings or ResizeSettings.from_env()
        self.images = ImageBucketRepository(s3_client)
        self.metadata = MetadataRepository(dynamodb_client)
        self.stages = [
            Stage("fetch", self._fetch_stage),
            Stage("resize", self._resize_stage),
            Stage("upload", self._upload_stage),
            Stage("record", self._record_stage),
        ]

    def process(self, source_key: str) -> ImageMetadata:
        """Roda o pipeline completo para uma chave e retorna o registro gravado."""
        context = ResizeContext(self.settings, source_key)
        return run_stages(self.stages, context)

    def fetch_image(self, bucket: str, key: str) -> bytes:
        return self.images.fetch(bucket, key)

    def resize_image(self, image_data: bytes) -> bytes:
        return resize_image(image_data)

    def upload_image(self, bucket: str, key: str, image_data: bytes) -> str:
        return self.images.upload(bucket, key, image_data)

    def record_metadata(
        self,
        table_name: str,
        source_bucket: str,
        source_image: str,
        target_bucket: str,
        resized_image: str,
    ) -> ImageMetadata:
        metadata = ImageMetadata(
            source_bucket=source_bucket,
            source_image=source_image,
            target_bucket=target_bucket,
            resized_image=resized_image,
        )
        self.metadata.put(table_name, metadata)
        return metadata

    def _fetch_stage(self, context: ResizeContext, _: Any) -> bytes:
        return self.fetch_image(context.settings.source_bucket, context.source_key)

    def _resize_stage(self, context: ResizeContext, image_data: bytes) -> bytes:
        return self.resize_image(image_data)

    def _upload_stage(self, context: ResizeContext, resized_data: bytes) -> str:
        context.resized_key = self.upload_image(
            context.settings.target_bucket, context.source_key, resized_data
        )
        return context.resized_key

    def _record_stage(self, context: ResizeContext, resized_key: str) -> ImageMetadata:
        return self.record_metadata(
            context.settings.table_name,
            context.settings.source_bucket,
            context.source_key,
            context.settings.target_bucket,
            resized_key,
        )
