"""Handler: disparado por notificação ObjectCreated do bucket de origem."""

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.parser import parse
from aws_lambda_powertools.utilities.typing import LambdaContext

from schemas import ResizeSettings, S3Notification
from service import ImageResizeService

logger = Logger(service="image-resize")


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext):
    """Redimensiona cada imagem criada; a primeira falha interrompe e é propagada ao runtime."""
    try:
        notification: S3Notification = parse(event=event, model=S3Notification)
        settings = ResizeSettings.from_env()
        service = ImageResizeService(settings)

        results = []
        for record in notification.records:
            extra = {
                "event_source": record.event_source,
                "event_name": record.event_name,
                "key": record.s3.object.key,
            }
            if not record.is_object_created:
                logger.info("Evento ignorado", extra=extra)
                continue
            logger.info("Processando imagem", extra=extra)
            metadata = service.process(record.s3.object.key)
            results.append(metadata.model_dump())

        logger.info("Redimensionamento concluído", extra={"processed": len(results)})
        return {"statusCode": 200, "body": {"processed": len(results), "results": results}}
    except Exception:
        logger.exception("Erro no redimensionamento de imagem")
        raise
