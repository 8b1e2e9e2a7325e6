"""Erros do pipeline de redimensionamento: um por etapa."""


class ImageResizeError(Exception):
    """Base para falhas do pipeline. `step` identifica a etapa que falhou."""

    step = "unknown"


class FetchError(ImageResizeError):
    """Objeto de origem inexistente ou falha ao ler o corpo no S3."""

    step = "fetch"

    def __init__(self, bucket: str, key: str, reason: str) -> None:
        self.bucket = bucket
        self.key = key
        super().__init__(
            f"failed to fetch image '{key}' from the '{bucket}' bucket: {reason}"
        )


class DecodeError(ImageResizeError):
    """Bytes recebidos não são um JPEG válido."""

    step = "resize"

    def __init__(self, reason: str) -> None:
        super().__init__(f"failed to decode input image: {reason}")


class EncodeError(ImageResizeError):
    """Falha ao gerar o JPEG redimensionado."""

    step = "resize"

    def __init__(self, reason: str) -> None:
        super().__init__(f"failed to encode resized image: {reason}")


class UploadError(ImageResizeError):
    """Falha ao gravar a imagem redimensionada no bucket de destino."""

    step = "upload"

    def __init__(self, bucket: str, key: str, reason: str) -> None:
        self.bucket = bucket
        self.key = key
        super().__init__(
            f"failed to upload resized image '{key}' to the '{bucket}' bucket: {reason}"
        )


class RecordError(ImageResizeError):
    """Falha ao gravar a linha de metadados no DynamoDB."""

    step = "record"

    def __init__(self, table: str, reason: str) -> None:
        self.table = table
        super().__init__(f"failed to write metadata to the '{table}' table: {reason}")
