import io

from PIL import Image, JpegImagePlugin, UnidentifiedImageError

from errors import DecodeError, EncodeError
from schemas import JPEG_QUALITY, TARGET_HEIGHT, TARGET_WIDTH


def decode_jpeg(image_data: bytes) -> Image.Image:
    """Decodifica o JPEG por completo; nunca devolve imagem parcial."""
    try:
        image = Image.open(io.BytesIO(image_data))
        # MPO (JPEG com segmento multi-picture de câmeras) é subclasse de JpegImageFile
        if not isinstance(image, JpegImagePlugin.JpegImageFile):
            raise DecodeError(f"expected JPEG, got {image.format}")
        # load() força a decodificação inteira (JPEG truncado falha aqui)
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise DecodeError(str(e)) from e
    return image


def resize_image(
    image_data: bytes,
    width: int = TARGET_WIDTH,
    height: int = TARGET_HEIGHT,
    quality: int = JPEG_QUALITY,
) -> bytes:
    """
    Redimensiona para width x height exatos (sem manter proporção) com filtro
    LANCZOS e reencoda como JPEG.

    Raises:
        DecodeError: bytes não são um JPEG válido.
        EncodeError: falha ao gerar o JPEG de saída.
    """
    image = decode_jpeg(image_data)
    if image.mode not in ("L", "RGB", "CMYK"):
        image = image.convert("RGB")
    resized = image.resize((width, height), Image.Resampling.LANCZOS)

    output = io.BytesIO()
    try:
        resized.save(output, format="JPEG", quality=quality)
    except (OSError, ValueError) as e:
        raise EncodeError(str(e)) from e
    return output.getvalue()
