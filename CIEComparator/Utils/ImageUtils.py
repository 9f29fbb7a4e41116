import base64
import io
import logging

from PIL import Image

logger = logging.getLogger(__name__)


def ExportPNG(image: Image.Image, filename: str) -> None:
    """
    Save a rendered diagram as PNG.

    Args:
        image (Image.Image): rendered RGBA raster
        filename (str): destination path
    """
    image.save(filename, format="PNG")
    logger.info(f"Saved {image.size[0]}x{image.size[1]} diagram to {filename}")


def ImageToDataURI(image: Image.Image) -> str:
    """Encode an image as a base64 PNG data URI (data:image/png;base64,...)."""
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    png_base64 = base64.b64encode(buffer.getvalue()).decode('utf-8')
    return f"data:image/png;base64,{png_base64}"

