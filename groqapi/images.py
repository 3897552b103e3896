"""
Image helpers for vision requests.

All checks run client-side before any network call.
"""

import base64
import logging
from pathlib import Path
from typing import Any, Dict, Union
from urllib.parse import urlparse

from .config import MAX_BASE64_SIZE_MB, VISION_MODEL_11B, VISION_MODEL_90B
from .exceptions import GroqFileNotFoundError, GroqValidationError

logger = logging.getLogger(__name__)

VISION_MODELS = frozenset({VISION_MODEL_90B, VISION_MODEL_11B})


def encode_image_file(image_path: Union[str, Path]) -> str:
    """
    Read an image file and return its base64 encoding.

    Raises:
        GroqFileNotFoundError: If the file does not exist
    """
    path = Path(image_path)
    if not path.is_file():
        raise GroqFileNotFoundError(f"Image file not found: {image_path}")
    return base64.b64encode(path.read_bytes()).decode("ascii")


def validate_vision_model(request_data: Dict[str, Any]) -> None:
    """Check that the request targets a vision-capable model."""
    model = request_data.get("model")
    if not model or model not in VISION_MODELS:
        raise GroqValidationError(
            f"Invalid vision model. Must be one of: {', '.join(sorted(VISION_MODELS))}"
        )


def base64_size_mb(base64_string: str) -> float:
    """Decoded size in megabytes of a base64 string."""
    return (len(base64_string) * 3.0 / 4.0) / (1024 * 1024)


def validate_base64_size(base64_string: str, max_size_mb: int = MAX_BASE64_SIZE_MB) -> None:
    """
    Check that an encoded image stays within ``max_size_mb``.

    The limit is inclusive.
    """
    size_mb = base64_size_mb(base64_string)
    if size_mb > max_size_mb:
        raise GroqValidationError(
            f"Base64 image exceeds the maximum size of {max_size_mb} MB"
        )
    logger.debug("Base64 image size %.2f MB (limit %d MB)", size_mb, max_size_mb)


def validate_image_url(url: str) -> None:
    """Check that ``url`` is a non-empty absolute URL."""
    if not url or not url.strip():
        raise GroqValidationError("Image URL cannot be empty")

    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise GroqValidationError(f"Invalid image URL format: {e}") from e

    if not parsed.scheme or not (parsed.netloc or parsed.scheme == "data"):
        raise GroqValidationError("Invalid image URL format")
