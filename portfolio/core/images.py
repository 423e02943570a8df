"""
Image hosting on Cloudinary for blog cover and inline images.
"""

import asyncio
import base64
from typing import Dict

import cloudinary
import cloudinary.uploader

from portfolio.config import config
from portfolio.models.schemas import UploadResult
from portfolio.utils.error_handling import ConfigurationError, ImageUploadError
from portfolio.utils.logger import logging


def _mask(value: str, visible: int) -> str:
    return f"{value[:visible]}..." if value else "MISSING"


def validate_credentials() -> Dict[str, str]:
    """
    Validate and apply the Cloudinary credentials.

    Returns:
        The credentials in Cloudinary's config naming

    Raises:
        ConfigurationError: If any credential is missing
    """
    cloud_name = config.CLOUDINARY_CLOUD_NAME
    api_key = config.CLOUDINARY_API_KEY
    api_secret = config.CLOUDINARY_API_SECRET

    logging.debug(
        f"Cloudinary config check: cloud_name={_mask(cloud_name, 3)}, "
        f"api_key={_mask(api_key, 5)}, api_secret={_mask(api_secret, 5)}"
    )

    if not cloud_name or not api_key or not api_secret:
        raise ConfigurationError(
            "Missing Cloudinary credentials. Check CLOUDINARY_CLOUD_NAME, "
            "CLOUDINARY_API_KEY, CLOUDINARY_API_SECRET in .env"
        )

    credentials = {"cloud_name": cloud_name, "api_key": api_key, "api_secret": api_secret}
    cloudinary.config(**credentials)
    return credentials


def _upload_to_host(data: bytes, content_type: str, folder: str) -> UploadResult:
    """Blocking upload of an image as a base64 data URI."""
    encoded = base64.b64encode(data).decode("ascii")
    data_uri = f"data:{content_type};base64,{encoded}"

    logging.info(f"Uploading to Cloudinary... folder={folder}, bytes={len(data)}")
    result = cloudinary.uploader.upload(data_uri, folder=folder, resource_type="image")

    return UploadResult(
        url=result["secure_url"],
        public_id=result["public_id"],
        width=result.get("width"),
        height=result.get("height"),
    )


async def upload_image(
    data: bytes,
    content_type: str = "image/png",
    folder: str = config.UPLOAD_FOLDER,
    timeout: float = config.UPLOAD_TIMEOUT_SECONDS,
) -> UploadResult:
    """
    Upload an image, giving up after a fixed timeout.

    Args:
        data: Raw image bytes
        content_type: MIME type used in the data URI
        folder: Cloudinary folder
        timeout: Seconds to wait for the upload

    Returns:
        UploadResult with the hosted URL

    Raises:
        ConfigurationError: If credentials are missing
        ImageUploadError: If the upload fails or times out
    """
    validate_credentials()

    try:
        result = await asyncio.wait_for(
            asyncio.to_thread(_upload_to_host, data, content_type, folder),
            timeout=timeout,
        )
    except asyncio.TimeoutError:
        logging.error(f"Cloudinary upload timed out after {timeout:g} seconds")
        raise ImageUploadError(
            f"Cloudinary upload timed out after {timeout:g} seconds. Check your credentials."
        )
    except Exception as e:
        logging.error(f"Cloudinary upload failed: {e}")
        raise ImageUploadError(str(e) or "Cloudinary upload failed") from e

    logging.info(f"Cloudinary upload success: {result.url}")
    return result


def delete_image(public_id: str) -> None:
    """Delete a hosted image by its public ID."""
    validate_credentials()
    result = cloudinary.uploader.destroy(public_id)
    logging.info(f"Deleted Cloudinary image {public_id}: {result}")
