"""Filesystem image storage."""

from pathlib import Path
from uuid import uuid4

import structlog

from storefront.storage.port import ImageStorage, ImageStorageError

logger = structlog.get_logger(__name__)


class LocalImageStorage(ImageStorage):
    """Writes images into a local directory under a random name.

    The original extension is kept so that the reference can be served with
    the right content type.
    """

    def store(self, destination: str, image: bytes, filename: str) -> str:
        reference = f"{uuid4()}{Path(filename).suffix}"
        folder = Path(destination)

        try:
            folder.mkdir(parents=True, exist_ok=True)
            (folder / reference).write_bytes(image)
        except OSError as exc:
            raise ImageStorageError(f"Could not store image {filename} in {destination}: {exc}") from exc

        logger.info("Image stored", destination=str(folder), reference=reference, size=len(image))
        return reference

    def discard(self, destination: str, reference: str) -> None:
        try:
            (Path(destination) / reference).unlink(missing_ok=True)
        except OSError as exc:
            raise ImageStorageError(f"Could not remove image {reference} from {destination}: {exc}") from exc

        logger.info("Image discarded", destination=destination, reference=reference)
