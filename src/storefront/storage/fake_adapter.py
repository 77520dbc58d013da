"""In-memory image storage for development and testing.

Keeps stored images in a dict and can be configured at runtime to fail,
which makes the error path of image updates testable.
"""

from uuid import uuid4

from storefront.storage.port import ImageStorage, ImageStorageError


class FakeImageStorage(ImageStorage):
    """Configurable fake image storage."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Disk full"
        self.images: dict[str, bytes] = {}
        self.calls: list[dict] = []
        self.discarded: list[str] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Disk full") -> None:
        """Configure storage behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def store(self, destination: str, image: bytes, filename: str) -> str:
        self.calls.append({"destination": destination, "filename": filename, "size": len(image)})

        if not self.should_succeed:
            raise ImageStorageError(self.failure_reason)

        extension = filename.rsplit(".", 1)[-1] if "." in filename else ""
        reference = f"{uuid4().hex}.{extension}" if extension else uuid4().hex
        self.images[reference] = image
        return reference

    def discard(self, destination: str, reference: str) -> None:
        self.images.pop(reference, None)
        self.discarded.append(reference)
