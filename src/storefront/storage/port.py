"""Image storage port (abstract interface).

Product images are written by an adapter and the catalogue only keeps the
reference string the adapter hands back. Swapping LocalImageStorage for
FakeImageStorage (tests) or a bucket-backed adapter requires no change in
the catalogue.
"""

from abc import ABC, abstractmethod


class ImageStorageError(Exception):
    """The image could not be written."""


class ImageStorage(ABC):
    """Abstract image storage interface."""

    @abstractmethod
    def store(self, destination: str, image: bytes, filename: str) -> str:
        """Persist ``image`` under ``destination`` and return its stored reference.

        Failures surface as ``ImageStorageError`` and are not retried.
        """
        ...

    @abstractmethod
    def discard(self, destination: str, reference: str) -> None:
        """Remove a previously stored image. A missing image is not an error."""
        ...
