"""Image storage adapters."""

from storefront.storage.fake_adapter import FakeImageStorage
from storefront.storage.local_adapter import LocalImageStorage
from storefront.storage.port import ImageStorage, ImageStorageError

__all__ = ["FakeImageStorage", "ImageStorage", "ImageStorageError", "LocalImageStorage"]
