"""Abstract interface for staged media storage operations."""

from abc import ABC, abstractmethod

from transcriptai.domain.models import StagedUpload


class StorageClient(ABC):
    """Abstract base class for object storage backends."""

    @abstractmethod
    def create_upload_url(self, filename: str, content_type: str) -> StagedUpload:
        """
        Reserves a unique key and returns a presigned URL for writing to it.

        Args:
            filename: Original name of the file, used for its extension.
            content_type: MIME type of the file to be uploaded.

        Returns:
            StagedUpload with the upload URL and the reserved key.

        Raises:
            StorageUploadError: If the URL cannot be generated.
        """

    @abstractmethod
    def create_download_url(self, key: str) -> str:
        """
        Returns a presigned URL for reading an object.

        Raises:
            StorageDownloadError: If the URL cannot be generated.
        """

    @abstractmethod
    def download(self, key: str) -> bytes:
        """
        Downloads an object.

        Args:
            key: The object key in storage.

        Returns:
            The object contents as bytes.

        Raises:
            MediaNotFoundError: If the key does not exist.
            StorageDownloadError: If the download fails.
        """

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Deletes an object.

        Raises:
            StorageDeleteError: If the deletion fails.
        """

    @abstractmethod
    def ensure_bucket_exists(self) -> None:
        """Ensures the configured bucket exists, creating it if necessary."""
