import uuid
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from docsum.logging.logger import Log
from docsum.processor.exceptions import StorageError
from docsum.processor.models import MediaType, UploadedDocument


class TransientFileStore:
    """Holds uploads on disk only for as long as one request needs them."""

    def __init__(self, upload_dir: Path) -> None:
        self._upload_dir = upload_dir

    def save(self, content: bytes, media_type: MediaType) -> Path:
        """Write content under a fresh unique name.

        Raises:
            StorageError: if the file cannot be written. No partial file is left behind.
        """
        path = self._upload_dir / f"document-{uuid.uuid4().hex}{media_type.suffix}"
        try:
            self._upload_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as exc:
            self._release(path)
            raise StorageError(f"Could not store upload: {exc}") from exc
        return path

    def delete(self, path: Path) -> bool:
        """Remove a stored file. Returns False if it was already gone."""
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        return True

    @contextmanager
    def transient_document(
        self,
        content: bytes,
        *,
        file_name: str,
        media_type: MediaType,
    ) -> Generator[UploadedDocument, None, None]:
        """Store an upload and guarantee its removal when the block exits."""
        path = self.save(content, media_type)
        document = UploadedDocument(
            file_name=file_name,
            media_type=media_type,
            size_bytes=len(content),
            storage_path=path,
        )
        Log.debug(f"Stored {file_name} ({len(content)} bytes) at {path}")
        try:
            yield document
        finally:
            self._release(path)

    def _release(self, path: Path) -> None:
        # Never raises; failures are only logged.
        try:
            removed = self.delete(path)
        except OSError as exc:
            Log.error(f"Failed to remove transient file {path}: {exc}")
            return
        if removed:
            Log.debug(f"Removed transient file {path}")
        else:
            Log.debug(f"Transient file {path} was already removed")
