from docsum.processor.exceptions import FileReadError
from docsum.processor.models import UploadedDocument


class FileLoader:
    """Reads the bytes of a document back from transient storage."""

    def load(self, document: UploadedDocument) -> bytes:
        """Read document bytes from disk.

        Raises:
            FileReadError: if the stored file is missing or unreadable.
        """
        path = document.storage_path
        try:
            return path.read_bytes()
        except FileNotFoundError as exc:
            raise FileReadError(f"File not found: {path}") from exc
        except OSError as exc:
            raise FileReadError(f"Could not read {path}: {exc}") from exc
