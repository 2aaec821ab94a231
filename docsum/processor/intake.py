from pathlib import PurePath

from docsum.config.settings import MAX_UPLOAD_BYTES
from docsum.processor.exceptions import ValidationError
from docsum.processor.models import MediaType

ALLOWED_EXTENSIONS = frozenset({".pdf", ".jpg", ".jpeg", ".png"})


class IntakeValidator:
    """Checks an upload's declared media type, name and size before anything is stored."""

    UNSUPPORTED_TYPE_MESSAGE = "Only PDF and image files are allowed"

    def __init__(self, max_size_bytes: int = MAX_UPLOAD_BYTES) -> None:
        self._max_size_bytes = max_size_bytes

    def validate(
        self,
        media_type: str,
        size_bytes: int,
        file_name: str | None = None,
    ) -> MediaType:
        """Return the parsed media type or raise ValidationError.

        Both the declared MIME type and, when a file name is given, its
        extension must be one of the supported formats.

        Raises:
            ValidationError: on an unsupported type or extension, a negative
                size or an upload larger than the configured limit.
        """
        parsed = MediaType.from_mime(media_type or "")
        if parsed is None:
            raise ValidationError(self.UNSUPPORTED_TYPE_MESSAGE)
        if file_name is not None and PurePath(file_name).suffix.lower() not in ALLOWED_EXTENSIONS:
            raise ValidationError(self.UNSUPPORTED_TYPE_MESSAGE)
        if size_bytes < 0:
            raise ValidationError(f"Invalid file size: {size_bytes}")
        if size_bytes > self._max_size_bytes:
            raise ValidationError(
                f"File size too large. Max {self._max_size_bytes // (1024 * 1024)}MB."
            )
        return parsed
