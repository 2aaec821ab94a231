from abc import ABC, abstractmethod

from docsum.logging.logger import Log


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Page texts joined by newlines and stripped. Scanned PDFs without
            a text layer produce an empty string.

        Raises:
            PdfExtractionError: if the bytes are not a readable PDF.
        """

    @staticmethod
    def join_pages(engine: str, pages: list[str]) -> str:
        """Join per-page text, noting pages that carry no text layer."""
        blank = [number for number, text in enumerate(pages, start=1) if not text.strip()]
        if blank:
            Log.info(
                f"{engine}: {len(blank)} of {len(pages)} pages have no text layer "
                f"(pages {', '.join(map(str, blank))})"
            )
        Log.debug(f"{engine}: read {len(pages)} pages")
        return "\n".join(text for text in pages if text.strip()).strip()
