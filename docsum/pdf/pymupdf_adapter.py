import pymupdf

from docsum.pdf.base import BasePdfExtractor
from docsum.pdf.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts page text from a PDF using PyMuPDF, in reading order."""

    ENGINE = "pymupdf"

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.needs_pass:
                    raise PdfExtractionError("PDF is password protected")
                page_texts = [page.get_text(sort=True) for page in doc]
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"{self.ENGINE} could not parse document: {exc}") from exc
        return self.join_pages(self.ENGINE, page_texts)
