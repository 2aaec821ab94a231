import io

import pdfplumber

from docsum.pdf.base import BasePdfExtractor
from docsum.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts flowed page text from a PDF using pdfplumber's layout analysis."""

    ENGINE = "pdfplumber"

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                if not pdf.pages:
                    raise PdfExtractionError("PDF has no pages")
                page_texts = [page.extract_text() or "" for page in pdf.pages]
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"{self.ENGINE} could not parse document: {exc}") from exc
        return self.join_pages(self.ENGINE, page_texts)
