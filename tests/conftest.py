import io

import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from docsum.summarization.client_base import BaseSummarizationClient
from docsum.summarization.exceptions import SummarizationCallError


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def long_two_page_pdf_bytes() -> bytes:
    """Two pages of flowed text, well over 1000 characters in total."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for page in (1, 2):
        y = 740
        for line in range(40):
            c.drawString(72, y, f"Page {page} line {line:02d} of the quarterly report text")
            y -= 16
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def pdf_with_blank_middle_page_bytes() -> bytes:
    """Three pages where the middle one has no text, like an inserted scan."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Cover letter")
    c.showPage()
    c.showPage()
    c.drawString(72, 720, "Appendix")
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def blank_png_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (64, 64), "white").save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture()
def blank_jpeg_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (64, 64), "white").save(buf, format="JPEG")
    return buf.getvalue()


class ScriptedClient(BaseSummarizationClient):
    """Summarization client whose answer depends on which length prompt it receives.

    ``failures`` maps a marker found in the prompt to the exception to raise.
    """

    MARKERS = {
        "short": "2-3 concise sentences",
        "medium": "1-2 paragraphs",
        "long": "3-4 paragraphs",
    }

    def __init__(self, failures: dict[str, Exception] | None = None) -> None:
        self.failures = failures or {}
        self.prompts: list[str] = []

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        self.prompts.append(user_prompt)
        for length, marker in self.MARKERS.items():
            if marker in user_prompt:
                failure = self.failures.get(length)
                if failure is not None:
                    raise failure
                return f"{length} summary"
        raise SummarizationCallError("prompt did not match any length")


@pytest.fixture()
def scripted_client_cls() -> type[ScriptedClient]:
    return ScriptedClient
