class PdfExtractionError(Exception):
    """Raised when a PDF byte stream cannot be parsed into text."""
