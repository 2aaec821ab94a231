class OcrExtractionError(Exception):
    """Raised when an image cannot be decoded or the OCR engine fails."""
