class PdfExtractionError(Exception):
    """Raised when a PDF cannot be opened or its contents cannot be read."""
