"""
PDF document service.

Opens stored PDF bytes using the pypdf library and exposes what a viewer
needs: page count, page viewports (for fit-to-width scaling) and page text.
"""
import io
from dataclasses import dataclass

from pypdf import PdfReader

from ..core.logging_config import get_logger
from ..domain.exceptions import PdfLoadError, PdfPageError

logger = get_logger(__name__)


@dataclass(frozen=True)
class Viewport:
    """Page size in PDF points after scaling and rotation."""
    width: float
    height: float
    scale: float = 1.0


class PdfDocument:
    """Handle over an opened PDF. Page numbers are 1-based."""

    def __init__(self, reader: PdfReader):
        self._reader = reader

    @property
    def page_count(self) -> int:
        return len(self._reader.pages)

    def _get_page(self, page_number: int):
        if not 1 <= page_number <= self.page_count:
            raise PdfPageError(f"Page {page_number} out of range (1-{self.page_count})")
        return self._reader.pages[page_number - 1]

    def get_viewport(self, page_number: int, scale: float = 1.0) -> Viewport:
        """
        Get the scaled size of a page.

        Pages rotated by 90 or 270 degrees have width and height swapped.
        """
        if scale <= 0:
            raise ValueError("scale must be positive")
        page = self._get_page(page_number)
        width = float(page.mediabox.width)
        height = float(page.mediabox.height)
        if (page.rotation or 0) % 180 == 90:
            width, height = height, width
        return Viewport(width=width * scale, height=height * scale, scale=scale)

    def fit_scale(self, page_number: int, container_width: float, padding: float = 0) -> float:
        """Scale that makes the page fill container_width minus padding."""
        available = container_width - padding
        if available <= 0:
            raise ValueError("container_width must exceed padding")
        return available / self.get_viewport(page_number).width

    def extract_text(self, page_number: int) -> str:
        """Extract the text layer of a page (empty string if none)."""
        return self._get_page(page_number).extract_text() or ""


def open_pdf(data: bytes) -> PdfDocument:
    """
    Open PDF bytes.

    Args:
        data: PDF file content as bytes

    Returns:
        PdfDocument handle

    Raises:
        PdfLoadError: If the bytes are not a readable PDF
    """
    if not data:
        raise PdfLoadError("File is empty")
    try:
        reader = PdfReader(io.BytesIO(data))
        document = PdfDocument(reader)
        # Page tree is parsed lazily; touch it so broken files fail here
        page_count = document.page_count
    except Exception as e:
        logger.error(f"Error opening PDF: {e}", exc_info=True)
        raise PdfLoadError(f"Failed to load PDF: {e}") from e

    logger.debug(f"Opened PDF with {page_count} page(s)")
    return document
