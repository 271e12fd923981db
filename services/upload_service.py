"""
Attachment storage (scanned invoices, receipts).
Files are written under the upload directory and served by URL.
"""
import re
import time
from pathlib import Path

from core.exceptions import UploadError
from core.logger import setup_logger
from core.schema import UploadResult

logger = setup_logger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-z0-9.\-]+", re.IGNORECASE)


def sanitize_filename(name: str) -> str:
    """Replace each run of characters outside [A-Za-z0-9.-] with "_"."""
    return _UNSAFE_CHARS.sub("_", name)


class UploadService:
    """Stores binary attachments and returns their public URL."""

    def __init__(self, upload_dir: str, url_prefix: str = "/uploads"):
        self.upload_dir = Path(upload_dir)
        self.url_prefix = url_prefix.rstrip("/")

    def store(self, filename: str, content: bytes) -> UploadResult:
        """
        Save an attachment under a timestamped, sanitized name.

        Args:
            filename: Original client-side filename
            content: File bytes

        Returns:
            UploadResult with the reference URL and original name

        Raises:
            UploadError: If no file was given or it cannot be written
        """
        if not filename:
            raise UploadError("No file provided")

        stored_name = f"{int(time.time() * 1000)}-{sanitize_filename(filename)}"
        destination = self.upload_dir / stored_name

        try:
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            destination.write_bytes(content)
        except OSError as e:
            logger.error(f"Upload failed for {filename}: {e}")
            raise UploadError(
                "Upload failed",
                details={"filename": filename, "error": str(e)}
            )

        logger.info(f"Stored attachment {filename} as {stored_name} ({len(content)} bytes)")
        return UploadResult(url=f"{self.url_prefix}/{stored_name}", name=filename)
