"""Output locations and file writing for generated documents."""

import logging
import re
from pathlib import Path

from stripeledger.domain.entities import Period
from stripeledger.domain.errors import DocumentError

logger = logging.getLogger(__name__)

_UNSAFE = re.compile(r"[^A-Za-z0-9._-]+")


def safe_filename(name: str) -> str:
    """Reduce a name to characters safe on every filesystem."""
    cleaned = _UNSAFE.sub("_", name).strip("._")
    return cleaned or "document"


def document_dir(output_dir: Path, account: str, period: Period, kind: str) -> Path:
    """Directory for one kind of document, e.g. ``out/acme/2024-03/receipts``."""
    return Path(output_dir) / safe_filename(account) / period.slug / kind


def save_document(directory: Path, filename: str, content: bytes) -> Path:
    """Write a document, creating the directory and replacing existing files.

    Raises:
        DocumentError: If the file cannot be written
    """
    path = Path(directory) / safe_filename(filename)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
    except OSError as e:
        raise DocumentError(f"Could not save {path}: {e}") from e
    logger.info("Saved %s", path)
    return path
