"""
Fauna API: Upload Storage Service
==================================

What:  Writes images received by /api/detect to the upload directory, reads
       them back for forwarding, and removes them afterwards.
How:   Async file I/O with aiofiles; every upload gets a UUID file name that
       keeps the original extension, so no client input reaches the path.
Who:   Called by DetectionService.

    uploads/
    ├── 3f1c9e2a-....jpg
    └── 9b7d04c1-....png
"""

import logging
import os
import uuid
from pathlib import Path
from typing import Optional

import aiofiles

from fauna_api.config import settings
from fauna_api.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class FileService:
    """
    Manages the lifecycle of a temporary upload on disk.

    No validation of type or size happens here; whatever the client sent is
    stored and forwarded as-is.
    """

    def __init__(self, storage_root: Optional[str] = None):
        """
        Args:
            storage_root: Override the upload directory (used in tests).
                          Defaults to settings.upload_dir.
        """
        self.storage_root = Path(storage_root or settings.upload_dir).resolve()
        self.storage_root.mkdir(parents=True, exist_ok=True)
        logger.info("FileService initialized with storage_root=%s", self.storage_root)

    def _generate_storage_path(self, filename: Optional[str]) -> Path:
        extension = Path(filename or "").suffix.lower()
        return self.storage_root / f"{uuid.uuid4()}{extension}"

    async def store_file(self, content: bytes, filename: Optional[str] = None) -> str:
        """
        Write upload bytes to disk and return the absolute path.

        Raises:
            UpstreamError if the directory or file cannot be written.
        """
        path = self._generate_storage_path(filename)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(path, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to store upload at %s: %s", path, str(e))
            raise UpstreamError(context={"path": str(path), "os_error": str(e)}) from e

        logger.info("Upload stored: %s (%d bytes)", path.name, len(content))
        return str(path)

    async def read_file(self, file_path: str) -> bytes:
        """Read a stored upload back into memory."""
        try:
            async with aiofiles.open(file_path, "rb") as f:
                return await f.read()
        except OSError as e:
            logger.error("Failed to read upload %s: %s", file_path, str(e))
            raise UpstreamError(context={"path": file_path, "os_error": str(e)}) from e

    async def cleanup_file(self, file_path: str) -> None:
        """
        Remove a stored upload if it still exists.

        Best-effort: a failed removal is logged and does not change the
        response already decided for the request.
        """
        path = Path(file_path)
        try:
            if path.exists():
                os.remove(path)
                logger.debug("Cleaned up upload: %s", path.name)
        except OSError as e:
            logger.warning("Failed to clean up upload %s: %s", file_path, str(e))


file_service = FileService()
