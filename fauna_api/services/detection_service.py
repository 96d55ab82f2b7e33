"""
Fauna API: Species Detection Proxy
===================================

What:  Forwards an uploaded image to the external species-detection service
       and returns its JSON answer untouched.
How:   The upload is stored by FileService, read back, and sent as a
       multipart form with a single `image` field using httpx. One attempt
       per request; no retries.
Who:   Called by POST /api/detect.

Failure collapsing:
    Every failure (missing file, disk I/O, connection error, timeout,
    non-2xx status, non-JSON body) ends as UpstreamError, which the global
    handler turns into 500 {"error": "Error al procesar la imagen"}.
    The distinction is kept in the server log only.
"""

import logging
import time
import uuid
from typing import Any, Optional

import httpx

from fauna_api.config import settings
from fauna_api.exceptions import UpstreamError
from fauna_api.services.file_service import FileService, file_service

logger = logging.getLogger(__name__)


class DetectionService:
    """
    Thin client for the detection endpoint.

    Args:
        url:        Detection endpoint; defaults to settings.detection_url.
        timeout:    Seconds for connect and read; defaults to settings.detection_timeout.
        transport:  Optional httpx transport (tests pass an httpx.MockTransport).
        files:      Upload storage; defaults to the shared FileService.
        keep_uploads: Leave stored uploads on disk after forwarding.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        files: Optional[FileService] = None,
        keep_uploads: Optional[bool] = None,
    ):
        self.url = url or settings.detection_url
        self.timeout = timeout or settings.detection_timeout
        self.transport = transport
        self.files = files or file_service
        self.keep_uploads = settings.keep_uploads if keep_uploads is None else keep_uploads

    async def detect(
        self,
        filename: Optional[str],
        content: Optional[bytes],
        content_type: Optional[str] = None,
    ) -> Any:
        """
        Store, forward and relay.

        Returns:
            The decoded JSON body of the detection service.

        Raises:
            UpstreamError on any failure.
        """
        if content is None:
            logger.warning("Detection request without an 'image' upload")
            raise UpstreamError(context={"reason": "missing_file"})

        path = await self.files.store_file(content, filename)
        try:
            data = await self.files.read_file(path)
            return await self._forward(filename or "image", data, content_type)
        finally:
            if not self.keep_uploads:
                await self.files.cleanup_file(path)

    async def _forward(self, filename: str, data: bytes, content_type: Optional[str]) -> Any:
        request_id = str(uuid.uuid4())[:8]
        start_time = time.perf_counter()
        files = {"image": (filename, data, content_type or "application/octet-stream")}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.url, files=files)
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                "[%s] Detection call failed after %.0fms: %s",
                request_id,
                duration_ms,
                str(e),
            )
            raise UpstreamError(
                context={"request_id": request_id, "error_type": type(e).__name__}
            ) from e

        logger.info(
            "[%s] Detection completed in %.0fms (status=%d)",
            request_id,
            (time.perf_counter() - start_time) * 1000,
            response.status_code,
        )
        return payload


detection_service = DetectionService()
