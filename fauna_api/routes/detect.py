"""
Fauna API: Species Detection Route
===================================

What:  POST /api/detect, multipart field `image`.
How:   Reads the upload and hands it to DetectionService, which stores it,
       forwards it to the detection service and returns the JSON answer.
       The answer is relayed verbatim with status 200; any failure is
       500 {"error": "Error al procesar la imagen"}.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from fauna_api.schemas.common import ErrorResponse
from fauna_api.services.detection_service import DetectionService, detection_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Detection"])


def get_detection_service() -> DetectionService:
    return detection_service


@router.post(
    "/detect",
    responses={
        200: {"description": "Detection service response, relayed unchanged"},
        500: {"description": "Upload or detection failure", "model": ErrorResponse},
    },
    summary="Identify the species in an image",
)
async def detect_species(
    image: Optional[UploadFile] = File(default=None, description="Image to classify"),
    service: DetectionService = Depends(get_detection_service),
) -> JSONResponse:
    if image is None:
        result = await service.detect(filename=None, content=None)
        return JSONResponse(content=result)

    try:
        content = await image.read()
        logger.info(
            "Received detection request: filename=%s, size=%d bytes",
            image.filename or "unknown",
            len(content),
        )
        result = await service.detect(
            filename=image.filename,
            content=content,
            content_type=image.content_type,
        )
    finally:
        await image.close()

    return JSONResponse(content=result)
