"""GET / landing banner."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["Home"])

HOME_PAGE = """
    <html>
        <head>
        <title>Inicio</title>
        </head>
        <body><h1>Proyecto backend</h1></body>
    </html>
    """


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def home() -> HTMLResponse:
    return HTMLResponse(content=HOME_PAGE)
