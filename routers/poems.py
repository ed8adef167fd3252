from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from core.client import get_client
from core.config import settings
from core.exceptions import PoetryDbError
from schemas import Poem
from services.poetry_client import PoetryDbClient
from services.search_session import SearchSession

router = APIRouter(prefix="", tags=["poems"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

def render_page(request: Request, session: SearchSession, author: str = "", title: str = ""):
    context = {
        "request": request,
        "app_title": settings.APP_TITLE,
        "view": session.view(),
        "author": author,
        "title": title,
    }
    return templates.TemplateResponse(request, "index.html", context)

@router.get("/", response_class=HTMLResponse)
async def read_root(
    request: Request,
    author: Optional[str] = None,
    title: Optional[str] = None,
    client: PoetryDbClient = Depends(get_client),
):
    session = SearchSession(client)
    # Пустая форма при первом открытии страницы: просто показываем её
    if author is None and title is None:
        return render_page(request, session)

    await session.search(author or "", title or "")
    return render_page(request, session, (author or "").strip(), (title or "").strip())

@router.get("/random", response_class=HTMLResponse)
async def random_page(request: Request, client: PoetryDbClient = Depends(get_client)):
    session = SearchSession(client)
    await session.random()
    return render_page(request, session)

@router.get("/api/search", response_model=List[Poem])
async def api_search(
    author: str = "",
    title: str = "",
    client: PoetryDbClient = Depends(get_client),
):
    try:
        return await client.search_by_author_and_title(author, title)
    except PoetryDbError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e

@router.get("/api/random", response_model=Poem)
async def api_random(client: PoetryDbClient = Depends(get_client)):
    try:
        return await client.get_random_poem()
    except PoetryDbError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
