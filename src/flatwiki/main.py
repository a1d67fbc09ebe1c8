"""FlatWiki FastAPI application."""

import logging
from pathlib import Path

from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from flatwiki.config import settings
from flatwiki.core.links import render_links
from flatwiki.core.models import FRONT_PAGE_TITLE, Page
from flatwiki.core.router import RouteMatch, match_route
from flatwiki.core.storage import FileStorage

logger = logging.getLogger(__name__)

VIEW_NAMES = ("view", "edit")
TEMPLATE_SUFFIX = ".html"


def load_templates(directory: Path) -> Jinja2Templates:
    """Build the shared template set and make sure every view resolves.

    Raises jinja2.TemplateError if a view template is missing or fails to parse.
    """
    templates = Jinja2Templates(directory=str(directory))
    templates.env.filters["wikilinks"] = render_links
    for name in VIEW_NAMES:
        templates.get_template(name + TEMPLATE_SUFFIX)
    logger.info("Loaded templates from %s", directory)
    return templates


# Initialize app
app = FastAPI(
    title=settings.app_title,
    debug=settings.debug,
    redirect_slashes=False,
)

templates_path = Path(__file__).parent / "templates"
templates = load_templates(templates_path)

# Initialize storage
storage = FileStorage(settings.data_dir)


# Template context helper
def get_context(request: Request, **kwargs) -> dict:
    """Create base context for templates."""
    return {
        "request": request,
        "app_title": settings.app_title,
        **kwargs,
    }


def render_template(request: Request, view_name: str, page: Page) -> Response:
    """Render a view of a page, or a plain-text 500 if the template fails."""
    try:
        return templates.TemplateResponse(
            request,
            view_name + TEMPLATE_SUFFIX,
            get_context(request, page=page),
        )
    except TemplateError as exc:
        logger.error("Rendering %s for %s failed: %s", view_name, page.title, exc)
        return PlainTextResponse(str(exc), status_code=500)


@app.get("/", response_class=HTMLResponse)
async def front_page(request: Request):
    """Front page - view it if it exists, otherwise offer to create it."""
    try:
        body = await storage.load(FRONT_PAGE_TITLE)
    except OSError:
        return render_template(request, "edit", Page(title=FRONT_PAGE_TITLE))
    return render_template(request, "view", Page(title=FRONT_PAGE_TITLE, body=body))


@app.get("/view/{title}", response_class=HTMLResponse)
async def view_page(request: Request, route: RouteMatch = Depends(match_route)):
    """View a wiki page."""
    title = route.title
    try:
        body = await storage.load(title)
    except OSError:
        # Page doesn't exist - redirect to edit to create it
        return RedirectResponse(url=f"/edit/{title}", status_code=302)
    return render_template(request, "view", Page(title=title, body=body))


@app.get("/edit/{title}", response_class=HTMLResponse)
async def edit_page(request: Request, route: RouteMatch = Depends(match_route)):
    """Edit page form."""
    title = route.title
    try:
        page = Page(title=title, body=await storage.load(title))
    except OSError:
        # New page
        page = Page(title=title)
    return render_template(request, "edit", page)


@app.post("/save/{title}")
async def save_page(
    route: RouteMatch = Depends(match_route),
    body: str = Form(""),
):
    """Save page content."""
    title = route.title
    try:
        await storage.save(title, body.encode("utf-8"))
    except OSError as exc:
        logger.error("Saving %s failed: %s", title, exc)
        return PlainTextResponse(str(exc), status_code=500)
    return RedirectResponse(url=f"/view/{title}", status_code=302)
