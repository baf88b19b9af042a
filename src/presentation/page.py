"""HTML page assembly for the rendered charts."""

from pathlib import Path
from typing import Dict

from fastapi.templating import Jinja2Templates

from ..domain.entities.chart_data import ChartPage

TEMPLATES_DIR = Path(__file__).parent / "templates"
PAGE_TEMPLATE = "index.html"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def page_context(page: ChartPage, container_ids: Dict[str, str], title: str) -> Dict[str, object]:
    """Template variables for the chart page."""
    return {"page": page, "container_ids": container_ids, "title": title}


def render_page_html(page: ChartPage, container_ids: Dict[str, str], title: str) -> str:
    """Render the chart page outside of a request (CLI output)."""
    return templates.get_template(PAGE_TEMPLATE).render(page_context(page, container_ids, title))
