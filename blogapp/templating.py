"""Shared Jinja2 environment for pages and component fragments."""
from fastapi.templating import Jinja2Templates

from blogapp.core.config import BASE_DIR

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def render_fragment(name: str, **context) -> str:
    return templates.get_template(name).render(**context)
