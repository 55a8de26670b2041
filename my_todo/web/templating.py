from pathlib import Path

from fastapi.templating import Jinja2Templates
from markupsafe import Markup

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_fragment(template_name: str, **context) -> Markup:
    """Render a component template to HTML that the page template embeds as-is."""
    return Markup(templates.get_template(template_name).render(**context))
