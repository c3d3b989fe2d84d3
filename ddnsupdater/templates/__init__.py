"""HTML rendering for provider status rows."""

from jinja2 import Environment, select_autoescape

from ddnsupdater.models import HTMLRow

LINK_TEMPLATE = '<a href="{{ href }}">{{ text }}</a>'

ROW_TEMPLATE = (
    "<tr>"
    "<td>{{ row.domain | safe }}</td>"
    "<td>{{ row.owner }}</td>"
    "<td>{{ row.provider | safe }}</td>"
    "<td>{{ row.ip_version }}</td>"
    "</tr>"
)


def get_jinja_env() -> Environment:
    """Get configured Jinja2 environment."""
    return Environment(
        autoescape=select_autoescape(default_for_string=True),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_link(href: str, text: str) -> str:
    """Render an anchor tag, escaping both the target and the label."""
    return get_jinja_env().from_string(LINK_TEMPLATE).render(href=href, text=text)


def render_row(row: HTMLRow) -> str:
    """Render a status row as an HTML table row."""
    return get_jinja_env().from_string(ROW_TEMPLATE).render(row=row)
