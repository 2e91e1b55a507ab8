"""Approval email rendering.

Bodies are rendered from the Jinja2 templates in ``easybizness_mail/templates``.
HTML output is autoescaped so shop and recipient names cannot inject markup;
the plain-text body is rendered as-is.
"""
import datetime as dt
from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

FALLBACK_GREETING = "there"
BRAND_NAME = "EasyBizness"


def format_approval_timestamp(moment: dt.datetime) -> str:
    """Format like an en-US locale string, e.g. ``10/18/2026, 3:04:05 PM``."""
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{moment.month}/{moment.day}/{moment.year}, {hour}:{moment:%M:%S} {meridiem}"


env = Environment(
    loader=FileSystemLoader(Path(__file__).resolve().parent.parent / "templates"),
    autoescape=select_autoescape(),
    undefined=StrictUndefined,
)

env.filters["localestamp"] = format_approval_timestamp


@dataclass(frozen=True)
class RenderedEmail:
    html: str
    text: str


def greeting_name(to_name: str | None) -> str:
    name = (to_name or "").strip()
    return name or FALLBACK_GREETING


def approval_subject(shop_name: str) -> str:
    return f'Your business "{shop_name}" has been approved'


def render_approval_email(
    *,
    greeting_name: str,
    shop_name: str,
    dashboard_url: str,
    approved_at: dt.datetime,
) -> RenderedEmail:
    """Render the HTML and plain-text bodies of an approval notification."""
    context = {
        "greeting_name": greeting_name,
        "shop_name": shop_name,
        "dashboard_url": dashboard_url,
        "approved_at": approved_at,
        "brand_name": BRAND_NAME,
    }
    return RenderedEmail(
        html=env.get_template("approval.html").render(context),
        text=env.get_template("approval.txt").render(context),
    )
