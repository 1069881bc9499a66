"""
Record collection -> one self-contained HTML dashboard.

The same renderer serves both dashboards: DNS cache entries keyed by
``RecordName`` and disk volumes keyed by ``DeviceID``.
"""

from datetime import datetime

from jinja2 import Environment

from .templates import DASHBOARD_TEMPLATE

SEVERITY_HIGH = 90
SEVERITY_MEDIUM = 75

_env = Environment(autoescape=True)
_template = _env.from_string(DASHBOARD_TEMPLATE)


def severity_band(percent) -> str:
    """>90 high, >75 medium, anything else low."""
    if percent > SEVERITY_HIGH:
        return "high"
    if percent > SEVERITY_MEDIUM:
        return "medium"
    return "low"


class Percentage:
    """A usage percentage shown with a bar and a severity band."""

    __slots__ = ("value",)

    def __init__(self, value):
        self.value = float(value)

    @property
    def severity(self) -> str:
        return severity_band(self.value)

    def __eq__(self, other):
        return isinstance(other, Percentage) and other.value == self.value

    def __repr__(self):
        return f"Percentage({self.value})"

    def __str__(self):
        return f"{self.value:.1f}%"


def card_text(record, designated_field) -> str:
    """Everything a card displays, lowercased, for substring search."""
    parts = [str(record.get(designated_field, record.name))]
    for label, value in record.properties():
        if label == designated_field:
            continue
        parts.append(label)
        parts.append(str(value))
    return " ".join(parts).lower()


def matches(text: str, needle: str) -> bool:
    return (needle or "").lower() in text


def _metric_entries(summary_metrics):
    entries = []
    for label, value in summary_metrics.items():
        entry = {"label": label, "value": str(value), "severity": None, "width": 0}
        if isinstance(value, Percentage):
            entry["severity"] = value.severity
            entry["width"] = round(min(max(value.value, 0.0), 100.0), 1)
        entries.append(entry)
    return entries


def _cards(records, designated_field, search):
    cards = []
    for record in records:
        text = card_text(record, designated_field)
        cards.append({
            "header": record.get(designated_field, record.name),
            "fields": [(k, v) for k, v in record.properties() if k != designated_field],
            "search": text,
            "visible": matches(text, search),
        })
    return cards


def render(title, records, summary_metrics, designated_field, search="", show_clock=False, generated_at=None):
    """
    Build the dashboard document.

    One card per record, headed by ``designated_field``, preceded by the
    summary metrics. ``search`` pre-fills the search box and pre-applies the
    filter; the "no results" notice starts hidden unless that search leaves
    nothing visible.
    """
    search = search or ""
    generated_at = generated_at or datetime.now()
    cards = _cards(records, designated_field, search)
    no_results = bool(search) and not any(c["visible"] for c in cards)
    return _template.render(
        title=title,
        metrics=_metric_entries(summary_metrics or {}),
        cards=cards,
        search=search,
        no_results=no_results,
        show_clock=show_clock,
        generated_at=generated_at.strftime("%Y-%m-%d %H:%M:%S"),
    )
