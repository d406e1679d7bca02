"""Summary cards: total, completed, running and failed job counts."""
import dash_bootstrap_components as dbc

from ...jobs.summary import JobStats
from ..theme import PRIMARY, STATUS_STYLES
from .metric_card import metric_card

# (stat field, label, icon, color)
CARD_SPECS = [
    ("total", "Total Jobs", "fa-solid fa-list", PRIMARY),
    ("completed", "Completed", STATUS_STYLES["completed"]["icon"], STATUS_STYLES["completed"]["color"]),
    ("running", "Running", STATUS_STYLES["running"]["icon"], STATUS_STYLES["running"]["color"]),
    ("failed", "Failed", STATUS_STYLES["failed"]["icon"], STATUS_STYLES["failed"]["color"]),
]


def job_status_cards(stats: JobStats) -> dbc.Row:
    """Lay out one metric card per summary count in a responsive row."""
    counts = stats.as_dict()
    return dbc.Row(
        [
            dbc.Col(
                metric_card(label, counts[field], color=color, icon=icon),
                id=f"status-card-{field}",
                md=6,
                lg=3,
            )
            for field, label, icon, color in CARD_SPECS
        ],
        className="g-3",
    )


__all__ = ["CARD_SPECS", "job_status_cards"]
