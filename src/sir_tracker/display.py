"""Table rendering for the Today and All views."""
from datetime import date

from rich.markup import escape
from rich.table import Table

from sir_tracker.topics import TopicCollection

NO_TOPICS_TODAY = "No review topics for today"


def build_today_table(collection: TopicCollection, today: date | None = None) -> Table | None:
    """Due topics, most urgent first. None when nothing is due."""
    today = today or date.today()
    due = collection.list_due(today)
    if not due:
        return None
    table = Table(title="Today's Review Topics")
    table.add_column("Topic", style="cyan")
    table.add_column("Days Since Review", justify="right")
    table.add_column("Review Gap")
    for topic in due:
        table.add_row(escape(topic.name), str(topic.days_since_review(today)), str(topic.gap))
    return table


def build_all_table(collection: TopicCollection, today: date | None = None) -> Table:
    table = Table(title="All Review Topics")
    table.add_column("Topic", style="cyan")
    table.add_column("Next Review", justify="right")
    table.add_column("Review Gap")
    for topic, label in collection.list_all(today):
        color = "yellow" if label == "Today" else "green"
        table.add_row(escape(topic.name), f"[{color}]{label}[/{color}]", str(topic.gap))
    return table
