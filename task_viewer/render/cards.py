import re
from typing import Iterable

from markupsafe import Markup

from task_viewer.models.task import Task, display_status, display_title

EMPTY_STATE = Markup('<div class="empty-state"><p>No matching tasks found</p></div>')

_CARD = Markup(
    '<div class="task-card">'
    '<h3>{title}</h3>'
    '<span class="status {hook}">{status}</span>'
    '</div>'
)

_WHITESPACE = re.compile(r"\s+")


def status_class(status: str) -> str:
    """CSS class hook for a status label, e.g. 'In progress' -> 'In-progress'."""
    return _WHITESPACE.sub("-", status)


def render_task(task: Task) -> Markup:
    status = display_status(task)
    # Markup.format escapes every argument
    return _CARD.format(
        title=display_title(task),
        hook=status_class(status),
        status=status,
    )


def render_tasks(tasks: Iterable[Task]) -> Markup:
    cards = [render_task(task) for task in tasks]
    if not cards:
        return EMPTY_STATE
    return Markup("\n").join(cards)
