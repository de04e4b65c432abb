from typing import Iterable, List, Optional

from task_viewer.models.task import Task, task_status, task_title


def filter_by_title(tasks: Iterable[Task], search_text: str) -> List[Task]:
    """
    Case-insensitive substring match on the title.
    Blank search keeps everything; untitled tasks never match a query.
    """
    query = (search_text or "").strip().lower()
    if not query:
        return list(tasks)

    return [
        task for task in tasks
        if query in (task_title(task) or "").lower()
    ]


def filter_by_status(tasks: Iterable[Task], status: Optional[str]) -> List[Task]:
    """Exact match on the status label. No selection keeps everything."""
    if not status:
        return list(tasks)

    return [task for task in tasks if (task_status(task) or "") == status]


def apply_filters(tasks: Iterable[Task], search_text: str = "", status: Optional[str] = None) -> List[Task]:
    """
    Title search, then status facet. Both are plain per-record predicates,
    so the order they run in doesn't change the result.
    """
    filtered = filter_by_title(tasks, search_text)
    filtered = filter_by_status(filtered, status)
    return filtered
