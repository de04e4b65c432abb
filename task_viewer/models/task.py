from typing import Any, Dict, Iterable, Iterator, List, Optional

UNTITLED = "Untitled Task"
NO_STATUS = "No Status"

Task = Dict[str, Any]

# Notion exposes a status column either as a "status" or a "select" property
STATUS_PROPERTY_TYPES = ("status", "select")


def _properties(task: Task) -> Dict[str, Any]:
    props = task.get("properties") if isinstance(task, dict) else None
    return props if isinstance(props, dict) else {}


def task_title(task: Task) -> Optional[str]:
    """First rich-text fragment of the Name property, or None."""
    name = _properties(task).get("Name")
    if not isinstance(name, dict):
        return None

    fragments = name.get("title")
    if not isinstance(fragments, list) or not fragments:
        return None

    first = fragments[0]
    if not isinstance(first, dict):
        return None

    text = first.get("plain_text")
    return text if isinstance(text, str) and text else None


def task_status(task: Task) -> Optional[str]:
    """Name of the Status option, or None."""
    status = _properties(task).get("Status")
    if not isinstance(status, dict):
        return None

    for kind in STATUS_PROPERTY_TYPES:
        option = status.get(kind)
        if isinstance(option, dict):
            name = option.get("name")
            if isinstance(name, str) and name:
                return name

    return None


def display_title(task: Task) -> str:
    return task_title(task) or UNTITLED


def display_status(task: Task) -> str:
    return task_status(task) or NO_STATUS


class TaskCollection:
    """
    The cached result of the last successful load.

    Replaced wholesale on every fetch, never merged.
    """

    def __init__(self, tasks: Iterable[Task] = ()):
        self._tasks: List[Task] = list(tasks)

    def replace(self, tasks: Iterable[Task]) -> None:
        # Single assignment so concurrent readers see old or new, never a mix
        self._tasks = list(tasks)

    def all(self) -> List[Task]:
        return list(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)
