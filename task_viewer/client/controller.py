"""
Load cycle and filter pipeline for the viewer page.

PageControls stands in for the page widgets (search box, status select,
load button, loading indicator, error banner, results area). The
controller only ever talks to the page through it.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from markupsafe import Markup

from task_viewer.exceptions import TaskFetchError
from task_viewer.filters.search import apply_filters
from task_viewer.models.task import TaskCollection
from task_viewer.render.cards import render_tasks

logger = logging.getLogger(__name__)


@dataclass
class PageControls:
    search_text: str = ""
    status: str = ""
    loading: bool = False
    load_disabled: bool = False
    error: Optional[str] = None
    results: Markup = Markup("")

    # ---------- widgets ----------

    def clear_results(self):
        self.results = Markup("")

    def show_results(self, html: Markup):
        self.results = html

    def show_loading(self):
        self.loading = True

    def hide_loading(self):
        self.loading = False

    def set_load_disabled(self, disabled: bool):
        self.load_disabled = disabled

    def show_error(self, message: str):
        self.error = message

    def hide_error(self):
        self.error = None


class TaskViewerController:
    """Owns the task cache and drives the page through a load."""

    def __init__(self, relay_client, collection: Optional[TaskCollection] = None):
        self.relay_client = relay_client
        self.collection = collection if collection is not None else TaskCollection()

    def handle_load_tasks(self, page: PageControls) -> PageControls:
        """
        Idle -> Loading -> Idle with results, or Idle with an error banner.
        The load control is re-enabled whatever happens.
        """
        page.clear_results()
        page.hide_error()

        page.show_loading()
        page.set_load_disabled(True)

        try:
            tasks = self.relay_client.fetch_tasks()
            self.collection.replace(tasks)
            logger.info("Loaded %d tasks", len(self.collection))
            self.apply_filters(page)
        except TaskFetchError as e:
            logger.info("Load failed: %s", e.message)
            page.show_error(e.message)
        finally:
            page.hide_loading()
            page.set_load_disabled(False)

        return page

    def apply_filters(self, page: PageControls) -> PageControls:
        """Filter the cached tasks with the page's current controls and render."""
        filtered = apply_filters(self.collection, page.search_text, page.status)

        page.clear_results()
        page.show_results(render_tasks(filtered))
        return page
