"""
Viewer app: serves the page and runs the load/filter cycle.

This is a single-user viewer. One controller, and the task cache it owns,
lives in app.extensions, so every tab and browser talking to the same
process shares one collection; a load in one tab changes what /tasks
filters in another.
"""
import logging

from flask import Flask, Response, jsonify, render_template, request

from task_viewer.client.controller import PageControls, TaskViewerController
from task_viewer.client.relay_client import RelayClient
from task_viewer.config import load_settings
from task_viewer.logging_setup import setup_logging
from task_viewer.models.theme import ThemePreference, icon

logger = logging.getLogger(__name__)


def _page_from_request(source) -> PageControls:
    return PageControls(
        search_text=source.get("search", ""),
        status=source.get("status", ""),
    )


def create_viewer_app(settings=None, relay_client=None, theme=None):
    """
    Build the viewer app.

    The controller (and the task cache it owns) lives in app.extensions,
    one per app instance.
    """
    settings = settings or load_settings()

    app = Flask(__name__)

    relay_client = relay_client or RelayClient.from_settings(settings)
    theme = theme or ThemePreference(settings.theme_file)

    app.extensions["task_viewer"] = TaskViewerController(relay_client)
    app.extensions["theme"] = theme

    ### --------------- Views -----------------

    @app.route("/")
    def index():
        controller = app.extensions["task_viewer"]
        page = controller.apply_filters(_page_from_request(request.args))
        current_theme = app.extensions["theme"].load()

        return render_template(
            "index.html",
            page=page,
            statuses=settings.statuses,
            theme=current_theme,
            theme_icon=icon(current_theme),
        )

    # =============================
    # Task API
    # =============================

    @app.route("/load", methods=["POST"])
    def load_tasks():
        """
        Fetch from the relay, replace the cache, and return the filtered view.
        Failures come back as 200 with `error` set; the page shows the banner.
        """
        controller = app.extensions["task_viewer"]
        page = controller.handle_load_tasks(_page_from_request(request.form))

        return jsonify({
            "html": str(page.results),
            "error": page.error,
            "loading": page.loading,
            "disabled": page.load_disabled,
            "count": len(controller.collection),
        })

    @app.route("/tasks", methods=["GET"])
    def filter_tasks():
        """Re-run search + status filter over the cached tasks. Never re-fetches."""
        controller = app.extensions["task_viewer"]
        page = controller.apply_filters(_page_from_request(request.args))
        return Response(str(page.results), mimetype="text/html")

    @app.route("/theme/toggle", methods=["POST"])
    def toggle_theme():
        new_theme = app.extensions["theme"].toggle()
        return jsonify({"theme": new_theme, "icon": icon(new_theme)})

    return app


def main():
    settings = load_settings()
    setup_logging(
        log_dir=settings.log_dir,
        log_name="viewer.log",
        console_level=settings.log_level,
    )

    app = create_viewer_app(settings)

    logger.info("Viewer running on http://localhost:%s (relay: %s)",
                settings.viewer_port, settings.relay_url)

    app.run(host=settings.viewer_host, port=settings.viewer_port)


if __name__ == "__main__":
    main()
