import logging

from flask import Flask, jsonify
from flask_cors import CORS

from task_viewer.config import load_settings
from task_viewer.logging_setup import setup_logging
from task_viewer.relay.notion import NotionClient

logger = logging.getLogger(__name__)

AUTH_FAILED_MESSAGE = "Authentication failed. Please check your API token."
FORBIDDEN_MESSAGE = "Access forbidden. Please verify your token has the correct permissions."
INTERNAL_ERROR_MESSAGE = "Internal server error. Please try again later."


def _error_body(response) -> dict:
    """Upstream error payload, or {} when it isn't a JSON object."""
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def create_relay_app(settings=None, notion_client=None):
    """
    Build the relay app.

    notion_client defaults to a NotionClient built from settings; tests
    pass in a fake.
    """
    settings = settings or load_settings()

    app = Flask(__name__)
    # Upstream bodies go back unmodified, key order included
    app.json.sort_keys = False
    CORS(app)

    if notion_client is None:
        if not settings.notion_token:
            logger.warning("NOTION_TOKEN is not set; upstream calls will be rejected")
        notion_client = NotionClient.from_settings(settings)

    app.extensions["notion_client"] = notion_client

    @app.route("/api/tasks")
    def get_tasks():
        """
        Proxy the Notion database query.
        No parameters are accepted or forwarded.
        """
        client = app.extensions["notion_client"]

        try:
            response = client.query_database()

            if not response.ok:
                error_data = _error_body(response)

                if response.status_code == 401:
                    return jsonify({"error": AUTH_FAILED_MESSAGE}), 401

                if response.status_code == 403:
                    return jsonify({"error": FORBIDDEN_MESSAGE}), 403

                message = error_data.get("message") or \
                    f"API request failed with status {response.status_code}"
                logger.info("Upstream returned %s: %s", response.status_code, message)
                return jsonify({"error": message}), response.status_code

            data = response.json()
            return jsonify(data)

        except Exception:
            logger.exception("Proxy error")
            return jsonify({"error": INTERNAL_ERROR_MESSAGE}), 500

    return app


def main():
    settings = load_settings()
    setup_logging(
        log_dir=settings.log_dir,
        log_name="relay.log",
        console_level=settings.log_level,
    )

    app = create_relay_app(settings)

    base = f"http://localhost:{settings.relay_port}"
    logger.info("Server running on %s", base)
    logger.info("API endpoint: %s/api/tasks", base)

    app.run(host=settings.relay_host, port=settings.relay_port)


if __name__ == "__main__":
    main()
