import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urlsplit

import requests

from task_viewer.exceptions import TaskFetchError

logger = logging.getLogger(__name__)

# Same wording the relay uses for these two statuses
AUTH_FAILED_MESSAGE = "Authentication failed. Please check your API token."
FORBIDDEN_MESSAGE = "Access forbidden. Please verify your token has the correct permissions."
INVALID_RESPONSE_MESSAGE = "Received an invalid response from the server."


def network_error_message(relay_url: str) -> str:
    parts = urlsplit(relay_url)
    origin = f"{parts.scheme}://{parts.netloc}" if parts.netloc else relay_url
    return f"Network error. Please make sure the server is running on {origin}"


class RelayClient:
    """Fetches the task list from the relay's /api/tasks endpoint."""

    def __init__(self, url: str, timeout: Optional[float] = None):
        self.url = url
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    @classmethod
    def from_settings(cls, settings):
        return cls(settings.relay_url, timeout=settings.http_timeout)

    def fetch_tasks(self) -> List[Dict[str, Any]]:
        """
        Return the relay's `results` list ([] when missing).

        Raises TaskFetchError with a user-facing message on any failure.
        """
        try:
            r = self.session.get(self.url, timeout=self.timeout)
        except (requests.ConnectionError, requests.Timeout) as e:
            logger.warning("Relay unreachable at %s: %s", self.url, e)
            raise TaskFetchError(network_error_message(self.url)) from e
        except requests.RequestException as e:
            # Broken body, bad encoding, redirect loops: the relay didn't answer usably
            logger.warning("Relay request to %s failed: %s", self.url, e)
            raise TaskFetchError(network_error_message(self.url)) from e

        if r.status_code == 401:
            raise TaskFetchError(AUTH_FAILED_MESSAGE, status=401)

        if r.status_code == 403:
            raise TaskFetchError(FORBIDDEN_MESSAGE, status=403)

        if not r.ok:
            error_data = _json_object(r)
            message = error_data.get("error") or error_data.get("message") or \
                f"API request failed with status {r.status_code}"
            raise TaskFetchError(message, status=r.status_code)

        try:
            data = r.json()
        except ValueError as e:
            logger.warning("Relay sent a non-JSON body (status %s)", r.status_code)
            raise TaskFetchError(INVALID_RESPONSE_MESSAGE, status=r.status_code) from e

        results = data.get("results") if isinstance(data, dict) else None
        return results or []


def _json_object(response) -> Dict[str, Any]:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
