import requests
from typing import Optional

PAGE_SIZE = 100


class NotionClient:
    """
    Minimal Notion API client: one database query per call.

    The token is attached to every request through the session headers,
    so callers never see it.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        database_id: str,
        notion_version: str = "2022-06-28",
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.database_id = database_id
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Notion-Version": notion_version,
            "Content-Type": "application/json",
        })

    @classmethod
    def from_settings(cls, settings):
        return cls(
            base_url=settings.notion_api_base,
            token=settings.notion_token,
            database_id=settings.notion_database_id,
            notion_version=settings.notion_version,
            timeout=settings.http_timeout,
        )

    @property
    def query_url(self) -> str:
        return f"{self.base_url}/databases/{self.database_id}/query"

    def query_database(self, page_size: int = PAGE_SIZE) -> requests.Response:
        """POST the database query and hand back the raw response."""
        return self.session.post(
            self.query_url,
            json={"page_size": page_size},
            timeout=self.timeout,
        )
