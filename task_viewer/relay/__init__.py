from task_viewer.relay.app import create_relay_app
from task_viewer.relay.notion import NotionClient

__all__ = ["create_relay_app", "NotionClient"]
