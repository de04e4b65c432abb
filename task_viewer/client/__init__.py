from task_viewer.client.controller import PageControls, TaskViewerController
from task_viewer.client.relay_client import RelayClient

__all__ = ["PageControls", "RelayClient", "TaskViewerController"]
