import pytest

from task_viewer.config import Settings
from task_viewer.models.theme import ThemePreference
from task_viewer.relay.app import create_relay_app
from task_viewer.viewer_app import create_viewer_app

from .fakes import FakeNotionClient, FakeRelayClient, make_task


@pytest.fixture()
def settings(tmp_path):
    return Settings(
        notion_token="secret-token",
        notion_database_id="db123",
        state_dir=tmp_path / "state",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture()
def notion_client():
    return FakeNotionClient()


@pytest.fixture()
def relay(settings, notion_client):
    app = create_relay_app(settings, notion_client=notion_client)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture()
def sample_tasks():
    return [
        make_task("Write report", "Done"),
        make_task("Buy milk", "Not started"),
        make_task("Review report draft", "In progress"),
    ]


@pytest.fixture()
def relay_client(sample_tasks):
    return FakeRelayClient(tasks=sample_tasks)


@pytest.fixture()
def theme(settings):
    return ThemePreference(settings.theme_file)


@pytest.fixture()
def viewer_app(settings, relay_client, theme):
    app = create_viewer_app(settings, relay_client=relay_client, theme=theme)
    app.config["TESTING"] = True
    return app


@pytest.fixture()
def viewer(viewer_app):
    return viewer_app.test_client()
