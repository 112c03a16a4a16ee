import os

import boto3
import pytest
from botocore.stub import Stubber

from drone_mail.build.context import BuildContext
from drone_mail.config import PluginSettings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Strip Drone and plugin variables and keep stray .env files out of reach."""
    for name in list(os.environ):
        if name.startswith(("DRONE_", "PLUGIN_")) or name == "ENV_FILE":
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def failed_build():
    return BuildContext(
        author="Ada Lovelace",
        author_email="a@x.com",
        branch="main",
        build="42",
        status="failure",
        started="1000",
        finished="1090",
        link="https://drone.example.com/acme/widgets/42",
        repo_name="acme/widgets",
        repo_owner="acme",
        sha="0a1b2c3",
        commit_message="Fix the widget",
        commit_link="https://github.com/acme/widgets/commit/0a1b2c3",
        prev_build_status="success",
    )


@pytest.fixture
def settings():
    return PluginSettings(sender="ci@example.com")


class FakeSender:
    def __init__(self, error=None):
        self.error = error
        self.payloads = []

    def send(self, payload):
        self.payloads.append(payload)
        if self.error is not None:
            raise self.error
        return "fake-message-id"


@pytest.fixture
def fake_sender():
    return FakeSender()


@pytest.fixture
def stubbed_ses():
    client = boto3.client(
        "ses",
        region_name="eu-west-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    with Stubber(client) as stubber:
        yield client, stubber
        stubber.assert_no_pending_responses()
