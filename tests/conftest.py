"""Shared fixtures: configuration is loaded from the dev environment module."""

import os
import pathlib

import pytest

os.environ.setdefault("ENV", "dev")

PROJECT_ROOT = pathlib.Path(__file__).parent.parent


@pytest.fixture
def project_root() -> pathlib.Path:
    return PROJECT_ROOT


@pytest.fixture
def app():
    import aws_cdk as cdk

    return cdk.App()


@pytest.fixture
def web_server_stack(app):
    from web_server.component import WebServerStack

    return WebServerStack(app, "TestWebServer")


@pytest.fixture
def pipeline_stack(app, web_server_stack):
    from pipeline import PipelineStack

    return PipelineStack(app, "TestPipeline", web_url=web_server_stack.web_url)
