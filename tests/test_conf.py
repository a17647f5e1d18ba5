import os
import subprocess
import sys

import pytest

from core import conf


def test_environment_module_is_loaded():
    assert conf.ENV == "dev"
    assert conf.PIPELINE_GITHUB_TOKEN_SECRET_NAME == "github-token"
    assert conf.PIPELINE_GITHUB_BRANCH == "main"
    assert conf.AWS_REGION


def test_resource_names_are_scoped_by_environment():
    for name in (
            conf.WEB_INSTANCE_NAME,
            conf.WEB_SSH_KEY_NAME,
            conf.DEPLOY_APPLICATION_NAME,
            conf.DEPLOY_GROUP_NAME,
            conf.PIPELINE_NAME,
            conf.PIPELINE_ARTIFACT_BUCKET_NAME,
    ):
        assert name.startswith(conf.PROJECT_NAME)
        assert name.endswith(f"-{conf.ENV}")


def test_artifact_bucket_name_is_valid_for_s3():
    name = conf.PIPELINE_ARTIFACT_BUCKET_NAME
    assert 3 <= len(name) <= 63
    assert name == name.lower()


def _load_conf(project_root, env_value):
    env = {key: value for key, value in os.environ.items() if key != "ENV"}
    if env_value is not None:
        env["ENV"] = env_value
    return subprocess.run(
        [sys.executable, "-c", "from core import conf"],
        cwd=project_root,
        env=env,
        capture_output=True,
        text=True,
    )


@pytest.mark.parametrize("env_value,message", [
    (None, "ENV is not set"),
    ("", "ENV is not set"),
    ("missing", "Configuration file not found in conf/missing.py"),
])
def test_invalid_environment_logs_and_exits(project_root, env_value, message):
    result = _load_conf(project_root, env_value)

    assert result.returncode == 1
    assert "Traceback" not in result.stderr
    assert message in result.stderr
