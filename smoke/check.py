import logging
import time
from typing import Optional

import boto3
import requests
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger(__name__)


class SmokeCheckError(Exception):
    pass


def resolve_url(stack_name: str, output_key: str = "WebServerUrl", client=None) -> str:
    """
    Read the web server URL from the outputs of a deployed stack.

    Parameters
    ----------
    stack_name : str
        CloudFormation stack name
    output_key : str
        Output holding the URL
    client : Optional[botocore.client.CloudFormation]
        Client to use, a default one is created when not given

    Returns
    -------
    str
    """
    try:
        client = client or boto3.client("cloudformation")
        stacks = client.describe_stacks(StackName=stack_name)["Stacks"]
    except (ClientError, BotoCoreError) as e:
        raise SmokeCheckError(f"cannot describe stack {stack_name}: {e}") from e
    for stack in stacks:
        for output in stack.get("Outputs", []):
            if output["OutputKey"] == output_key:
                logger.info(f"resolve_url: stack={stack_name}, url={output['OutputValue']}")
                return output["OutputValue"]
    raise SmokeCheckError(f"output {output_key} not found in stack {stack_name}")


def check_endpoint(
        url: str,
        attempts: int = 5,
        delay: float = 10.0,
        timeout: float = 5.0,
        session: Optional[requests.Session] = None,
) -> requests.Response:
    """
    GET the url until it answers with a 2xx status.

    The instance may still be starting after a deployment, so connection errors and
    unsuccessful statuses are retried up to `attempts` times, `delay` seconds apart.

    Returns
    -------
    requests.Response
        The successful response
    """
    if attempts < 1:
        raise ValueError(f"attempts must be at least 1, got {attempts}")
    session = session or requests.Session()

    last_error = None
    for attempt in range(1, attempts + 1):
        try:
            response = session.get(url, timeout=timeout)
        except requests.RequestException as e:
            last_error = f"{type(e).__name__}: {e}"
        else:
            if response.ok:
                logger.info(f"check_endpoint: url={url}, status={response.status_code}, attempt={attempt}")
                return response
            last_error = f"status {response.status_code}"
        logger.warning(f"check_endpoint: url={url}, attempt={attempt}/{attempts} failed ({last_error})")
        if attempt < attempts:
            time.sleep(delay)

    raise SmokeCheckError(f"{url} did not answer successfully after {attempts} attempts: {last_error}")
