import logging
import pathlib
from typing import List, Union

from aws_cdk import aws_ec2 as ec2

logger = logging.getLogger(__name__)

PathLike = Union[str, pathlib.Path]


def load_commands(path: PathLike) -> List[str]:
    """
    Read a shell script and return the lines to run, in order.

    The shebang, blank lines and full-line comments are dropped since cloud-init
    already prepends its own shebang to the user data.

    Parameters
    ----------
    path : str or pathlib.Path
        Script location

    Returns
    -------
    list of str
    """
    script = pathlib.Path(path)
    if not script.is_file():
        raise FileNotFoundError(f"script not found: {script}")

    commands = []
    for line in script.read_text().splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        commands.append(line.rstrip())

    if not commands:
        raise ValueError(f"script has no commands: {script}")
    logger.debug(f"load_commands: {len(commands)} commands read from {script}")
    return commands


def linux_user_data(*paths: PathLike) -> ec2.UserData:
    user_data = ec2.UserData.for_linux()
    for path in paths:
        user_data.add_commands(*load_commands(path))
    return user_data
