from aws_cdk import Environment
from constructs import Construct

from core import conf
from web_server.component import WebServerStack


class Workload(Construct):

    def __init__(
            self,
            scope: Construct,
            construct_id: str,
            aws_env: Environment,
            **kwargs
    ):
        super().__init__(scope, construct_id)

        self._web_server = WebServerStack(
            scope,
            construct_id=conf.WEB_STACK_NAME,
            stack_name=conf.WEB_STACK_NAME,
            env=aws_env,
        )

    @property
    def web_server(self) -> WebServerStack:
        return self._web_server
