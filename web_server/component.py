import pathlib

from aws_cdk import (
    Stack,
    CfnOutput,
)
from constructs import Construct

from core import conf
from core.constructs.vpc import VPC
from core.constructs.web_instance import WebInstance
from core.user_data import linux_user_data

PROJECT_ROOT = pathlib.Path(__file__).parent.parent


class WebServerStack(Stack):

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        vpc = VPC(
            self,
            conf.WEB_VPC_NAME,
            vpc_name=conf.WEB_VPC_NAME,
        )

        # first boot: web server and CodeDeploy agent
        web_instance = WebInstance(
            self,
            conf.WEB_INSTANCE_NAME,
            instance_name=conf.WEB_INSTANCE_NAME,
            instance_type=conf.WEB_INSTANCE_TYPE,
            key_pair_name=conf.WEB_SSH_KEY_NAME,
            vpc=vpc.vpc,
            user_data=linux_user_data(PROJECT_ROOT.joinpath(conf.WEB_BOOTSTRAP_SCRIPT)),
            http_port=conf.WEB_HTTP_PORT,
            ssh_allowed_cidr=conf.WEB_SSH_ALLOWED_CIDR,
        )
        self._instance = web_instance.instance
        self._web_url = f"http://{self._instance.instance_public_dns_name}"

        CfnOutput(
            self,
            "WebServerInstanceId",
            description="Web server instance id",
            value=self._instance.instance_id,
        )
        CfnOutput(
            self,
            "WebServerPublicDnsName",
            description="Web server public DNS name",
            value=self._instance.instance_public_dns_name,
        )
        CfnOutput(
            self,
            "WebServerUrl",
            description="Web server URL",
            value=self._web_url,
        )

    @property
    def instance(self):
        return self._instance

    @property
    def web_url(self) -> str:
        return self._web_url
