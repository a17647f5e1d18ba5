from aws_cdk import aws_ec2 as ec2
from constructs import Construct


class VPC(Construct):
    def __init__(self, scope: Construct, construct_id: str, vpc_name: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # public subnets only: the web server is reached directly, no NAT needed
        self._vpc = ec2.Vpc(
            self,
            "VPC",
            vpc_name=vpc_name,
            subnet_configuration=[
                ec2.SubnetConfiguration(
                    name="Public",
                    subnet_type=ec2.SubnetType.PUBLIC,
                ),
            ],
            nat_gateways=0,
            max_azs=2,
        )

    @property
    def vpc(self) -> ec2.Vpc:
        return self._vpc
