from aws_cdk import (
    aws_ec2 as ec2,
    aws_iam as iam,
)
from constructs import Construct


class WebInstance(Construct):
    def __init__(
            self,
            scope: Construct,
            construct_id: str,
            instance_name: str,
            instance_type: str,
            key_pair_name: str,
            vpc: ec2.IVpc,
            user_data: ec2.UserData,
            http_port: int = 80,
            ssh_allowed_cidr: str = "0.0.0.0/0",
            **kwargs
    ) -> None:
        super().__init__(scope, construct_id)

        self._instance_role = iam.Role(
            self,
            "InstanceRole",
            role_name=f"{construct_id}-role",
            assumed_by=iam.ServicePrincipal("ec2.amazonaws.com"),
        )
        # add permissions for SSM Agent
        self._instance_role.add_managed_policy(
            iam.ManagedPolicy.from_aws_managed_policy_name("AmazonSSMManagedInstanceCore")
        )
        # the CodeDeploy agent pulls revisions from the pipeline artifact bucket
        self._instance_role.add_managed_policy(
            iam.ManagedPolicy.from_aws_managed_policy_name("service-role/AmazonEC2RoleforAWSCodeDeploy")
        )

        self._instance_security_group = ec2.SecurityGroup(
            self,
            "InstanceSecurityGroup",
            security_group_name=f"{construct_id}-security-group",
            vpc=vpc,
            allow_all_outbound=True,
            description="Web server instance security group",
        )
        self._instance_security_group.add_ingress_rule(
            ec2.Peer.any_ipv4(),
            ec2.Port.tcp(http_port),
            "Allows HTTP access from any IP"
        )
        self._instance_security_group.add_ingress_rule(
            ec2.Peer.ipv4(ssh_allowed_cidr),
            ec2.Port.tcp(22),
            f"Allows SSH access from {ssh_allowed_cidr}"
        )

        self._instance_key_pair = ec2.KeyPair(
            self,
            "InstanceKeyPair",
            key_pair_name=key_pair_name,
        )

        self._instance = ec2.Instance(
            self,
            "Instance",
            instance_name=instance_name,
            vpc=vpc,
            vpc_subnets=ec2.SubnetSelection(subnet_type=ec2.SubnetType.PUBLIC),
            role=self._instance_role,
            security_group=self._instance_security_group,
            key_pair=self._instance_key_pair,
            instance_type=ec2.InstanceType(instance_type),
            machine_image=ec2.MachineImage.latest_amazon_linux2023(),
            user_data=user_data,
        )

    @property
    def instance_role(self) -> iam.Role:
        return self._instance_role

    @property
    def instance_security_group(self) -> ec2.SecurityGroup:
        return self._instance_security_group

    @property
    def instance_key_pair(self) -> ec2.KeyPair:
        return self._instance_key_pair

    @property
    def instance(self) -> ec2.Instance:
        return self._instance
