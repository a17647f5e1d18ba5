from typing import Any

import aws_cdk as cdk
from aws_cdk import (
    aws_codebuild as codebuild,
    aws_codedeploy as codedeploy,
    aws_codepipeline as codepipeline,
    aws_codepipeline_actions as codepipeline_actions,
    aws_s3 as s3,
    CfnOutput,
)
from constructs import Construct
from varname import nameof

from core import conf

SMOKE_CHECK_BUILD_SPEC = {
    "version": "0.2",
    "phases": {
        "install": {
            "commands": [
                "python -m pip install requests boto3",
            ],
        },
        "build": {
            "commands": [
                "python -m smoke --url \"$WEB_URL\"",
            ],
        },
    },
}


class PipelineStack(cdk.Stack):

    def __init__(
            self,
            scope: Construct,
            construct_id: str,
            web_url: str,
            **kwargs: Any,
    ):
        super().__init__(scope, construct_id, **kwargs)

        pipeline = codepipeline.Pipeline(
            scope=self,
            id="Pipeline",
            pipeline_name=conf.PIPELINE_NAME,
            restart_execution_on_update=True,
            artifact_bucket=s3.Bucket(
                self,
                conf.PIPELINE_ARTIFACT_BUCKET_NAME,
                bucket_name=conf.PIPELINE_ARTIFACT_BUCKET_NAME,
                auto_delete_objects=True,
                removal_policy=cdk.RemovalPolicy.DESTROY,
            ),
        )
        source_output = codepipeline.Artifact("Source")
        build_output = codepipeline.Artifact("Build")

        # 1. Source: the token is resolved from Secrets Manager at deploy time
        pipeline.add_stage(
            stage_name="Source",
            actions=[
                codepipeline_actions.GitHubSourceAction(
                    action_name="GitHub",
                    owner=conf.PIPELINE_GITHUB_OWNER,
                    repo=conf.PIPELINE_GITHUB_REPOSITORY,
                    branch=conf.PIPELINE_GITHUB_BRANCH,
                    oauth_token=cdk.SecretValue.secrets_manager(conf.PIPELINE_GITHUB_TOKEN_SECRET_NAME),
                    output=source_output,
                ),
            ],
        )

        # 2. Build: tests and packaging are driven by buildspec.yml
        build_project = codebuild.PipelineProject(
            self,
            "BuildProject",
            project_name=conf.PIPELINE_BUILD_PROJECT_NAME,
            build_spec=codebuild.BuildSpec.from_source_filename(conf.PIPELINE_BUILDSPEC),
            environment=codebuild.BuildEnvironment(
                build_image=codebuild.LinuxBuildImage.STANDARD_7_0,
            ),
            environment_variables={
                nameof(conf.ENV): codebuild.BuildEnvironmentVariable(value=conf.ENV),
            },
        )
        pipeline.add_stage(
            stage_name="Build",
            actions=[
                codepipeline_actions.CodeBuildAction(
                    action_name="Build",
                    project=build_project,
                    input=source_output,
                    outputs=[build_output],
                ),
            ],
        )

        # 3. Deploy: the agent on the instance runs the appspec.yml hooks
        application = codedeploy.ServerApplication(
            self,
            "Application",
            application_name=conf.DEPLOY_APPLICATION_NAME,
        )
        deployment_group = codedeploy.ServerDeploymentGroup(
            self,
            "DeploymentGroup",
            application=application,
            deployment_group_name=conf.DEPLOY_GROUP_NAME,
            ec2_instance_tags=codedeploy.InstanceTagSet({
                "Name": [conf.WEB_INSTANCE_NAME],
            }),
            deployment_config=codedeploy.ServerDeploymentConfig.ALL_AT_ONCE,
            install_agent=False,  # installed by scripts/bootstrap.sh
            auto_rollback=codedeploy.AutoRollbackConfig(
                failed_deployment=True,
            ),
        )
        pipeline.add_stage(
            stage_name="Deploy",
            actions=[
                codepipeline_actions.CodeDeployServerDeployAction(
                    action_name="Deploy",
                    input=build_output,
                    deployment_group=deployment_group,
                ),
            ],
        )

        # 4. Verify: smoke check against the deployed endpoint
        verify_project = codebuild.PipelineProject(
            self,
            "VerifyProject",
            project_name=conf.PIPELINE_VERIFY_PROJECT_NAME,
            build_spec=codebuild.BuildSpec.from_object(SMOKE_CHECK_BUILD_SPEC),
            environment=codebuild.BuildEnvironment(
                build_image=codebuild.LinuxBuildImage.STANDARD_7_0,
            ),
        )
        pipeline.add_stage(
            stage_name="Verify",
            actions=[
                codepipeline_actions.CodeBuildAction(
                    action_name="SmokeCheck",
                    project=verify_project,
                    input=source_output,
                    environment_variables={
                        "WEB_URL": codebuild.BuildEnvironmentVariable(value=web_url),
                    },
                ),
            ],
        )

        CfnOutput(
            self,
            "PipelineConsoleUrl",
            description="CodePipeline console URL",
            value=f"https://{self.region}.console.aws.amazon.com/codesuite/codepipeline/pipelines/{pipeline.pipeline_name}/view?region={self.region}",
        )
