import os

ENV = os.getenv("ENV")
AWS_ACCOUNT_ID = ""  # to be defined on each environment
AWS_REGION = ""  # to be defined on each environment
PROJECT_NAME = "web-delivery"

# WebServerStack
WEB_STACK_NAME = f"{PROJECT_NAME}-web"
WEB_VPC_NAME = f"{WEB_STACK_NAME}-vpc"
WEB_INSTANCE_NAME = f"{WEB_STACK_NAME}-server-{ENV}"
WEB_INSTANCE_TYPE = "t3.micro"
WEB_SSH_KEY_NAME = f"{WEB_STACK_NAME}-ssh-key-{ENV}"
WEB_SSH_ALLOWED_CIDR = "0.0.0.0/0"
WEB_HTTP_PORT = 80
WEB_BOOTSTRAP_SCRIPT = "scripts/bootstrap.sh"

# CodeDeploy
DEPLOY_APPLICATION_NAME = f"{PROJECT_NAME}-app-{ENV}"
DEPLOY_GROUP_NAME = f"{PROJECT_NAME}-deployment-group-{ENV}"

# Toolchain
PIPELINE_STACK_NAME = f"{PROJECT_NAME}-toolchain"
PIPELINE_NAME = f"{PIPELINE_STACK_NAME}-{ENV}"
PIPELINE_ARTIFACT_BUCKET_NAME = f"{PIPELINE_STACK_NAME}-artifact-bucket-{ENV}"
PIPELINE_BUILD_PROJECT_NAME = f"{PIPELINE_STACK_NAME}-build-{ENV}"
PIPELINE_VERIFY_PROJECT_NAME = f"{PIPELINE_STACK_NAME}-verify-{ENV}"
PIPELINE_BUILDSPEC = "buildspec.yml"
PIPELINE_GITHUB_OWNER = ""  # to be defined on each environment
PIPELINE_GITHUB_REPOSITORY = ""  # to be defined on each environment
PIPELINE_GITHUB_BRANCH = ""  # to be defined on each environment
PIPELINE_GITHUB_TOKEN_SECRET_NAME = ""  # to be defined on each environment
