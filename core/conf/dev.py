import os

AWS_ACCOUNT_ID = os.getenv("CDK_DEFAULT_ACCOUNT")
AWS_REGION = os.getenv("CDK_DEFAULT_REGION", "us-east-1")

PIPELINE_GITHUB_OWNER = "web-delivery"
PIPELINE_GITHUB_REPOSITORY = "web-delivery"
PIPELINE_GITHUB_BRANCH = "main"
PIPELINE_GITHUB_TOKEN_SECRET_NAME = "github-token"
