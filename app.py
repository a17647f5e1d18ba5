import logging

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

import aws_cdk as cdk

from core import conf
from pipeline import PipelineStack
from workload import Workload

app = cdk.App()
aws_env = cdk.Environment(
    account=conf.AWS_ACCOUNT_ID,
    region=conf.AWS_REGION,
)

# allow workload to be deployed without ci/cd
workload = Workload(
    scope=app,
    construct_id=f"{conf.ENV}",
    aws_env=aws_env,
)

# allow deployment of ci/cd pipeline
pipeline_stack = PipelineStack(
    scope=app,
    construct_id=conf.PIPELINE_STACK_NAME,
    stack_name=conf.PIPELINE_STACK_NAME,
    env=aws_env,
    web_url=workload.web_server.web_url,
)
pipeline_stack.add_dependency(workload.web_server)

app.synth()
