#!/usr/bin/env python3

import aws_cdk as cdk

from guide_hire_stack import GuideHireStack

app = cdk.App()
GuideHireStack(
    app,
    "GuideHireStack",
)

app.synth()
