#!/usr/bin/env python3
"""CDK application entry point for static website infrastructure."""

import os
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk

from infrastructure.config import SiteConfig
from infrastructure.stacks.site_stack import StaticSiteStack


def stack_name(config: SiteConfig) -> str:
  """Stack name for the configured stage."""
  return f"StaticSite-{config.stage}"


def build_app(app: cdk.App) -> StaticSiteStack:
  """Add the static site stack for the configured stage to an app."""
  config = SiteConfig.from_context(app)

  return StaticSiteStack(
    app,
    stack_name(config),
    site_config=config,
    env=cdk.Environment(
      account=os.environ.get("CDK_DEFAULT_ACCOUNT"),
      region=config.region,
    ),
    description=f"Static website with CloudFront CDN ({config.stage})",
  )


def main() -> None:
  """Create CDK app and synthesize the static site stack."""
  app = cdk.App()
  build_app(app)
  app.synth()


if __name__ == "__main__":
  main()
