"""CDK stack for a single static website."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from infrastructure.cdk_constructs import StaticSiteConstruct
from infrastructure.config import SiteConfig


class StaticSiteStack(cdk.Stack):
  """Stack for a single static website environment."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_config: SiteConfig,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    # Surface masked configuration values in synth output
    for warning in site_config.warnings:
      cdk.Annotations.of(self).add_warning(warning)

    self.site = StaticSiteConstruct(
      self,
      "Site",
      path=site_config.path,
      index_document=site_config.index_document,
      error_document=site_config.error_document,
      removal_policy=site_config.removal_policy,
    )

    # Outputs
    cdk.CfnOutput(
      self,
      "originHostname",
      value=self.site.origin_hostname,
      description="S3 website endpoint hostname",
    )
    cdk.CfnOutput(
      self,
      "originURL",
      value=self.site.origin_url,
      description="S3 website endpoint URL",
    )
    cdk.CfnOutput(
      self,
      "cdnHostname",
      value=self.site.cdn_hostname,
      description="CloudFront distribution domain name",
    )
    cdk.CfnOutput(
      self,
      "cdnURL",
      value=self.site.cdn_url,
      description="CloudFront distribution URL",
    )

    cdk.Tags.of(self).add("Project", "static-site")
    cdk.Tags.of(self).add("Stage", site_config.stage)
