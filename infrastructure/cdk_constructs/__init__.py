"""CDK constructs for static website infrastructure."""

from .content import SiteContent
from .distribution import CloudFrontDistribution
from .static_site import StaticSiteConstruct
from .storage import StorageBucket

__all__ = [
  "CloudFrontDistribution",
  "SiteContent",
  "StaticSiteConstruct",
  "StorageBucket",
]
