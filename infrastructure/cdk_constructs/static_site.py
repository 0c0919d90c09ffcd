"""Main composite construct for complete static website infrastructure."""

from aws_cdk import RemovalPolicy
from constructs import Construct

from .content import SiteContent
from .distribution import CloudFrontDistribution
from .storage import StorageBucket


class StaticSiteConstruct(Construct):
  """Complete static website infrastructure.

  Creates:
  - S3 bucket with website hosting, ObjectWriter ownership and public ACLs allowed
  - Sync of a local folder into the bucket (public-read)
  - CloudFront distribution fronting the bucket website endpoint
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    path: str = "./www",
    index_document: str = "index.html",
    error_document: str = "error.html",
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    # Storage
    self.bucket = StorageBucket(
      self,
      "Storage",
      index_document=index_document,
      error_document=error_document,
      removal_policy=removal_policy,
    )

    # Folder sync
    self.content = SiteContent(
      self,
      "Content",
      bucket=self.bucket.bucket,
      path=path,
    )

    # CloudFront Distribution
    self.distribution = CloudFrontDistribution(
      self,
      "Cdn",
      bucket=self.bucket.bucket,
      error_page_path=f"/{error_document}",
    )

    self.origin_hostname = self.bucket.bucket.bucket_website_domain_name
    self.origin_url = f"http://{self.origin_hostname}"
    self.cdn_hostname = self.distribution.distribution.distribution_domain_name
    self.cdn_url = f"https://{self.cdn_hostname}"
