"""Local folder sync into the site bucket."""

from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct


class SiteContent(Construct):
  """Mirrors a local directory into the bucket with public-read objects."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.Bucket,
    path: str,
  ) -> None:
    super().__init__(scope, id)

    self.deployment = s3_deploy.BucketDeployment(
      self,
      "Deployment",
      sources=[s3_deploy.Source.asset(path)],
      destination_bucket=bucket,
      access_control=s3.BucketAccessControl.PUBLIC_READ,
      prune=True,
      retain_on_delete=False,
    )

    # Ownership controls and the public access block must be in place
    # before any public-read object is written
    self.deployment.node.add_dependency(bucket)
