"""S3 bucket for static website hosting."""

from aws_cdk import RemovalPolicy
from aws_cdk import aws_s3 as s3
from constructs import Construct


class StorageBucket(Construct):
  """S3 bucket configured for static website hosting.

  Website documents, object ownership and the public access block are all
  properties of the one bucket resource.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    index_document: str = "index.html",
    error_document: str = "error.html",
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      website_index_document=index_document,
      website_error_document=error_document,
      # Uploaded objects keep their public-read ACL
      object_ownership=s3.ObjectOwnership.OBJECT_WRITER,
      block_public_access=s3.BlockPublicAccess(
        block_public_acls=False,
        ignore_public_acls=False,
        block_public_policy=False,
        restrict_public_buckets=False,
      ),
      removal_policy=removal_policy,
      auto_delete_objects=removal_policy == RemovalPolicy.DESTROY,
    )
