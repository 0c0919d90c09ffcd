"""CloudFront distribution for static website."""

from aws_cdk import Duration
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct

CACHE_TTL = Duration.seconds(600)


class CloudFrontDistribution(Construct):
  """CloudFront distribution with S3 static website origin.

  The origin is reached over plain HTTP (website endpoints do not serve
  HTTPS) while viewers are redirected to HTTPS on the default certificate.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    error_page_path: str,
  ) -> None:
    super().__init__(scope, id)

    self.cache_policy = cloudfront.CachePolicy(
      self,
      "CachePolicy",
      min_ttl=CACHE_TTL,
      default_ttl=CACHE_TTL,
      max_ttl=CACHE_TTL,
      query_string_behavior=cloudfront.CacheQueryStringBehavior.all(),
      cookie_behavior=cloudfront.CacheCookieBehavior.all(),
    )

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      default_behavior=cloudfront.BehaviorOptions(
        origin=origins.S3StaticWebsiteOrigin(
          bucket,
          protocol_policy=cloudfront.OriginProtocolPolicy.HTTP_ONLY,
          http_port=80,
          https_port=443,
          origin_ssl_protocols=[cloudfront.OriginSslPolicy.TLS_V1_2],
        ),
        viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
        allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD_OPTIONS,
        cached_methods=cloudfront.CachedMethods.CACHE_GET_HEAD_OPTIONS,
        cache_policy=self.cache_policy,
      ),
      price_class=cloudfront.PriceClass.PRICE_CLASS_100,
      error_responses=[
        cloudfront.ErrorResponse(
          http_status=404,
          response_http_status=404,
          response_page_path=error_page_path,
        )
      ],
    )
