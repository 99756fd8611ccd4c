"""
AWS static website: public-read S3 website bucket + CloudFront distribution.

This component creates an S3 bucket configured for website hosting, opens it
to public reads through a canned ACL, syncs the files found under
``site_path`` and puts a CloudFront distribution in front of the bucket's
website endpoint. CloudFront talks to the website endpoint over plain HTTP (S3
website endpoints do not serve HTTPS) and redirects viewers to HTTPS with the
default CloudFront certificate.

Outputs are ``Output[str]`` so the entrypoint can export them and the
monitoring component can point a browser check at ``url``.
"""

import pulumi
import pulumi_aws as aws
import pulumi_synced_folder as synced_folder

ID: str = "challenge:aws:CdnWebsite"

# Public ACLs are rejected while any of these is True, so all are turned off.
# Used by tests and callers to assert on the bucket's exposure.
S3_ALLOW_PUBLIC_ACLS: dict[str, bool] = {
    "block_public_acls": False,
    "block_public_policy": False,
    "ignore_public_acls": False,
    "restrict_public_buckets": False,
}

ORIGIN_ID: str = "s3-website-origin"


class CdnWebsite(pulumi.ComponentResource):
    """
    Public-read S3 website bucket served through CloudFront.

    Resources: Bucket, BucketOwnershipControls, BucketPublicAccessBlock,
    BucketAclV2, BucketWebsiteConfigurationV2, optional S3BucketFolder
    syncing site_path, Distribution.
    """

    def __init__(
        self,
        name: str,
        site_path: str | None = None,
        index_document: str = "index.html",
        error_document: str = "error.html",
        opts: pulumi.ResourceOptions | None = None,
    ):
        """
        Create the website bucket, upload the site and front it with a CDN.

        Args:
            name: Pulumi resource name; prefix for every child resource.
            site_path: Directory synced to the bucket. When None, the
                bucket is created empty.
            index_document: Object served for directory requests.
            error_document: Object served for 404s, by S3 and CloudFront.
            opts: Options for the component itself (e.g. protect).

        Outputs (set on self, registered for the component):
            url: CloudFront host name, without scheme.
            cdn_url: HTTPS URL of the distribution.
            origin_url: HTTP URL of the S3 website endpoint.
            bucket_name: Name of the website bucket.
        """
        super().__init__(ID, name, None, opts)

        # Child resources get parent=self so Pulumi builds a proper hierarchy.
        child_opts = pulumi.ResourceOptions(parent=self)

        self.bucket = aws.s3.Bucket(
            resource_name=f"{name}-bucket",
            opts=child_opts,
        )

        # ACLs are ignored unless object ownership allows them.
        ownership = aws.s3.BucketOwnershipControls(
            resource_name=f"{name}-ownership",
            bucket=self.bucket.id,
            rule=aws.s3.BucketOwnershipControlsRuleArgs(
                object_ownership="BucketOwnerPreferred",
            ),
            opts=child_opts,
        )
        public_access = aws.s3.BucketPublicAccessBlock(
            resource_name=f"{name}-public-access",
            bucket=self.bucket.id,
            opts=child_opts,
            **S3_ALLOW_PUBLIC_ACLS,
        )

        acl = aws.s3.BucketAclV2(
            resource_name=f"{name}-acl",
            bucket=self.bucket.id,
            acl="public-read",
            opts=pulumi.ResourceOptions(
                parent=self,
                depends_on=[ownership, public_access],
            ),
        )

        website = aws.s3.BucketWebsiteConfigurationV2(
            resource_name=f"{name}-website",
            bucket=self.bucket.id,
            index_document=aws.s3.BucketWebsiteConfigurationV2IndexDocumentArgs(
                suffix=index_document,
            ),
            error_document=aws.s3.BucketWebsiteConfigurationV2ErrorDocumentArgs(
                key=error_document,
            ),
            opts=child_opts,
        )

        self.folder: synced_folder.S3BucketFolder | None = None
        if site_path:
            # Synced objects carry their own public-read ACL, so they wait for the bucket's.
            self.folder = synced_folder.S3BucketFolder(
                f"{name}-folder",
                path=site_path,
                bucket_name=self.bucket.bucket,
                acl="public-read",
                opts=pulumi.ResourceOptions(parent=self, depends_on=[acl]),
            )

        # S3 website endpoints are HTTP only, hence a custom origin.
        origins = [
            aws.cloudfront.DistributionOriginArgs(
                origin_id=ORIGIN_ID,
                domain_name=website.website_endpoint,
                custom_origin_config=aws.cloudfront.DistributionOriginCustomOriginConfigArgs(
                    origin_protocol_policy="http-only",
                    http_port=80,
                    https_port=443,
                    origin_ssl_protocols=["TLSv1.2"],
                ),
            )
        ]

        # ForwardedValues is required by the API when not using a cache policy.
        forwarded_values = aws.cloudfront.DistributionDefaultCacheBehaviorForwardedValuesArgs(
            query_string=False,
            cookies=aws.cloudfront.DistributionDefaultCacheBehaviorForwardedValuesCookiesArgs(
                forward="none",
            ),
        )
        default_cache_behavior = aws.cloudfront.DistributionDefaultCacheBehaviorArgs(
            target_origin_id=ORIGIN_ID,
            viewer_protocol_policy="redirect-to-https",
            allowed_methods=["GET", "HEAD", "OPTIONS"],
            cached_methods=["GET", "HEAD", "OPTIONS"],
            compress=True,
            default_ttl=600,
            max_ttl=600,
            min_ttl=600,
            forwarded_values=forwarded_values,
        )

        custom_error_responses = [
            aws.cloudfront.DistributionCustomErrorResponseArgs(
                error_code=404,
                response_code=404,
                response_page_path=f"/{error_document}",
            )
        ]

        restrictions = aws.cloudfront.DistributionRestrictionsArgs(
            geo_restriction=aws.cloudfront.DistributionRestrictionsGeoRestrictionArgs(
                restriction_type="none",
            ),
        )

        viewer_certificate = aws.cloudfront.DistributionViewerCertificateArgs(
            cloudfront_default_certificate=True,
        )

        self.distribution = aws.cloudfront.Distribution(
            resource_name=f"{name}-cdn",
            enabled=True,
            default_root_object=index_document,
            origins=origins,
            default_cache_behavior=default_cache_behavior,
            price_class="PriceClass_100",
            custom_error_responses=custom_error_responses,
            restrictions=restrictions,
            viewer_certificate=viewer_certificate,
            opts=child_opts,
        )

        # url has no scheme; the check script template adds https:// itself.
        self.url: pulumi.Output[str] = self.distribution.domain_name
        self.cdn_url: pulumi.Output[str] = pulumi.Output.concat(
            "https://", self.distribution.domain_name
        )
        self.origin_url: pulumi.Output[str] = pulumi.Output.concat(
            "http://", website.website_endpoint
        )
        self.bucket_name: pulumi.Output[str] = self.bucket.bucket
        self.register_outputs(
            {
                "url": self.url,
                "cdn_url": self.cdn_url,
                "origin_url": self.origin_url,
                "bucket_name": self.bucket_name,
            }
        )
