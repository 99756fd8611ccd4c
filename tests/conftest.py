"""Pulumi mocks shared by the component and entrypoint tests"""

import pulumi
import pytest

DISTRIBUTION_DOMAIN = "d111111abcdef8.cloudfront.net"
WEBSITE_ENDPOINT = "site-bucket.s3-website.eu-west-2.amazonaws.com"
BUCKET_NAME = "site-bucket"

# Extra outputs the cloud would compute, keyed by resource type token.
COMPUTED_OUTPUTS = {
    "aws:s3/bucket:Bucket": {"bucket": BUCKET_NAME},
    "aws:s3/bucketWebsiteConfigurationV2:BucketWebsiteConfigurationV2": {
        "websiteEndpoint": WEBSITE_ENDPOINT,
    },
    "aws:cloudfront/distribution:Distribution": {"domainName": DISTRIBUTION_DOMAIN},
}


class ChallengeMocks(pulumi.runtime.Mocks):
    """Echo inputs back as outputs and record every registered resource."""

    def __init__(self):
        self.resources: list[pulumi.runtime.MockResourceArgs] = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(args)
        outputs = {**args.inputs, **COMPUTED_OUTPUTS.get(args.typ, {})}
        return [f"{args.name}_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        return {}

    def of_type(self, typ: str) -> list[pulumi.runtime.MockResourceArgs]:
        return [resource for resource in self.resources if resource.typ == typ]


MOCKS = ChallengeMocks()
pulumi.runtime.set_mocks(MOCKS, preview=False)


@pytest.fixture
def mocks() -> ChallengeMocks:
    MOCKS.resources.clear()
    return MOCKS
