"""Tests for the component resources, run against Pulumi mocks"""

from pathlib import Path

import pulumi
from conftest import BUCKET_NAME, DISTRIBUTION_DOMAIN, WEBSITE_ENDPOINT

from components.monitoring import BrowserCheck
from components.website import S3_ALLOW_PUBLIC_ACLS, CdnWebsite

SITE_PATH = str(Path(__file__).resolve().parents[1] / "www")
TEMPLATE = (Path(__file__).resolve().parents[1] / "checkly-embed.js").read_text()


class TestCdnWebsite:
    @pulumi.runtime.test
    def test_url_is_distribution_domain(self):
        website = CdnWebsite("test-url")

        def check(url):
            assert url == DISTRIBUTION_DOMAIN

        return website.url.apply(check)

    @pulumi.runtime.test
    def test_cdn_and_origin_urls(self):
        website = CdnWebsite("test-urls")

        def check(args):
            cdn_url, origin_url = args
            assert cdn_url == f"https://{DISTRIBUTION_DOMAIN}"
            assert origin_url == f"http://{WEBSITE_ENDPOINT}"

        return pulumi.Output.all(website.cdn_url, website.origin_url).apply(check)

    def test_syncs_site_folder_to_bucket(self, mocks):
        @pulumi.runtime.test
        def deploy():
            CdnWebsite("test-upload", site_path=SITE_PATH)

        deploy()

        folders = mocks.of_type("synced-folder:index:S3BucketFolder")
        assert len(folders) == 1
        assert folders[0].inputs["path"] == SITE_PATH
        assert folders[0].inputs["bucketName"] == BUCKET_NAME
        assert folders[0].inputs["acl"] == "public-read"

    def test_no_folder_without_site_path(self, mocks):
        @pulumi.runtime.test
        def deploy():
            website = CdnWebsite("test-empty")
            assert website.folder is None

        deploy()

        assert mocks.of_type("synced-folder:index:S3BucketFolder") == []

    @pulumi.runtime.test
    def test_distribution_redirects_to_https(self):
        website = CdnWebsite("test-https")

        def check(policy):
            assert policy == "redirect-to-https"

        return website.distribution.default_cache_behavior.viewer_protocol_policy.apply(
            check
        )

    def test_public_acls_are_allowed(self):
        assert not any(S3_ALLOW_PUBLIC_ACLS.values())


class TestBrowserCheck:
    @pulumi.runtime.test
    def test_script_embeds_website_url(self):
        check_resource = BrowserCheck(
            "test-check",
            website_url=DISTRIBUTION_DOMAIN,
            script_template=TEMPLATE,
        )

        def check(script):
            assert f'page.goto("https://{DISTRIBUTION_DOMAIN}")' in script
            assert "{{websiteUrl}}" not in script

        return check_resource.check.script.apply(check)

    @pulumi.runtime.test
    def test_browser_check_schedule(self):
        check_resource = BrowserCheck(
            "test-schedule",
            website_url=DISTRIBUTION_DOMAIN,
            script_template=TEMPLATE,
            frequency=5,
            locations=["us-east-1"],
        )

        def check(args):
            check_type, frequency, locations, activated = args
            assert check_type == "BROWSER"
            assert frequency == 5
            assert locations == ["us-east-1"]
            assert activated is True

        return pulumi.Output.all(
            check_resource.check.type,
            check_resource.check.frequency,
            check_resource.check.locations,
            check_resource.check.activated,
        ).apply(check)
