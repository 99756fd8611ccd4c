"""
CDN website challenge - Pulumi entrypoint.

Wires the components using Pulumi config and output chaining:

- **CdnWebsite**: public-read S3 website bucket behind CloudFront, with the
  files of ``site_path`` uploaded. Its host name is exported as websiteUrl.
- **BrowserCheck**: Checkly browser check whose script (checkly-embed.js) is
  rendered with websiteUrl once CloudFront exists.
- **Swag**: dynamic resource posting a swag request to a webhook, declared
  only when the ``swag`` config object is set.

Stack exports: websiteUrl, cdnUrl, originUrl, bucketName.
"""

from pathlib import Path

import pulumi

from components import BrowserCheck, CdnWebsite, Swag, SwagArgs
from config import StackConfig

CHECK_SCRIPT_PATH = Path(__file__).parent / "checkly-embed.js"


def _component_name(project_name: str, environment: str, prefix: str) -> str:
    return f"{prefix}-{project_name}-{environment}"


def main():
    """
    Build the website, the browser check and the optional swag resource.

    Reads config, instantiates CdnWebsite, exports its URLs, chains the
    website host into the Checkly check script and declares Swag when its
    config object is present.
    """
    config = StackConfig.from_pulumi_config(pulumi.Config())

    def name(prefix: str) -> str:
        return _component_name(config.project_name, config.environment, prefix)

    website = CdnWebsite(
        name=name("website"),
        site_path=config.site_path,
        index_document=config.index_document,
        error_document=config.error_document,
    )

    for output_name, value in [
        ("websiteUrl", website.url),
        ("cdnUrl", website.cdn_url),
        ("originUrl", website.origin_url),
        ("bucketName", website.bucket_name),
    ]:
        pulumi.export(output_name, value)

    if config.checkly_enabled:
        BrowserCheck(
            name=name("index-page"),
            website_url=website.url,
            script_template=CHECK_SCRIPT_PATH.read_text(encoding="utf-8"),
            frequency=config.checkly_frequency,
            locations=config.checkly_locations,
        )
    else:
        pulumi.log.info("checkly_enabled is false; skipping the browser check")

    if config.swag:
        Swag(
            name("swag"),
            SwagArgs(**config.swag),
            webhook_url=config.swag_webhook_url,
        )


if __name__ == "__main__":
    main()
