"""
Infrastructure components for the CDN website challenge.

Each concern is encapsulated in its own resource for clear ownership,
testability, and reuse. Use from the Pulumi entrypoint (e.g. __main__.py) with
config and output chaining:

- **CdnWebsite**: public-read S3 website bucket behind CloudFront; exposes url
  (CloudFront host name) for monitoring and stack exports.
- **BrowserCheck**: Checkly browser check; accepts website_url (str or
  Output[str]) and renders it into the check script template.
- **Swag**: dynamic resource posting a swag request to a webhook; create-only,
  identified by the recipient's email.
"""

from components.monitoring import BrowserCheck
from components.swag import Swag, SwagArgs, SwagProvider, SwagSize
from components.website import CdnWebsite

__all__ = [
    "BrowserCheck",
    "CdnWebsite",
    "Swag",
    "SwagArgs",
    "SwagProvider",
    "SwagSize",
]
