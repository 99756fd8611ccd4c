"""
Pure helpers for templating. Testable without Pulumi runtime.

Used by the monitoring component (render_template) to inject the website URL
into the browser check script. No Pulumi types; all functions accept and
return plain Python types so they can be unit-tested without a Pulumi stack.
"""

import re
from typing import Mapping

# {{key}} with no inner whitespace, as written in checkly-embed.js.
PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")


def render_template(
    template: str,
    substitutions: Mapping[str, str],
) -> str:
    """
    Replace every ``{{key}}`` placeholder in template with its value.

    The template is scanned once, so placeholders appearing inside an
    inserted value are not expanded again. Placeholders without an entry in
    substitutions are left as-is, and no other character is altered.

    Args:
        template: Script or document text containing ``{{key}}`` tokens.
        substitutions: Mapping of placeholder key to replacement text
            (e.g. {"websiteUrl": "d111.cloudfront.net"}).

    Returns:
        The rendered text.
    """
    return PLACEHOLDER_PATTERN.sub(
        lambda match: substitutions.get(match.group(1), match.group(0)),
        template,
    )
