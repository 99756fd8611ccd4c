"""
Checkly browser check against the deployed website.

The check script is a template (see ``checkly-embed.js``) holding a
``{{websiteUrl}}`` placeholder. The URL is only known once CloudFront has
been created, so the substitution runs inside ``Output.apply`` and the
rendered script is uploaded to Checkly as part of the check. Reading the
template from disk is left to the caller.
"""

from typing import Sequence

import pulumi
import pulumi_checkly as checkly

from components._helpers import render_template

ID: str = "challenge:checkly:BrowserCheck"

URL_PLACEHOLDER: str = "websiteUrl"


class BrowserCheck(pulumi.ComponentResource):
    """Scheduled Checkly BROWSER check rendering its script from a template."""

    def __init__(
        self,
        name: str,
        website_url: pulumi.Input[str],
        script_template: str,
        frequency: int = 10,
        locations: Sequence[str] = ("eu-west-2",),
        activated: bool = True,
        opts: pulumi.ResourceOptions | None = None,
    ):
        """
        Create the Checkly check.

        Args:
            name: Pulumi resource name for the component and the check.
            website_url: Host name of the site (str or Output[str]) substituted
                for ``{{websiteUrl}}``.
            script_template: Check script text containing the placeholder.
            frequency: Minutes between runs.
            locations: Checkly locations the check runs from.
            activated: Whether Checkly schedules the check.
            opts: Options for the component itself.

        Outputs (set on self, registered for the component):
            script: The rendered check script.
        """
        super().__init__(ID, name, None, opts)

        self.script: pulumi.Output[str] = pulumi.Output.from_input(
            website_url
        ).apply(lambda url: render_template(script_template, {URL_PLACEHOLDER: url}))

        self.check = checkly.Check(
            resource_name=name,
            activated=activated,
            frequency=frequency,
            type="BROWSER",
            locations=list(locations),
            script=self.script,
            opts=pulumi.ResourceOptions(parent=self),
        )
        self.register_outputs({"script": self.script})
