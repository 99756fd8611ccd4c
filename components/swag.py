"""
Swag: a dynamic resource that submits a shipping record to a webhook.

Pulumi has no built-in knowledge of this resource type, so a
``pulumi.dynamic.ResourceProvider`` bridges the engine's lifecycle to a
single side-effecting HTTP call. The resource is create-only: ``create`` posts
the record once, the email becomes the resource id, and the outputs are the
inputs unchanged. No update, delete, or diff hooks are overridden, so the
engine defaults apply for those.

The webhook response is parsed and its ``success`` flag is logged, but a
``{"success": false}`` body does not fail the create. Transport errors,
HTTP error statuses and unparsable bodies propagate to the engine as a failed
create; nothing is retried and nothing is rolled back.

The email is used as the identity without any uniqueness check.
"""

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

import httpx
import pulumi
from pulumi.dynamic import CreateResult, Resource, ResourceProvider

logger = logging.getLogger(__name__)

WEBHOOK_URL: str = "https://hooks.example.com/swag"

# Keys forwarded to the webhook and recorded as outputs. Pulumi adds its own
# bookkeeping keys (e.g. __provider) to the props it hands the provider.
SWAG_FIELDS: tuple[str, ...] = ("name", "email", "address", "size")


class SwagSize(str, Enum):
    XS = "XS"
    S = "S"
    M = "M"
    L = "L"
    XL = "XL"
    XXL = "XXL"


@dataclass(frozen=True)
class SwagArgs:
    """
    Inputs for a Swag resource.

    Attributes:
        name: Recipient's full name.
        email: Recipient's email; used verbatim as the resource id.
        address: Shipping address.
        size: Garment size, one of SwagSize.
    """

    name: str
    email: str
    address: str
    size: str

    def __post_init__(self):
        try:
            SwagSize(self.size)
        except ValueError:
            allowed = ", ".join(size.value for size in SwagSize)
            raise ValueError(
                f"invalid swag size {self.size!r}; expected one of {allowed}"
            ) from None


def swag_body(props: dict[str, Any]) -> dict[str, Any]:
    """Return the webhook body (and resource outputs) from provider props."""
    return {key: props[key] for key in SWAG_FIELDS}


def swag_id(props: dict[str, Any]) -> str:
    return props["email"]


class SwagProvider(ResourceProvider):
    """
    Create-only provider posting the swag record as JSON to a webhook.

    The provider instance is serialized into the stack state, so it only
    carries the webhook URL; an httpx client is opened per call.
    """

    def __init__(self, webhook_url: str = WEBHOOK_URL):
        super().__init__()
        self.webhook_url = webhook_url

    def create(self, props: dict[str, Any]) -> CreateResult:
        body = swag_body(props)
        with httpx.Client() as client:
            response = client.post(
                self.webhook_url,
                json=body,
                headers={"Content-Type": "application/json"},
            )
            response.raise_for_status()
        result = response.json()
        # The flag is reported but not acted on; a false value still creates.
        logger.info(
            "Swag webhook for %s answered success=%s",
            body["email"],
            result.get("success"),
        )
        return CreateResult(id_=swag_id(props), outs=body)


class Swag(Resource):
    """Swag request tracked by Pulumi; outputs mirror SwagArgs."""

    name: pulumi.Output[str]
    email: pulumi.Output[str]
    address: pulumi.Output[str]
    size: pulumi.Output[str]

    def __init__(
        self,
        name: str,
        args: SwagArgs,
        opts: pulumi.ResourceOptions | None = None,
        webhook_url: str = WEBHOOK_URL,
    ):
        super().__init__(SwagProvider(webhook_url), name, asdict(args), opts)
