"""
Stack configuration loaded from pulumi.Config().

Provides a typed, immutable view of stack settings, read from Pulumi config
(e.g. Pulumi.<stack>.yaml or pulumi config set). ``project_name`` and
``environment`` are required; every other key has a default. Used by
__main__.main() to name resources, locate the site files, schedule the
browser check and optionally declare the swag resource.

Checkly credentials are not read here: the Checkly provider takes them from
its own namespace (checkly:apiKey, checkly:accountId).
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Callable

import pulumi

from components.swag import WEBHOOK_URL


def _require_str(config: pulumi.Config, key: str) -> str:
    return config.require(key)


def _parse_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in ("1", "true", "yes")


def _optional(
    parser: Callable[[Any], Any],
    default: Any,
) -> Callable[[pulumi.Config, str], Any]:
    """Build a parser returning default when the key is unset."""

    def parse(config: pulumi.Config, key: str) -> Any:
        raw = config.get(key)
        return default if raw is None else parser(raw)

    return parse


def _optional_object(
    default: Any,
) -> Callable[[pulumi.Config, str], Any]:
    def parse(config: pulumi.Config, key: str) -> Any:
        raw = config.get_object(key)
        # Copied so StackConfig instances never share a mutable default.
        return copy.deepcopy(default) if raw is None else raw

    return parse


# (key, parser); parser receives (config, key) and returns value.
_CONFIG_SPEC: list[tuple[str, Callable[[pulumi.Config, str], Any]]] = [
    ("project_name", _require_str),
    ("environment", _require_str),
    ("site_path", _optional(str, "./www")),
    ("index_document", _optional(str, "index.html")),
    ("error_document", _optional(str, "error.html")),
    ("checkly_enabled", _optional(_parse_bool, True)),
    ("checkly_frequency", _optional(int, 10)),
    ("checkly_locations", _optional_object(["eu-west-2"])),
    ("swag", _optional_object(None)),
    ("swag_webhook_url", _optional(str, WEBHOOK_URL)),
]


@dataclass(frozen=True)
class StackConfig:
    """
    Stack configuration from Pulumi config.

    Attributes:
        project_name: Project name used in resource naming (required).
        environment: Environment label used in resource naming (required).
        site_path: Directory uploaded to the website bucket.
        index_document: Website index document.
        error_document: Website 404 document.
        checkly_enabled: Whether to declare the Checkly browser check.
        checkly_frequency: Minutes between check runs.
        checkly_locations: Checkly locations the check runs from.
        swag: Optional object with name, email, address and size; when set,
            a Swag resource is declared.
        swag_webhook_url: Webhook the swag provider posts to.
    """

    project_name: str
    environment: str
    site_path: str = "./www"
    index_document: str = "index.html"
    error_document: str = "error.html"
    checkly_enabled: bool = True
    checkly_frequency: int = 10
    checkly_locations: list[str] = field(default_factory=lambda: ["eu-west-2"])
    swag: dict[str, str] | None = None
    swag_webhook_url: str = WEBHOOK_URL

    @classmethod
    def from_pulumi_config(cls, config: pulumi.Config) -> "StackConfig":
        """
        Build StackConfig from pulumi.Config() using the parsers in _CONFIG_SPEC.
        """
        kwargs = {key: parser(config, key) for key, parser in _CONFIG_SPEC}
        return cls(**kwargs)
