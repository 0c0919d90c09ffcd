"""Configuration loader for the static site stack."""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from aws_cdk import RemovalPolicy
from constructs import Construct

DEFAULT_PATH = "./www"
DEFAULT_INDEX_DOCUMENT = "index.html"
DEFAULT_ERROR_DOCUMENT = "error.html"
DEFAULT_REGION = "us-east-1"
DEFAULT_STAGE = "dev"

# Keys read from the CDK context and the optional settings file
SETTING_KEYS = (
  "path",
  "indexDocument",
  "errorDocument",
  "region",
  "stage",
  "removalPolicy",
)

STAGE_PATTERN = re.compile(r"^[A-Za-z0-9-]+$")

REMOVAL_POLICIES = {
  "retain": RemovalPolicy.RETAIN,
  "destroy": RemovalPolicy.DESTROY,
  "snapshot": RemovalPolicy.SNAPSHOT,
}


class ConfigError(ValueError):
  """Raised when a settings file cannot be used."""


def load_settings(path: Path | str) -> dict[str, Any]:
  """Load a settings mapping from a YAML file.

  Args:
    path: Location of the YAML file

  Returns:
    The mapping, or an empty dict for an empty file

  Raises:
    ConfigError: If the document is not a mapping
  """
  with open(path) as f:
    data = yaml.safe_load(f)

  if data is None:
    return {}
  if not isinstance(data, dict):
    raise ConfigError(f"Settings file {path} must contain a mapping")
  return data


@dataclass
class SiteConfig:
  """Resolved settings for one static site environment."""

  path: str = DEFAULT_PATH
  index_document: str = DEFAULT_INDEX_DOCUMENT
  error_document: str = DEFAULT_ERROR_DOCUMENT
  region: str = DEFAULT_REGION
  stage: str = DEFAULT_STAGE
  removal_policy: RemovalPolicy = RemovalPolicy.RETAIN
  warnings: list[str] = field(default_factory=list)

  @classmethod
  def from_settings(cls, settings: Mapping[str, Any]) -> "SiteConfig":
    """Resolve settings, masking missing or malformed values with defaults."""
    warnings: list[str] = []

    def get(key: str, default: str) -> str:
      value = settings.get(key)
      if value is None:
        return default
      if not isinstance(value, str) or not value.strip():
        warnings.append(
          f"Ignoring invalid value {value!r} for '{key}', using {default!r}"
        )
        return default
      return value

    removal_policy_str = get("removalPolicy", "retain")
    removal_policy = REMOVAL_POLICIES.get(removal_policy_str.lower())
    if removal_policy is None:
      warnings.append(
        f"Unknown removalPolicy {removal_policy_str!r}, using 'retain'"
      )
      removal_policy = RemovalPolicy.RETAIN

    # The stage becomes part of the stack name
    stage = get("stage", DEFAULT_STAGE)
    if not STAGE_PATTERN.fullmatch(stage):
      warnings.append(
        f"Invalid stage {stage!r} (letters, digits and '-' only), "
        f"using {DEFAULT_STAGE!r}"
      )
      stage = DEFAULT_STAGE

    return cls(
      path=get("path", DEFAULT_PATH),
      index_document=get("indexDocument", DEFAULT_INDEX_DOCUMENT),
      error_document=get("errorDocument", DEFAULT_ERROR_DOCUMENT),
      region=get("region", DEFAULT_REGION),
      stage=stage,
      removal_policy=removal_policy,
      warnings=warnings,
    )

  @classmethod
  def from_context(cls, scope: Construct) -> "SiteConfig":
    """Resolve settings from the CDK context of a construct scope.

    When the ``config`` context key names a YAML file, its values are read
    first and context values take precedence over them.
    """
    node = scope.node
    settings: dict[str, Any] = {}
    unknown: list[str] = []

    config_path = node.try_get_context("config")
    if config_path:
      file_settings = load_settings(Path(config_path))
      unknown = [key for key in file_settings if key not in SETTING_KEYS]
      settings.update(file_settings)

    for key in SETTING_KEYS:
      value = node.try_get_context(key)
      if value is not None:
        settings[key] = value

    config = cls.from_settings(settings)
    for key in unknown:
      config.warnings.append(f"Ignoring unknown setting {key!r} in {config_path}")
    return config
