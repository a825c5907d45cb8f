"""Settings for e2e runs: defaults, optional YAML file, environment.

Precedence (lowest first):
    1. Defaults on ``Settings``
    2. ``e2e-testutils.yaml`` in the project root, if present
    3. Environment variables (``KIND_CLUSTER``, ``E2E_OLM_VERSION``,
       ``E2E_PROMETHEUS_OPERATOR_VERSION``)

Example ``e2e-testutils.yaml``::

    olm_version: "0.17.0"
    kind_cluster: e2e
    image_registry: quay.io/example
"""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

SETTINGS_FILE_NAME = "e2e-testutils.yaml"

# Environment variable -> Settings field
_ENV_OVERRIDES: dict[str, str] = {
    "KIND_CLUSTER": "kind_cluster",
    "E2E_OLM_VERSION": "olm_version",
    "E2E_PROMETHEUS_OPERATOR_VERSION": "prometheus_operator_version",
}


@dataclass(frozen=True)
class Settings:
    """Versions and names used when provisioning cluster prerequisites."""
    olm_version: str = "0.17.0"
    prometheus_operator_version: str = "0.33"
    prometheus_operator_url: str = (
        "https://raw.githubusercontent.com/coreos/prometheus-operator/"
        "release-{version}/bundle.yaml"
    )
    kind_cluster: str = "kind"
    image_registry: str = "quay.io/example"
    image_tag: str = "v0.0.1"

    @property
    def prometheus_bundle_url(self) -> str:
        return self.prometheus_operator_url.format(
            version=self.prometheus_operator_version,
        )

    def image_name(self, project_name: str) -> str:
        return f"{self.image_registry}/{project_name}:{self.image_tag}"

    def bundle_image_name(self, project_name: str) -> str:
        return f"{self.image_registry}/{project_name}-bundle:{self.image_tag}"


def _known_fields() -> set[str]:
    return {f.name for f in dataclasses.fields(Settings)}


def load_settings_file(file_path: Path) -> dict[str, str]:
    """Load and validate a settings YAML file.

    Returns:
        Mapping of field name to value (empty for an empty file).

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is not a mapping or has unknown keys.
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Settings file not found: {file_path}")

    with file_path.open(encoding="utf-8") as f:
        raw: Any = yaml.safe_load(f)

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"{file_path}: expected a mapping at top level")

    unknown = sorted(set(raw) - _known_fields())
    if unknown:
        raise ValueError(f"{file_path}: unknown settings: {', '.join(unknown)}")

    return {str(k): str(v) for k, v in raw.items()}


def load_settings(
    project_root: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Build ``Settings`` for a project root.

    Args:
        project_root: Directory searched for ``e2e-testutils.yaml``.
            Defaults to the current working directory.
        environ: Environment mapping, ``os.environ`` by default.
    """
    root = project_root or Path.cwd()
    env = os.environ if environ is None else environ

    values: dict[str, str] = {}
    settings_file = root / SETTINGS_FILE_NAME
    if settings_file.exists():
        values.update(load_settings_file(settings_file))

    for var, field in _ENV_OVERRIDES.items():
        value = env.get(var)
        if value:
            values[field] = value

    return Settings(**values)
