"""Mapping table from upstream documents to docs-site locations."""

from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping

from ..models import SKIP, MappingEntry, MappingTarget

MappingTable = Dict[str, MappingTarget]

DEFAULT_MAPPINGS: MappingTable = {
    # Main documentation files
    "README.md": "overview.md",
    "CLAUDE.md": SKIP,  # internal guidance file
    # Core setup and configuration
    "docs/complete-workflow.md": "getting-started/complete-workflow.md",
    "docs/container-setup.md": "getting-started/container-setup.md",
    "docs/setup-container-guide.md": "getting-started/setup-container-guide.md",
    "docs/claude-authentication-guide.md": "configuration/authentication.md",
    # AWS configuration
    "docs/aws-authentication-best-practices.md": "configuration/aws-authentication.md",
    "docs/aws-profile-setup.md": "configuration/aws-profile-setup.md",
    "docs/aws-profile-quickstart.md": "configuration/aws-quickstart.md",
    # Environment and Docker
    "docs/docker-optimization.md": "configuration/docker-optimization.md",
    "docs/container-limitations.md": "configuration/container-limitations.md",
    # Features and workflows
    "docs/github-workflow.md": "features/github-integration.md",
    "docs/pr-review-workflow.md": "features/pr-reviews.md",
    "docs/workflow.md": "features/workflows.md",
    # Troubleshooting and maintenance
    "docs/logging-security.md": "troubleshooting/logging-security.md",
    "docs/credential-security.md": "troubleshooting/credential-security.md",
    "docs/container-pooling-lessons.md": "troubleshooting/container-pooling.md",
    # Scripts and automation
    "docs/SCRIPTS.md": "configuration/scripts-reference.md",
    "docs/ci-cd-setup.md": "configuration/ci-cd-setup.md",
    "docs/pre-commit-setup.md": "configuration/pre-commit-setup.md",
}


def iter_entries(mappings: Mapping[str, MappingTarget]) -> Iterator[MappingEntry]:
    """Yield mapping entries in insertion order."""
    for source, target in mappings.items():
        yield MappingEntry(source_path=source, target_path=target)


def parse_mappings(raw: Mapping[Any, Any]) -> MappingTable:
    """Convert a YAML mapping block into a mapping table.

    ``null``/``false`` targets become ``SKIP``; anything else must be a string.
    """
    table: MappingTable = {}
    for source, target in raw.items():
        if not isinstance(source, str) or not source.strip():
            raise ValueError(f"Mapping source must be a non-empty string: {source!r}")
        if target is None or target is False:
            table[source] = SKIP
        elif isinstance(target, str) and target.strip():
            table[source] = target
        else:
            raise ValueError(f"Mapping target for {source} must be a path or null")
    return table


__all__ = ["DEFAULT_MAPPINGS", "MappingTable", "iter_entries", "parse_mappings"]
