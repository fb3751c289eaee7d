"""Core model: presets, their rules and prompts, and the roles around them."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Optional, Protocol

from ajisai.mdparse import extract_h1_heading

if TYPE_CHECKING:
    from ajisai.fetcher import ImportedPackage

RULE_INTERNAL_EXTENSION = ".md"
PROMPT_INTERNAL_EXTENSION = ".md"


class PresetType(str, Enum):
    """Kind of item held by a preset."""

    RULES = "rules"
    PROMPTS = "prompts"

    def __str__(self) -> str:
        return self.value


class AttachType(str, Enum):
    """How a rule is attached to an agent's context."""

    ALWAYS = "always"
    GLOB = "glob"
    AGENT_REQUESTED = "agent-requested"
    MANUAL = "manual"

    def __str__(self) -> str:
        return self.value


@dataclass
class RuleMetadata:
    """Metadata of a rule, usually taken from its front matter."""

    description: str = ""
    attach: Optional[AttachType] = None
    globs: list[str] = field(default_factory=list)


@dataclass
class PromptMetadata:
    """Metadata of a prompt, usually taken from its front matter."""

    description: str = ""


@dataclass
class PresetItem:
    """Common part of every item in a preset.

    ``slug`` is the item's path below its preset without the extension,
    e.g. ``react/my-rule``; ``content`` is the markdown without front matter.
    """

    slug: str
    content: str

    type: ClassVar[PresetType]

    def get_internal_path(self, package_name: str, preset_name: str, extension: str) -> str:
        """Return ``package/preset/slug+extension`` as a relative path."""
        return os.path.normpath(
            os.path.join(package_name, preset_name, *(self.slug + extension).split("/"))
        )


@dataclass
class RuleItem(PresetItem):
    """A rule in a preset."""

    metadata: RuleMetadata = field(default_factory=RuleMetadata)

    type: ClassVar[PresetType] = PresetType.RULES


@dataclass
class PromptItem(PresetItem):
    """A prompt in a preset."""

    metadata: PromptMetadata = field(default_factory=PromptMetadata)

    type: ClassVar[PresetType] = PresetType.PROMPTS


@dataclass
class AgentPreset:
    """A named group of rules and prompts; the name is its cache directory."""

    name: str
    rules: list[RuleItem] = field(default_factory=list)
    prompts: list[PromptItem] = field(default_factory=list)


@dataclass
class AgentPresetPackage:
    """The presets taken from one package."""

    package_name: str
    presets: list[AgentPreset] = field(default_factory=list)


class PackageFetcher(Protocol):
    """Retrieves a package into a destination directory."""

    def fetch(self, source: ImportedPackage, destination_dir: str) -> None:
        """Store the package described by ``source`` in ``destination_dir``."""


class AgentIntegration(Protocol):
    """Writes packages to, and removes them from, an agent's directories."""

    def write_package(self, namespace: str, pkg: AgentPresetPackage) -> None:
        """Write every preset of ``pkg`` below ``namespace``."""

    def clean(self, namespace: str) -> None:
        """Remove everything written below ``namespace``."""


def _resolve_description(description: str, content: str) -> str:
    return description if description else extract_h1_heading(content)


def new_rule_item(slug: str, content: str, metadata: RuleMetadata) -> RuleItem:
    """Build a rule; without a description the first h1 heading is used."""
    resolved = dataclasses.replace(
        metadata,
        description=_resolve_description(metadata.description, content),
        globs=list(metadata.globs),
    )
    return RuleItem(slug=slug, content=content, metadata=resolved)


def new_prompt_item(slug: str, content: str, metadata: PromptMetadata) -> PromptItem:
    """Build a prompt; without a description the first h1 heading is used."""
    resolved = dataclasses.replace(
        metadata, description=_resolve_description(metadata.description, content)
    )
    return PromptItem(slug=slug, content=content, metadata=resolved)