"""Writing preset packages into an agent's rule and prompt directories."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import Protocol

from ajisai.atomic import atomic_write_file
from ajisai.domain import AgentPreset, AgentPresetPackage, PromptItem, RuleItem
from ajisai.paths import empty_dir, ensure_dir

_GITIGNORE_CONTENT = "*\n"


class IntegrationError(Exception):
    """Files for an agent integration could not be written."""


class AgentSpecificationAdapter(Protocol):
    """Describes where and how one agent expects its rules and prompts."""

    @property
    def rule_extension(self) -> str:
        """Extension of rule files, e.g. ``.instructions.md``."""

    @property
    def prompt_extension(self) -> str:
        """Extension of prompt files, e.g. ``.prompt.md``."""

    @property
    def rules_dir(self) -> str:
        """Slash-separated rules directory, e.g. ``.github/instructions``."""

    @property
    def prompts_dir(self) -> str:
        """Slash-separated prompts directory, e.g. ``.github/prompts``."""

    def serialize_rule(self, rule: RuleItem) -> str:
        """Render a rule in the agent's file format."""

    def serialize_prompt(self, prompt: PromptItem) -> str:
        """Render a prompt in the agent's file format."""


def _run_all(tasks: Iterable[Callable[[], None]]) -> None:
    """Run tasks concurrently, wait for all, and raise the first failure."""
    task_list = list(tasks)
    if not task_list:
        return
    with ThreadPoolExecutor() as pool:
        futures = [pool.submit(task) for task in task_list]
        errors = [future.exception() for future in futures]
    first = next((error for error in errors if error is not None), None)
    if first is not None:
        raise first


def _from_slash(path: str) -> str:
    return os.path.join(*path.split("/")) if path else path


class Integration:
    """Writes packages for one agent below the working directory.

    The rule and prompt roots are resolved against the working directory at
    construction time.
    """

    def __init__(self, adapter: AgentSpecificationAdapter) -> None:
        self.adapter = adapter
        cwd = os.getcwd()
        self.rules_root = os.path.join(cwd, _from_slash(adapter.rules_dir))
        self.prompts_root = os.path.join(cwd, _from_slash(adapter.prompts_dir))

    def write_package(self, namespace: str, pkg: AgentPresetPackage) -> None:
        """Write every preset of ``pkg`` below ``namespace`` with .gitignore files."""
        tasks: list[Callable[[], None]] = [lambda: self._ensure_gitignore_files(namespace)]
        tasks.extend(
            (lambda preset=preset: self._write_preset(namespace, pkg.package_name, preset))
            for preset in pkg.presets
        )
        _run_all(tasks)

    def clean(self, namespace: str) -> None:
        """Remove the namespace directories for rules and prompts."""
        _run_all(
            [
                lambda: empty_dir(os.path.join(self.rules_root, namespace)),
                lambda: empty_dir(os.path.join(self.prompts_root, namespace)),
            ]
        )

    def _write_preset(self, namespace: str, package_name: str, preset: AgentPreset) -> None:
        def write_rule(rule: RuleItem) -> None:
            relative = rule.get_internal_path(package_name, preset.name, self.adapter.rule_extension)
            path = os.path.join(self.rules_root, namespace, relative)
            serialized = self.adapter.serialize_rule(rule)
            self._write(path, serialized, "rule", preset.name, package_name)

        def write_prompt(prompt: PromptItem) -> None:
            relative = prompt.get_internal_path(
                package_name, preset.name, self.adapter.prompt_extension
            )
            path = os.path.join(self.prompts_root, namespace, relative)
            serialized = self.adapter.serialize_prompt(prompt)
            self._write(path, serialized, "prompt", preset.name, package_name)

        tasks: list[Callable[[], None]] = []
        tasks.extend((lambda rule=rule: write_rule(rule)) for rule in preset.rules)
        tasks.extend((lambda prompt=prompt: write_prompt(prompt)) for prompt in preset.prompts)
        _run_all(tasks)

    @staticmethod
    def _write(path: str, serialized: str, kind: str, preset_name: str, package_name: str) -> None:
        try:
            ensure_dir(os.path.dirname(path))
        except OSError as exc:
            raise IntegrationError(
                f"could not ensure dir for {kind} {path} in preset {preset_name}, "
                f"package {package_name}: {exc}"
            ) from exc
        atomic_write_file(path, serialized)

    def _ensure_gitignore_files(self, namespace: str) -> None:
        def write_gitignore(directory: str, kind: str) -> None:
            try:
                ensure_dir(directory)
            except OSError as exc:
                raise IntegrationError(
                    f"could not ensure {kind} namespace dir {directory}: {exc}"
                ) from exc
            atomic_write_file(os.path.join(directory, ".gitignore"), _GITIGNORE_CONTENT)

        _run_all(
            [
                lambda: write_gitignore(os.path.join(self.rules_root, namespace), "rules"),
                lambda: write_gitignore(os.path.join(self.prompts_root, namespace), "prompts"),
            ]
        )