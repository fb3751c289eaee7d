# ajisai

ajisai is a library for fetching rule and prompt presets from shared packages
and writing them where AI coding agents expect to find them. Packages can come
from local directories or from git repositories.

## Install

```
pip install ajisai
```

To run the test suite:

```
pip install "ajisai[test]"
pytest
```

## Concepts

- A **package** is a directory tree, either local or in a git repository,
  that holds Markdown files for rules and prompts.
- A **preset** (`ajisai.domain.AgentPreset`) is a named group of rules
  (`RuleItem`) and prompts (`PromptItem`). An `AgentPresetPackage` holds the
  presets taken from one package.
- A rule's metadata (`RuleMetadata`) has `description`, `attach` and `globs`.
  `attach` is an `AttachType`: `ALWAYS`, `GLOB`, `AGENT_REQUESTED` or
  `MANUAL`. A prompt's metadata (`PromptMetadata`) has `description`.
  `new_rule_item` and `new_prompt_item` fill in a missing description with
  the first level-one heading of the content.
- A file's **slug** is its path relative to a base directory, with `/` as
  the separator and the last extension removed. For example,
  `get_slug_from_base_dir("/base", "/base/react/my-rule.md")` gives
  `"react/my-rule"`.

## Fetching packages

```python
from ajisai.fetcher import (
    GitFetcher, GitImportDetails, ImportedPackage, ImportType,
    LocalFetcher, LocalImportDetails,
)

local = ImportedPackage(ImportType.LOCAL, LocalImportDetails(path="./shared-presets"))
LocalFetcher().fetch(local, ".cache/ajisai/shared")

remote = ImportedPackage(
    ImportType.GIT,
    GitImportDetails(repository="https://example.com/presets.git", revision="v1.0.0"),
)
GitFetcher().fetch(remote, ".cache/ajisai/remote")
```

`LocalFetcher` removes the destination and then copies the source directory
into it. It raises `FileNotFoundError` if the source does not exist, and
`NotADirectoryError` if the source is not a directory.

`GitFetcher` runs `git clone` when the destination does not exist yet. When
it does exist, it first runs `git checkout .`. If a revision is set, it then
runs `git fetch origin` followed by `git checkout <revision>`. Otherwise it
runs `git pull`. A failure to clean or fetch raises `GitFetchError`. Command
failures raise `ajisai.cmd.RunCommandError`. To run git some other way, pass
any object with `run` and `run_in_dir` methods as `GitFetcher(runner)`.

Either fetcher raises `InvalidSourceTypeError` when it is given details of
the other type. The error message reads `expected source type: git, got: local`.

## Building presets

```python
from ajisai.domain import (
    AgentPreset, AgentPresetPackage, AttachType,
    PromptMetadata, RuleMetadata, new_prompt_item, new_rule_item,
)

rule = new_rule_item(
    "react/hooks",
    "# Use hooks\nPrefer function components.",
    RuleMetadata(attach=AttachType.GLOB, globs=["*.tsx"]),
)
prompt = new_prompt_item("review", "# Code review\nReview this change.", PromptMetadata())

pkg = AgentPresetPackage(
    package_name="shared",
    presets=[AgentPreset(name="default", rules=[rule], prompts=[prompt])],
)
```

Because no description was given, `rule.metadata.description` is
`"Use hooks"`.

## Writing presets for an agent

An `ajisai.integration.AgentSpecificationAdapter` describes one agent. It
provides four properties, `rule_extension`, `prompt_extension`, `rules_dir`
and `prompts_dir`, and two methods, `serialize_rule(rule)` and
`serialize_prompt(prompt)`, which return file text. The directories use `/`
as the separator.

`Integration(adapter)` resolves those directories against the current
working directory and writes each item to
`<dir>/<namespace>/<package>/<preset>/<slug><extension>`. It also writes a
`.gitignore` containing `*` into each namespace directory. Files are written
concurrently and atomically, with permissions 0600.

```python
from ajisai.integration import Integration

integration = Integration(my_adapter)
integration.write_package("ajisai", pkg)
integration.clean("ajisai")  # removes both namespace directories
```

## Utilities

- `ajisai.mdparse.parse_markdown_with_metadata(content)` returns a
  `ParsedMarkdown`. Its `front_matter` is a dict parsed from YAML front
  matter, or `{}` when there is no front matter. Its `content` is the rest of
  the text. Invalid YAML raises `FrontMatterError`.
- `ajisai.mdparse.extract_h1_heading(content)` returns the plain text of the
  first level-one heading, or `""` if there is none.
- `ajisai.paths` provides four helpers:
  - `resolve_abs_path` expands `~/` and resolves relative paths against the
    working directory.
  - `ensure_dir` creates a directory if it is missing.
  - `empty_dir` removes a path and everything below it.
  - `is_dir_exists` reports whether a path is an existing directory.
- `ajisai.atomic.atomic_write_file(path, data)` writes text, bytes or a
  binary file object through a temporary file, then renames it into place.
- `ajisai.sequences` provides `contains_any` and `remove_zero_values`.
- `ajisai.cmd.DefaultCommandRunner` runs commands with inherited output and
  raises `RunCommandError` when a command fails.

## What is not included

This is a library only. It has no command-line tool, and it has no
configuration file for declaring imports, namespaces or cache directories.
It does not ship adapters for any particular agent; you supply your own
`AgentSpecificationAdapter`. It also does not scan a fetched package's files
into presets. You build `RuleItem` and `PromptItem` objects yourself, for
example with `parse_markdown_with_metadata` and `get_slug_from_base_dir`.