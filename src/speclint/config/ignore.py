"""Persistent per-location suppressions stored beside the config file.

The ignore file maps a path relative to its own directory to a mapping of
rule id to the list of suppressed pointers. In memory the paths are absolute
and the pointer lists are sets; matching is exact string equality.
"""

from __future__ import annotations

import logging
import os
from dataclasses import replace
from pathlib import Path

import yaml

from speclint.constants.config import (
    IGNORE_BANNER,
    IGNORE_FILENAME,
    IGNORE_TEMP_PREFIX,
    IGNORE_TEMP_SUFFIX,
)
from speclint.exceptions import ConfigError
from speclint.io import write_text_atomic
from speclint.model import Problem

logger = logging.getLogger(__name__)


class IgnoreStore:
    """Suppressed ``(absolute file, rule id, pointer)`` triples."""

    def __init__(self, config_dir: Path) -> None:
        self.config_dir = config_dir
        self.path = config_dir / IGNORE_FILENAME
        self.entries: dict[str, dict[str, set[str]]] = {}

    def load(self) -> None:
        """Replace in-memory suppressions with the contents of the ignore file.

        A missing or unreadable file means no suppressions. A file that is not
        valid YAML, or not shaped like an ignore file, raises ConfigError.
        """
        self.entries = {}
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        except UnicodeDecodeError as exc:
            raise ConfigError(f"Ignore file at {self.path} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            logger.warning("Cannot read ignore file %s, continuing without suppressions: %s", self.path, exc)
            return

        try:
            raw = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in ignore file at {self.path}: {exc}") from exc

        if raw is None:
            return
        if not isinstance(raw, dict):
            raise ConfigError(f"Ignore file at {self.path} must be a YAML mapping")

        base_dir = self.path.parent
        for file_name, rules in raw.items():
            if not isinstance(rules, dict):
                raise ConfigError(f"Ignore file entry `{file_name}` in {self.path} must map rule ids to pointers")
            absolute = os.path.normpath(os.path.join(base_dir, str(file_name)))
            file_entry = self.entries.setdefault(absolute, {})
            for rule_id, pointers in rules.items():
                if not isinstance(pointers, list):
                    raise ConfigError(
                        f"Ignore file entry `{file_name}.{rule_id}` in {self.path} must be a list of pointers"
                    )
                file_entry.setdefault(str(rule_id), set()).update(str(pointer) for pointer in pointers)

        logger.debug("Loaded %d suppressed files from %s", len(self.entries), self.path)

    def add(self, problem: Problem) -> None:
        """Suppress the problem's primary location.

        Problems without a pointer or a source file cannot be suppressed and are skipped.
        """
        location = problem.primary_location
        if location is None or location.pointer is None or not location.source:
            return
        file_entry = self.entries.setdefault(os.path.normpath(location.source), {})
        file_entry.setdefault(problem.rule_id, set()).add(location.pointer)

    def check(self, problem: Problem) -> Problem:
        """Return ``problem`` marked as ignored when its location is suppressed."""
        location = problem.primary_location
        if location is None or location.pointer is None or not location.source:
            return problem
        pointers = self.entries.get(os.path.normpath(location.source), {}).get(problem.rule_id)
        if pointers is not None and location.pointer in pointers:
            return replace(problem, ignored=True)
        return problem

    def to_document(self) -> dict[str, dict[str, list[str]]]:
        """Return the on-disk shape: relative posix paths and sorted pointer lists."""
        document: dict[str, dict[str, list[str]]] = {}
        for absolute in sorted(self.entries):
            relative = Path(os.path.relpath(absolute, self.config_dir)).as_posix()
            document[relative] = {
                rule_id: sorted(pointers) for rule_id, pointers in sorted(self.entries[absolute].items())
            }
        return document

    def save(self) -> Path:
        """Overwrite the ignore file with the in-memory suppressions."""
        body = yaml.safe_dump(self.to_document(), sort_keys=False, default_flow_style=False)
        write_text_atomic(
            path=self.path,
            content=IGNORE_BANNER + body,
            temp_prefix=IGNORE_TEMP_PREFIX,
            temp_suffix=IGNORE_TEMP_SUFFIX,
        )
        logger.info("Saved %d suppressed files to %s", len(self.entries), self.path)
        return self.path
