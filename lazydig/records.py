"""Record and text-body value types for the commit history."""

from __future__ import annotations

from dataclasses import dataclass

TAB_REPLACEMENT = "    "


@dataclass(frozen=True)
class Record:
    """One browsable history entry: a commit hash and its subject line."""

    key: str
    title: str


def normalize_tabs(text: str) -> str:
    """Replace tabs with a fixed run of spaces so cells stay one per column."""
    return text.replace("\t", TAB_REPLACEMENT)


def make_record(key: str, title: str) -> Record:
    return Record(key=key.strip(), title=normalize_tabs(title))


def split_body(output: str) -> list[str]:
    """Split diff output into display lines.

    Only ``\\n`` separates lines, matching how the text was produced; a
    trailing newline yields a final empty line.
    """
    return [line.removesuffix("\r") for line in normalize_tabs(output).split("\n")]
