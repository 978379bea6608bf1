"""
Usage registry.

Each subcommand grammar can describe the keyword forms it recognizes. The
registry only collects those descriptions; it is never consulted while
parsing, and rendering them as help text is left to the application.
"""

from textwrap import dedent

from attrs import field, frozen


def _normalize_description(text: str) -> str:
    return dedent(text).strip()


@frozen
class UsageEntry:
    """Description of one recognized keyword form."""

    name: str
    syntax: str
    summary: str
    description: str = field(converter=_normalize_description)


class Usage:
    """Append-only collection of usage entries.

    Entries are kept in the order they were added. Describing the same
    grammar twice adds its entries twice; build one registry per process.
    """

    def __init__(self):
        self.subcommands: list[UsageEntry] = []

    def add_subcommand(
        self, name: str, syntax: str, summary: str, description: str
    ) -> UsageEntry:
        """
        Append an entry for one keyword form.

        Params:
            name: The keyword, e.g. "modify"
            syntax: Argument syntax, e.g. "[filter] modify [modification]"
            summary: One-line summary
            description: Longer description; indentation is removed

        Returns:
            The stored entry
        """
        entry = UsageEntry(
            name=name, syntax=syntax, summary=summary, description=description
        )
        self.subcommands.append(entry)
        return entry

    def names(self) -> list[str]:
        """Names of all entries, in order."""
        return [entry.name for entry in self.subcommands]

    def __len__(self) -> int:
        return len(self.subcommands)
