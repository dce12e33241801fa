#!/usr/bin/env python3
"""
CMDY CORE MODELS
----------------
Defines the record produced by the extractor and read by the renderer.

Author: Cmdy Team
Date: 2026-10-19
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

NOT_FOUND_MESSAGE = "No installation command found for this distribution"


@dataclass
class CommandRecord:
    """
    Install instructions for one queried program.

    `entries` maps a canonical distro key to the shell command that installs
    the program there. The extractor builds the record; everything after it
    only reads.
    """
    name: str                                          # The query exactly as typed
    entries: Dict[str, str] = field(default_factory=dict)

    def get(self, distro: str) -> str:
        """Returns the command for `distro`, or the not-found sentinel."""
        return self.entries.get(distro, NOT_FOUND_MESSAGE)

    def has(self, distro: str) -> bool:
        return distro in self.entries

    def keys(self) -> List[str]:
        """Distro keys in lexicographic order."""
        return sorted(self.entries)

    def all(self) -> str:
        """Every entry as `<distro>: <command>` lines, in key order."""
        return "".join(f"{key}: {self.entries[key]}\n" for key in self.keys())

    def as_dict(self) -> Dict[str, str]:
        return dict(self.entries)

    def is_empty(self) -> bool:
        return not self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, distro: object) -> bool:
        return distro in self.entries

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        for key in self.keys():
            yield key, self.entries[key]
