#!/usr/bin/env python3
"""
CMDY DISTROS - Taxonomy & Presentation
--------------------------------------
Static tables describing the distribution families cmdy knows about:
how upstream labels collapse onto canonical keys, and which glyph and
colour each key is drawn with.

Glyphs are Nerd-Font codepoints; the terminal needs a patched font.

Author: Cmdy Team
Date: 2026-10-19
"""

from typing import Dict, NamedTuple, Tuple

CANONICAL_KEYS = (
    "ubuntu", "fedora", "alpine", "arch", "suse", "gentoo",
    "debian", "centos", "rhel", "opensuse", "kali", "windows",
)


class Icon:
    """Nerd-Font glyphs used across the CLI."""
    UBUNTU = "\uef72"
    FEDORA = "\ue7d9"
    ALPINE = "\uf300"
    WSL = "\ue62a"
    ARCH = "\ue732"
    SUSE = "\uef6d"
    GENTOO = "\ue7e6"
    DEBIAN = "\ue77d"
    CENTOS = "\ue78a"
    COMMAND = "\uf4b5"
    PACKAGE = "\ueb29"
    INFO = "\uea74"
    SEARCH = "\uea6d"
    CHECK = "\ueab2"
    WARN = "\uf071"
    ERROR = "\uea87"
    ARROW = "\uea9c"
    SHELL = "\ue691"


class DistroStyle(NamedTuple):
    icon: str
    color: str  # rich style name


# Raw class suffix (exact, case-sensitive) -> canonical key
CLASS_ALIASES: Dict[str, str] = {
    "ubuntu": "ubuntu",
    "debian": "ubuntu",
    "fedora": "fedora",
    "centos": "fedora",
    "rhel": "fedora",
    "alpine": "alpine",
    "arch": "arch",
    "suse": "suse",
    "opensuse": "suse",
    "gentoo": "gentoo",
}

# Ordered: first substring found in the lowercased label wins
LABEL_ALIASES: Tuple[Tuple[str, str], ...] = (
    ("ubuntu", "ubuntu"),
    ("debian", "ubuntu"),
    ("fedora", "fedora"),
    ("centos", "fedora"),
    ("rhel", "fedora"),
    ("alpine", "alpine"),
    ("arch", "arch"),
    ("suse", "suse"),
    ("gentoo", "gentoo"),
    ("kali", "kali"),
    ("windows", "windows"),
)

DEFAULT_STYLE = DistroStyle(Icon.PACKAGE, "bright_white")

DISTRO_STYLES: Dict[str, DistroStyle] = {
    "ubuntu": DistroStyle(Icon.UBUNTU, "bright_magenta"),
    "debian": DistroStyle(Icon.UBUNTU, "bright_magenta"),
    "fedora": DistroStyle(Icon.FEDORA, "bright_blue"),
    "centos": DistroStyle(Icon.FEDORA, "bright_blue"),
    "rhel": DistroStyle(Icon.FEDORA, "bright_blue"),
    "kali": DistroStyle(Icon.DEBIAN, "bright_blue"),
    "alpine": DistroStyle(Icon.ALPINE, "bright_cyan"),
    "arch": DistroStyle(Icon.ARCH, "bright_cyan"),
    "suse": DistroStyle(Icon.SUSE, "bright_green"),
    "opensuse": DistroStyle(Icon.SUSE, "bright_green"),
    "gentoo": DistroStyle(Icon.GENTOO, "bright_magenta"),
    "windows": DistroStyle(Icon.WSL, "bright_white"),
}


def normalize_class(tag: str) -> str:
    """Maps an `install-<tag>` class suffix onto its canonical key."""
    return CLASS_ALIASES.get(tag, tag.lower())


def normalize_label(text: str) -> str:
    """
    Maps free text from a definition-list term (e.g. 'Arch Linux') onto a
    canonical key by substring. Unknown labels are kept lowercased.
    """
    label = text.strip().lower()
    for needle, key in LABEL_ALIASES:
        if needle in label:
            return key
    return label


def distro_style(key: str) -> DistroStyle:
    return DISTRO_STYLES.get(key, DEFAULT_STYLE)
