#!/usr/bin/env python3
"""
CMDY TAXONOMY SUITE
-------------------
Alias tables and presentation metadata.

Author: Cmdy Team
Date: 2026-10-19
"""

import pytest

from cmdy.core.distros import (
    CANONICAL_KEYS, DEFAULT_STYLE, DISTRO_STYLES, Icon,
    distro_style, normalize_class, normalize_label,
)


def test_every_canonical_key_has_its_own_style():
    assert set(CANONICAL_KEYS) == set(DISTRO_STYLES)


@pytest.mark.parametrize("key, icon, color", [
    ("ubuntu", Icon.UBUNTU, "bright_magenta"),
    ("fedora", Icon.FEDORA, "bright_blue"),
    ("kali", Icon.DEBIAN, "bright_blue"),
    ("arch", Icon.ARCH, "bright_cyan"),
    ("suse", Icon.SUSE, "bright_green"),
    ("windows", Icon.WSL, "bright_white"),
    ("haiku", Icon.PACKAGE, "bright_white"),
])
def test_distro_style(key, icon, color):
    assert distro_style(key) == (icon, color)


def test_class_aliases_are_exact():
    assert normalize_class("opensuse") == "suse"
    assert normalize_class("Ubuntu") == "ubuntu"
    assert normalize_class("archlinux") == "archlinux"


@pytest.mark.parametrize("label, expected", [
    ("Arch Linux", "arch"),
    ("  Debian ", "ubuntu"),
    ("Red Hat (RHEL)", "fedora"),
    ("openSUSE Tumbleweed", "suse"),
    ("Kali Linux", "kali"),
    ("Windows (WSL)", "windows"),
    ("Alpine", "alpine"),
    ("NixOS", "nixos"),
])
def test_labels_match_by_substring(label, expected):
    assert normalize_label(label) == expected


def test_default_style_is_the_package_glyph():
    assert DEFAULT_STYLE.icon == Icon.PACKAGE


if __name__ == "__main__":
    pytest.main([__file__])
