#!/usr/bin/env python3
"""
CMDY RECORD SUITE
-----------------
Lookup, ordering and listing behaviour of CommandRecord.

Author: Cmdy Team
Date: 2026-10-19
"""

import pytest

from cmdy.core.models import NOT_FOUND_MESSAGE, CommandRecord


@pytest.fixture
def record():
    return CommandRecord("tree", {
        "ubuntu": "sudo apt install tree",
        "arch": "pacman -S tree",
        "fedora": "dnf install tree",
    })


def test_get_and_has(record):
    assert record.get("arch") == "pacman -S tree"
    assert record.has("arch") is True
    assert "fedora" in record


@pytest.mark.parametrize("missing", ["gentoo", "windows", "", "Ubuntu", "all"])
def test_absent_key_returns_sentinel(record, missing):
    assert record.get(missing) == "No installation command found for this distribution"
    assert record.get(missing) == NOT_FOUND_MESSAGE
    assert record.has(missing) is False


def test_keys_are_sorted_and_stable(record):
    first = record.keys()

    assert first == ["arch", "fedora", "ubuntu"]
    assert record.keys() == first
    assert [key for key, _ in record] == first


def test_all_lists_every_entry_in_key_order(record):
    assert record.all() == (
        "arch: pacman -S tree\n"
        "fedora: dnf install tree\n"
        "ubuntu: sudo apt install tree\n"
    )


def test_empty_record():
    record = CommandRecord("foo")

    assert record.is_empty()
    assert len(record) == 0
    assert record.keys() == []
    assert record.all() == ""
    assert record.get("ubuntu") == NOT_FOUND_MESSAGE


def test_as_dict_is_a_copy(record):
    snapshot = record.as_dict()
    snapshot["gentoo"] = "emerge tree"

    assert not record.has("gentoo")
    assert len(record) == 3


if __name__ == "__main__":
    pytest.main([__file__])
