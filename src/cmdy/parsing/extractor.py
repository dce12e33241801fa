#!/usr/bin/env python3
"""
CMDY EXTRACTOR - HTML to CommandRecord
--------------------------------------
Mines per-distribution install commands out of a command-not-found.com
page. The page is untrusted and may be malformed, so extraction is a pair
of tolerant regex passes rather than a full parse:

1. Primary: `<div class="command-install install-<distro>" data-os="...">`
   blocks, taking the first `<code>` inside each block.
2. Fallback (only when the primary finds nothing): `<dt>Label</dt>` /
   `<dd>...<code>cmd</code>...</dd>` pairs.

Command text is kept as found: no entity decoding, inner newlines intact.

Author: Cmdy Team
Date: 2026-10-19
"""

import re
import logging
from typing import Iterator, Optional, Tuple, Union

from cmdy.core.distros import normalize_class, normalize_label
from cmdy.core.models import CommandRecord

logger = logging.getLogger("cmdy.extractor")


class InstallExtractor:
    """
    Turns a raw response body into a CommandRecord. Never raises: an empty
    record is the 'nothing found' signal for the callers.
    """

    # Group 1: class suffix, Group 2: data-os, Group 3: inner HTML of the first <code>.
    # Neither the lazy body nor the <code> capture may run into the next command-install block.
    PRIMARY_PATTERN = re.compile(
        r'<div\s+class="command-install\s+install-([^"\s]+)[^"]*"\s+data-os="([^"]*)"[^>]*>'
        r'(?:(?!<div\s+class="command-install\s).)*?'
        r'<code(?:\s[^>]*)?>((?:(?!<div\s+class="command-install\s|</?code[\s>]).)*?)</code>',
        re.DOTALL,
    )

    # Group 1: <dt> inner HTML, Group 2: first <code> inside the paired <dd>
    FALLBACK_PATTERN = re.compile(
        r'<dt(?:\s[^>]*)?>((?:(?!</?d[dtl][\s>]).)*?)</dt>\s*'
        r'<dd(?:\s[^>]*)?>(?:(?!</?d[dt][\s>]).)*?'
        r'<code(?:\s[^>]*)?>((?:(?!</?d[dt][\s>]|</?code[\s>]).)*?)</code>',
        re.DOTALL | re.IGNORECASE,
    )

    TAG_PATTERN = re.compile(r"<[^>]*>")

    def extract(self, html: Union[bytes, str], name: str) -> CommandRecord:
        """Builds the record for `name` from the page body."""
        text = self._decode(html)
        record = CommandRecord(name=name)

        matches = list(self._primary(text))
        strategy = "primary"
        if not matches:
            matches = list(self._fallback(text))
            strategy = "fallback"

        # Later matches overwrite earlier ones for the same key
        for key, command in matches:
            record.entries[key] = command

        logger.debug(
            f"Extracted {len(record)} distro(s) for '{name}' "
            f"from {len(matches)} {strategy} match(es)"
        )
        return record

    def _primary(self, text: str) -> Iterator[Tuple[str, str]]:
        for match in self.PRIMARY_PATTERN.finditer(text):
            raw_tag, _data_os, code = match.groups()
            entry = self._entry(normalize_class(raw_tag), code)
            if entry:
                yield entry

    def _fallback(self, text: str) -> Iterator[Tuple[str, str]]:
        for match in self.FALLBACK_PATTERN.finditer(text):
            label, code = match.groups()
            entry = self._entry(normalize_label(self._text_content(label)), code)
            if entry:
                yield entry

    def _entry(self, key: str, code: str) -> Optional[Tuple[str, str]]:
        """Validates a (key, command) pair; returns None when either side is unusable."""
        command = self._text_content(code).strip()
        if not key or not key.isascii() or not command:
            logger.debug(f"Skipping unusable match: key={key!r} command={command!r}")
            return None
        return key, command

    def _text_content(self, fragment: str) -> str:
        return self.TAG_PATTERN.sub("", fragment)

    def _decode(self, html: Union[bytes, str]) -> str:
        if isinstance(html, bytes):
            return html.decode("utf-8", errors="replace")
        return html or ""


def extract(html: Union[bytes, str], name: str) -> CommandRecord:
    return InstallExtractor().extract(html, name)

