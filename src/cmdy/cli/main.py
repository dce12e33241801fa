#!/usr/bin/env python3
"""
CMDY CLI - Install Command Lookup
---------------------------------
Orchestrates a lookup end to end:
1. Argument parsing & settings resolution
2. Fetching the command-not-found.com page (scoped HTTP client)
3. Extraction into a CommandRecord
4. Rendering a single distro, the full listing, or the pretty report

Exit codes: 0 success, 1 nothing found in list mode, 2 usage or config
error, 3 transport or client error, 130 interrupted.

Author: Cmdy Team
Date: 2026-10-19
"""

import sys
import logging
import argparse
from typing import List, Optional

import httpx

from cmdy.cli.formatter import CmdyFormatter, console
from cmdy.core.config import load_settings
from cmdy.core.errors import ConfigError, InitError, TransportError
from cmdy.parsing.extractor import InstallExtractor
from cmdy.transport.fetcher import CommandFetcher

__version__ = "1.0.0"

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_USAGE = 2
EXIT_TRANSPORT = 3
EXIT_INTERRUPTED = 130

logger = logging.getLogger("cmdy.cli")


def _positive_seconds(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid timeout: {value!r}")
    if seconds <= 0:
        raise argparse.ArgumentTypeError("timeout must be greater than zero")
    return seconds


class CmdyCLI:
    """
    CLI wrapper that turns flags into a fetch -> extract -> render run.
    The formatter and HTTP transport can be swapped in for tests.
    """

    def __init__(self, formatter: Optional[CmdyFormatter] = None,
                 transport: Optional[httpx.BaseTransport] = None):
        self.formatter = formatter or CmdyFormatter()
        self.transport = transport
        self.extractor = InstallExtractor()
        self.parser = argparse.ArgumentParser(
            prog="cmdy",
            description="cmdy - Find how to install a command on every Linux distro",
            epilog="Data from https://command-not-found.com",
        )
        self._setup_args()

    def _setup_args(self):
        self.parser.add_argument("-v", "--version", action="version", version=f"cmdy v{__version__}")
        self.parser.add_argument("-c", "--command", required=True, help="Command to look for")
        self.parser.add_argument(
            "-d", "--distro",
            help="Show only a specific distro (required if you don't specify --list)",
        )
        self.parser.add_argument("-la", "--list", dest="list_all", action="store_true",
                                 help="List all possible distros")
        self.parser.add_argument("-p", "--pretty", action="store_true",
                                 help="With --list, print the highlighted report")
        self.parser.add_argument("--config", metavar="PATH", help="YAML settings file")
        self.parser.add_argument("--timeout", type=_positive_seconds, metavar="SECONDS",
                                 help="Request timeout (default: 30)")
        self.parser.add_argument("--verbose", action="store_true", help="Enable debug logging on stderr")

    def _configure_logging(self, verbose: bool):
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary entry point; returns the process exit code."""
        args = self.parser.parse_args(argv)
        if not args.list_all and not args.distro:
            self.parser.error("--distro is required unless --list is set")

        self._configure_logging(args.verbose)

        try:
            settings = load_settings(args.config).with_overrides(timeout=args.timeout)
        except ConfigError as e:
            self.formatter.error(str(e))
            return EXIT_USAGE

        name = args.command
        self.formatter.searching(name)

        try:
            with CommandFetcher(settings, transport=self.transport) as fetcher:
                body = fetcher.fetch(name)
        except (TransportError, InitError) as e:
            logger.debug(f"Lookup for '{name}' aborted: {e!r}")
            self.formatter.error(str(e))
            return EXIT_TRANSPORT

        self.formatter.found(name)
        record = self.extractor.extract(body, name)

        if args.list_all:
            if record.is_empty():
                self.formatter.not_found()
                return EXIT_NOT_FOUND
            if args.pretty:
                self.formatter.render_report(record)
            else:
                self.formatter.render_list(record)
        else:
            self.formatter.render_entry(record, args.distro.strip().lower())

        return EXIT_OK


def main(argv: Optional[List[str]] = None):
    """Application entry point with interrupt handling."""
    try:
        code = CmdyCLI().run(argv)
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        code = EXIT_INTERRUPTED
    sys.exit(code)


if __name__ == "__main__":
    main()
