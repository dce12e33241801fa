#!/usr/bin/env python3
"""
CMDY ERRORS
-----------
Failure kinds surfaced at the entrypoint. Components raise these and never
retry; the CLI maps each one to an error line and an exit code.

Author: Cmdy Team
Date: 2026-10-19
"""


class CmdyError(RuntimeError):
    """Base class for every error the CLI knows how to report."""


class TransportError(CmdyError):
    """Network, DNS, TLS, redirect or timeout failure while fetching."""


class InitError(CmdyError):
    """The HTTP client could not be constructed or was used out of scope."""


class ConfigError(CmdyError):
    """The settings file is unreadable, unparsable or holds bad values."""
