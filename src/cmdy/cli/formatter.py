# src/cmdy/cli/formatter.py
import re
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from cmdy.core.distros import Icon, distro_style
from cmdy.core.models import CommandRecord

# Rich consoles for normal output and error lines
console = Console()
err_console = Console(stderr=True)

# Visible columns left for the command after the distro column
LINE_WIDTH = 80
COMMAND_WIDTH = LINE_WIDTH - 12

SUDO_PATTERN = r"(sudo)"
PACKAGE_MANAGER_PATTERN = r"(apt|apt-get|dnf|yum|pacman|apk|zypper|emerge)"
ACTION_PATTERN = r"(install|add|get)"


class CmdyFormatter:
    """
    CmdyFormatter: everything cmdy prints goes through here.
    Renders the single-entry line, the full listing, the pretty report
    and the status banners.
    """

    def __init__(self, out: Optional[Console] = None, err: Optional[Console] = None):
        self.console = out or console
        self.err_console = err or err_console

    def format_command(self, command: str, name: str) -> Text:
        """
        Colours an install command. Rules stack in order, unanchored, so a
        later rule can recolour part of an earlier match (e.g. the 'get' in
        'apt-get'). The plain text is never changed.
        """
        text = Text(command)
        text.highlight_regex(SUDO_PATTERN, "red")
        text.highlight_regex(PACKAGE_MANAGER_PATTERN, "blue")
        text.highlight_regex(ACTION_PATTERN, "green")
        if name:
            text.highlight_regex(re.escape(name), "bold cyan")
        return text

    def render_entry(self, record: CommandRecord, distro: str):
        """Prints `<icon><distro>: <command>` for one distro, no highlighting."""
        style = distro_style(distro)
        line = Text.assemble(
            (f"{style.icon}{distro}: ", style.color),
            (record.get(distro), "dim"),
        )
        self.console.print()
        self.console.print(line, soft_wrap=True)

    def render_list(self, record: CommandRecord):
        """One row per distro; long commands wrap under the command column."""
        grid = Table.grid()
        grid.add_column(no_wrap=True)
        grid.add_column(max_width=COMMAND_WIDTH, overflow="fold")

        for distro, command in record:
            style = distro_style(distro)
            grid.add_row(
                Text(f"  {Icon.ARROW} {style.icon} {distro}: ", style=style.color),
                Text(command, style="dim"),
            )

        self.console.print()
        self.console.print(grid)

    def render_report(self, record: CommandRecord):
        """
        The pretty report: a header, then every distro with its highlighted
        command. An empty record gets a warning instead of rows; the CLI
        never reaches that branch (list mode stops at not_found first), it
        serves direct callers of the formatter.
        """
        self.console.print()
        self.console.print(Text.assemble(("Command: ", "bold bright_white"), (record.name, "bright_yellow")))
        self.console.print(Text("Installation Commands:", style="bold bright_white"))

        if record.is_empty():
            self.console.print(Text.assemble(f"{Icon.WARN} ", ("No installation commands found", "yellow")))
        else:
            grid = Table.grid()
            grid.add_column(no_wrap=True)
            grid.add_column(max_width=COMMAND_WIDTH, overflow="fold")
            for distro, command in record:
                style = distro_style(distro)
                grid.add_row(
                    Text.assemble(f"{style.icon} ", (f"{distro:<10}", style.color), f"{Icon.ARROW} "),
                    self.format_command(command, record.name),
                )
            self.console.print(grid)

        self.console.print()

    # --- Status lines ---

    def searching(self, name: str):
        self.console.print(Text.assemble(
            f"{Icon.SEARCH} ", ("Searching for ", "bright_white"), (name, "bright_yellow"), "..."
        ))

    def found(self, name: str):
        self.console.print(Text.assemble(
            f"{Icon.CHECK} ", ("Found information for ", "bright_green"), (name, "bright_yellow")
        ))

    def not_found(self):
        self.console.print(Text.assemble(f"{Icon.WARN} ", ("This tool was not found", "yellow")))

    def error(self, message: str):
        self.err_console.print(Text.assemble(f"{Icon.ERROR} ", (f"Error: {message}", "bright_red")))
