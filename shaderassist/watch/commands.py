"""Interactive prompt that controls a running watch."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TextIO

from rich import print as rprint

from shaderassist.watch.state import WatchContext

logger = logging.getLogger(__name__)

HELP_COMMANDS = frozenset({"-h", "-help", "help"})
QUIT_COMMANDS = frozenset({"-q", "-quit", "quit", "exit"})
RECOMPILE_COMMANDS = frozenset({"-r", "-recompile"})

HELP_TEXT = """\
commands:
-h|-help|help:        list of commands
-q|-quit|quit|exit:   quit ShaderAssist
-r|-recompile:        recompile all shaders"""


class CommandChannel:
    """Reads one command per line and flips the watch context's flags.

    Unknown input is ignored. Running out of input counts as a quit.
    """

    def __init__(
        self,
        context: WatchContext,
        stream: TextIO | None = None,
        echo: Callable[[str], None] = rprint,
    ) -> None:
        self.context = context
        self.stream = stream if stream is not None else sys.stdin
        self.echo = echo

    def handle(self, line: str) -> bool:
        """Apply a single command; return False once the user has quit."""
        command = line.strip()
        if command in HELP_COMMANDS:
            self.echo(HELP_TEXT)
        elif command in QUIT_COMMANDS:
            self.context.request_stop()
            return False
        elif command in RECOMPILE_COMMANDS:
            self.echo("forcing recompile")
            self.context.request_recompile()
        return True

    def run(self) -> None:
        for line in self.stream:
            if not self.handle(line):
                return
        logger.debug("Command input closed, stopping")
        self.context.request_stop()
