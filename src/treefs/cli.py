"""
Command-Line Interface

Interactive shell standing in for the presentation layer: it owns the current
directory and the open file, forwards every other line to the command
interpreter and prints the reply.

Commands:
    treefs shell  - Interactive session
    treefs run    - Execute a single command line and print the reply

Shell-local commands:
    cd <path>     - Change the directory `ls` lists by default
    pwd           - Print the current directory
    open <path>   - Mark a file as open in the editor
    close         - Close the open file
    @<query>      - Suggest file paths containing <query>
    exit, quit    - Leave the shell

Usage:
    treefs shell --store ./vfs
    treefs run "create file /notes.txt hello" --store ./vfs
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from treefs.commands.interpreter import CommandInterpreter
from treefs.config import TreeFSConfig
from treefs.core.namespace import Namespace
from treefs.core.path_utils import ROOT_PATH, canonical_path, is_within
from treefs.parsing.parser import tokenize

__all__ = ["main", "app", "ShellSession"]

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="treefs",
    help="In-memory file namespace driven by a small command language",
    no_args_is_help=True,
)

WELCOME = "Welcome to treefs! Type 'help' to see available commands."
EXIT_COMMANDS = {"exit", "quit"}


class ShellSession:
    """
    Presentation state for one interactive session.

    Tracks the current directory and the open file, and re-checks the open
    file whenever the namespace reports a change.
    """

    def __init__(self, namespace: Namespace, restored: bool = False):
        self.namespace = namespace
        self.restored = restored
        self.cwd = ROOT_PATH
        self.open_file: str | None = None
        self.namespace.on_change = self._on_change
        self.interpreter = CommandInterpreter(
            namespace,
            current_path=lambda: self.cwd,
            is_open_file=self.is_open_file,
        )

    @classmethod
    def open(cls, config: TreeFSConfig) -> "ShellSession":
        namespace, restored = Namespace.open(
            config.build_gateway(), seed=config.seed_samples
        )
        return cls(namespace, restored=restored)

    @property
    def prompt(self) -> str:
        return f"treefs:{self.cwd}> "

    def is_open_file(self, path: str) -> bool:
        if self.open_file is None:
            return False
        return is_within(self.open_file, path)

    def handle(self, line: str) -> str | None:
        """Process one line; returns the reply, or None when the session should end."""
        tokens = tokenize(line)
        command = tokens[0].lower() if tokens else ""
        if command in EXIT_COMMANDS:
            return None
        if command == "cd":
            return self._cd(tokens[1] if len(tokens) > 1 else ROOT_PATH)
        if command == "pwd":
            return self.cwd
        if command == "open" and len(tokens) > 1:
            return self._open(tokens[1])
        if command == "close":
            self.open_file = None
            return "No file is open."
        if command.startswith("@"):
            suggestions = self.namespace.suggest_paths(command[1:], current=self.open_file)
            return "\n".join(suggestions) if suggestions else "No matching files."
        return self.interpreter.execute(line)

    def _cd(self, path: str) -> str:
        target = canonical_path(path if path.startswith("/") else f"{self.cwd}/{path}")
        result = self.namespace.list(target)
        if not result.ok:
            return f"Error: Cannot change directory to `{target}`. {result.message}."
        self.cwd = target
        return self.cwd

    def _open(self, path: str) -> str:
        result = self.namespace.read_file(path)
        if not result.ok:
            return f"Error: Cannot open `{path}`. {result.message}."
        self.open_file = canonical_path(path)
        return f"Opened `{self.open_file}`:\n{result.value}"

    def _on_change(self, path: str) -> None:
        logger.debug("Namespace changed below %s", path)
        if self.open_file is not None and not self.namespace.read_file(self.open_file).ok:
            self.open_file = None
        if not self.namespace.list(self.cwd).ok:
            self.cwd = ROOT_PATH


@app.callback()
def _main() -> None:
    """In-memory file namespace driven by a small command language."""


def _load_config(store: Optional[Path], samples: bool, log_level: Optional[str]) -> TreeFSConfig:
    overrides: dict[str, object] = {"seed_samples": samples}
    if store is not None:
        overrides["storage_dir"] = store
    if log_level is not None:
        overrides["log_level"] = log_level
    config = TreeFSConfig(**overrides)
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    return config


@app.command()
def shell(
    store: Optional[Path] = typer.Option(
        None,
        "--store", "-s",
        help="Directory the snapshot is persisted in (default: memory only)",
    ),
    samples: bool = typer.Option(
        True,
        "--samples/--no-samples",
        help="Seed sample content into a fresh namespace",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level", "-l",
        help="Logging level",
    ),
) -> None:
    """Start an interactive session."""
    session = ShellSession.open(_load_config(store, samples, log_level))
    if not session.restored:
        typer.echo("Started with a fresh namespace.")
    typer.echo(WELCOME)
    while True:
        try:
            line = input(session.prompt)
        except (EOFError, KeyboardInterrupt):
            typer.echo()
            break
        reply = session.handle(line)
        if reply is None:
            break
        typer.echo(reply)


@app.command()
def run(
    command: str = typer.Argument(..., help="Command line to execute"),
    store: Optional[Path] = typer.Option(
        None,
        "--store", "-s",
        help="Directory the snapshot is persisted in (default: memory only)",
    ),
    samples: bool = typer.Option(
        True,
        "--samples/--no-samples",
        help="Seed sample content into a fresh namespace",
    ),
) -> None:
    """Execute one command line and print the reply."""
    session = ShellSession.open(_load_config(store, samples, None))
    typer.echo(session.interpreter.execute(command))


def main() -> None:
    app()
