"""
Command interpreter for the treefs command language.

The interpreter turns one line of user text into one namespace operation and
one reply. Each dispatch step returns a CommandOutcome; nothing raised while
handling a line reaches the caller.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from treefs.commands import messages
from treefs.core.namespace import Namespace
from treefs.core.path_utils import ROOT_PATH
from treefs.core.types import OperationResult
from treefs.exceptions import ErrorKind
from treefs.parsing.parser import (
    CommandParser,
    CommandType,
    ParsedCommand,
    ParseFailure,
)

logger = logging.getLogger(__name__)

CurrentPathProvider = Callable[[], str]
OpenFileQuery = Callable[[str], bool]


@dataclass
class CommandOutcome:
    """
    Tagged result of interpreting one command line.

    ``message`` is the single reply shown to the user. ``error_kind`` is set
    when a namespace operation failed; ``command_type`` is None when the line
    could not be parsed or an unexpected error occurred.
    """

    ok: bool
    message: str
    command_type: CommandType | None = None
    error_kind: ErrorKind | None = None

    def __str__(self) -> str:
        return self.message


class CommandInterpreter:
    """
    Maps command lines onto Namespace operations.

    Params:
        namespace: The namespace the commands operate on
        current_path: Returns the directory ``ls`` lists when given no path
        is_open_file: Tells whether a path is the file currently open in the
            presentation layer
    """

    def __init__(
        self,
        namespace: Namespace,
        current_path: CurrentPathProvider | None = None,
        is_open_file: OpenFileQuery | None = None,
    ):
        self.namespace = namespace
        self.current_path = current_path or (lambda: ROOT_PATH)
        self.is_open_file = is_open_file or (lambda path: False)
        self.parser = CommandParser()
        self._handlers: dict[CommandType, Callable[[ParsedCommand], CommandOutcome]] = {
            CommandType.HELP: self._help,
            CommandType.LIST: self._list,
            CommandType.CREATE_DIRECTORY: self._create_directory,
            CommandType.DELETE_DIRECTORY: self._delete_directory,
            CommandType.CREATE_FILE: self._create_file,
            CommandType.WRITE_FILE: self._write_file,
            CommandType.READ_FILE: self._read_file,
            CommandType.DELETE_FILE: self._delete_file,
        }

    def execute(self, line: str) -> str:
        """Interpret a command line and return its reply."""
        return self.run(line).message

    def run(self, line: str) -> CommandOutcome:
        """
        Interpret a command line.

        Params:
            line: Raw text entered by the user

        Returns:
            CommandOutcome holding exactly one reply
        """
        try:
            parsed = self.parser.parse(line)
            if isinstance(parsed, ParseFailure):
                return CommandOutcome(ok=False, message=parsed.message)
            return self._handlers[parsed.command_type](parsed)
        except Exception:
            logger.exception("Error processing command: %r", line)
            return CommandOutcome(ok=False, message=messages.UNEXPECTED_ERROR)

    # -------------------------------------------------------------------------
    # Handlers
    # -------------------------------------------------------------------------

    def _help(self, command: ParsedCommand) -> CommandOutcome:
        return CommandOutcome(True, messages.HELP_MESSAGE, command.command_type)

    def _list(self, command: ParsedCommand) -> CommandOutcome:
        path = command.path if command.path is not None else self.current_path()
        result = self.namespace.list_entries(path)
        if not result.ok:
            return self._failure(command, result, messages.LIST_FAILED, path)
        if not result.value:
            return CommandOutcome(True, messages.LIST_EMPTY.format(path=path), command.command_type)
        lines = [messages.LIST_HEADER.format(path=path)]
        lines.extend(
            messages.LIST_ENTRY.format(name=name, type=node_type.value)
            for name, node_type in result.value
        )
        return CommandOutcome(True, "\n".join(lines), command.command_type)

    def _create_directory(self, command: ParsedCommand) -> CommandOutcome:
        result = self.namespace.create_directory(command.path)
        return self._mutation(
            command, result, messages.DIRECTORY_CREATED, messages.DIRECTORY_CREATE_FAILED
        )

    def _delete_directory(self, command: ParsedCommand) -> CommandOutcome:
        was_open = self.is_open_file(command.path)
        result = self.namespace.delete_directory(command.path)
        suffix = messages.OPEN_DIRECTORY_DELETED if was_open else ""
        return self._mutation(
            command, result, messages.DIRECTORY_DELETED, messages.DIRECTORY_DELETE_FAILED, suffix
        )

    def _create_file(self, command: ParsedCommand) -> CommandOutcome:
        result = self.namespace.create_file(command.path, command.content or "")
        return self._mutation(command, result, messages.FILE_CREATED, messages.FILE_CREATE_FAILED)

    def _write_file(self, command: ParsedCommand) -> CommandOutcome:
        result = self.namespace.update_file(command.path, command.content)
        return self._mutation(command, result, messages.FILE_UPDATED, messages.FILE_UPDATE_FAILED)

    def _read_file(self, command: ParsedCommand) -> CommandOutcome:
        result = self.namespace.read_file(command.path)
        if not result.ok:
            return self._failure(command, result, messages.READ_FAILED, command.path)
        reply = messages.FILE_CONTENT.format(path=command.path, content=result.value)
        return CommandOutcome(True, reply, command.command_type)

    def _delete_file(self, command: ParsedCommand) -> CommandOutcome:
        was_open = self.is_open_file(command.path)
        result = self.namespace.delete_file(command.path)
        suffix = messages.OPEN_FILE_DELETED if was_open else ""
        return self._mutation(
            command, result, messages.FILE_DELETED, messages.FILE_DELETE_FAILED, suffix
        )

    # -------------------------------------------------------------------------
    # Reply helpers
    # -------------------------------------------------------------------------

    def _mutation(
        self,
        command: ParsedCommand,
        result: OperationResult,
        success: str,
        failure: str,
        suffix: str = "",
    ) -> CommandOutcome:
        if not result.ok:
            return self._failure(command, result, failure, command.path)
        reply = success.format(path=command.path) + suffix
        if not result.persisted:
            reply += messages.NOT_SAVED_WARNING
        return CommandOutcome(True, reply, command.command_type)

    def _failure(
        self, command: ParsedCommand, result: OperationResult, template: str, path: str
    ) -> CommandOutcome:
        reply = template.format(path=path, reason=result.message)
        return CommandOutcome(False, reply, command.command_type, result.kind)
