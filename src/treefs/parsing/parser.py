"""
Parser for treefs shell commands.

This module tokenizes a line of free text and classifies it into one of the
fixed commands of the treefs command language. Parsing never raises for bad
input: it returns either a ParsedCommand or a ParseFailure carrying the
message to show the user.
"""

import re
from dataclasses import dataclass, field
from enum import Enum

# A token is a run of non-space characters in which double-quoted sections may
# contain spaces; the quotes themselves are stripped afterwards.
TOKEN_PATTERN = re.compile(r'(?:[^\s"]+|"[^"]*")+')


class CommandType(Enum):
    """Operation selected by a command line."""

    HELP = "help"
    LIST = "list"
    CREATE_DIRECTORY = "create_directory"
    DELETE_DIRECTORY = "delete_directory"
    CREATE_FILE = "create_file"
    WRITE_FILE = "write_file"
    READ_FILE = "read_file"
    DELETE_FILE = "delete_file"


class FailureReason(Enum):
    """Why a command line could not be turned into a command."""

    EMPTY = "empty"
    USAGE = "usage"
    UNKNOWN = "unknown"


EMPTY_INPUT = "Please enter a command."
UNKNOWN_COMMAND = "Unknown command. Type 'help' for a list of commands."

USAGE = {
    "mkdir": "Missing path for mkdir. Usage: mkdir <path>",
    "rmdir": "Missing path for rmdir. Usage: rmdir <path>",
    "create folder": "Missing path for create folder. Usage: create folder <path>",
    "create file": "Missing path for create file. Usage: create file <path> [content]",
    "create": "Unknown 'create' command. Did you mean 'create file <path>' or 'create folder <path>'?",
    "delete folder": "Missing path for delete folder. Usage: delete folder <path>",
    "delete file": "Missing path for delete file. Usage: delete file <path>",
    "delete": "Unknown 'delete' command usage. Options: delete file <path>, delete folder <path>.",
    "write file": "Missing path or content for write file. Usage: write file <path> <content>",
    "write": "Unknown 'write' command. Did you mean 'write file <path> <content>'?",
    "read file": "Missing path for read file. Usage: read file <path>",
    "read": "Unknown 'read' command. Did you mean 'read file <path>'?",
}


@dataclass
class ParsedCommand:
    """A command line classified into a command with its arguments."""

    command_type: CommandType
    path: str | None = None
    content: str | None = None
    tokens: list[str] = field(default_factory=list)


@dataclass
class ParseFailure:
    """A command line that does not form a valid command."""

    reason: FailureReason
    message: str
    tokens: list[str] = field(default_factory=list)


ParseResult = ParsedCommand | ParseFailure


def tokenize(line: str) -> list[str]:
    """
    Split a command line into tokens.

    Whitespace separates tokens except inside double quotes, which keep their
    contents together as part of one token and are then removed.

    Examples:
        'create file /a.txt hi there' -> ["create", "file", "/a.txt", "hi", "there"]
        'create file "/my docs/a.txt" "hi   there"' -> ["create", "file", "/my docs/a.txt", "hi   there"]
    """
    return [token.replace('"', "") for token in TOKEN_PATTERN.findall(line.strip())]


class CommandParser:
    """Classifies tokenized command lines into ParsedCommand values."""

    LIST_KEYWORDS = {"files", "file"}

    def __init__(self):
        self._handlers = {
            "help": self._parse_help,
            "ls": self._parse_list,
            "list": self._parse_list,
            "mkdir": self._parse_mkdir,
            "rmdir": self._parse_rmdir,
            "create": self._parse_create,
            "delete": self._parse_delete,
            "write": self._parse_write,
            "read": self._parse_read,
        }

    def parse(self, line: str) -> ParseResult:
        """
        Parse a command line.

        Params:
            line: Raw text entered by the user

        Returns:
            ParsedCommand for a recognised command with its required arguments,
            otherwise a ParseFailure with the message to display
        """
        tokens = tokenize(line or "")
        if not tokens:
            return ParseFailure(FailureReason.EMPTY, EMPTY_INPUT)

        command = tokens[0].lower()
        handler = self._handlers.get(command)
        if handler is None:
            return ParseFailure(FailureReason.UNKNOWN, UNKNOWN_COMMAND, tokens)
        return handler(tokens)

    def _parse_help(self, tokens: list[str]) -> ParseResult:
        return ParsedCommand(CommandType.HELP, tokens=tokens)

    def _parse_list(self, tokens: list[str]) -> ParseResult:
        args = tokens[1:]
        if args and args[0].lower() in self.LIST_KEYWORDS:
            args = args[1:]
        return ParsedCommand(CommandType.LIST, path=args[0] if args else None, tokens=tokens)

    def _parse_mkdir(self, tokens: list[str]) -> ParseResult:
        return self._with_path(tokens, 1, CommandType.CREATE_DIRECTORY, "mkdir")

    def _parse_rmdir(self, tokens: list[str]) -> ParseResult:
        return self._with_path(tokens, 1, CommandType.DELETE_DIRECTORY, "rmdir")

    def _parse_create(self, tokens: list[str]) -> ParseResult:
        keyword = _keyword(tokens)
        if keyword == "folder":
            return self._with_path(tokens, 2, CommandType.CREATE_DIRECTORY, "create folder")
        if keyword == "file":
            parsed = self._with_path(tokens, 2, CommandType.CREATE_FILE, "create file")
            if isinstance(parsed, ParsedCommand):
                parsed.content = " ".join(tokens[3:])
            return parsed
        reason = FailureReason.USAGE if keyword is None else FailureReason.UNKNOWN
        return ParseFailure(reason, USAGE["create"], tokens)

    def _parse_delete(self, tokens: list[str]) -> ParseResult:
        keyword = _keyword(tokens)
        if keyword == "folder":
            return self._with_path(tokens, 2, CommandType.DELETE_DIRECTORY, "delete folder")
        if keyword == "file":
            return self._with_path(tokens, 2, CommandType.DELETE_FILE, "delete file")
        if keyword is None:
            return ParseFailure(FailureReason.USAGE, USAGE["delete"], tokens)
        # Without a keyword the argument is taken to be a file.
        return ParsedCommand(CommandType.DELETE_FILE, path=tokens[1], tokens=tokens)

    def _parse_write(self, tokens: list[str]) -> ParseResult:
        if _keyword(tokens) != "file":
            return ParseFailure(FailureReason.UNKNOWN, USAGE["write"], tokens)
        if len(tokens) < 4:
            return ParseFailure(FailureReason.USAGE, USAGE["write file"], tokens)
        return ParsedCommand(
            CommandType.WRITE_FILE,
            path=tokens[2],
            content=" ".join(tokens[3:]),
            tokens=tokens,
        )

    def _parse_read(self, tokens: list[str]) -> ParseResult:
        if _keyword(tokens) != "file":
            return ParseFailure(FailureReason.UNKNOWN, USAGE["read"], tokens)
        return self._with_path(tokens, 2, CommandType.READ_FILE, "read file")

    def _with_path(
        self, tokens: list[str], index: int, command_type: CommandType, usage: str
    ) -> ParseResult:
        if len(tokens) <= index:
            return ParseFailure(FailureReason.USAGE, USAGE[usage], tokens)
        return ParsedCommand(command_type, path=tokens[index], tokens=tokens)


def _keyword(tokens: list[str]) -> str | None:
    return tokens[1].lower() if len(tokens) > 1 else None


def parse_command(line: str) -> ParseResult:
    """
    Convenience function to parse a command line.

    Params:
        line: The command line to parse

    Returns:
        ParsedCommand or ParseFailure
    """
    parser = CommandParser()
    return parser.parse(line)
