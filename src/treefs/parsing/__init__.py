"""
treefs command parsing components.

This package provides the quote-aware tokenizer and the classifier that maps
command lines onto the treefs command grammar.
"""

from treefs.parsing.parser import (
    EMPTY_INPUT,
    UNKNOWN_COMMAND,
    USAGE,
    CommandParser,
    CommandType,
    FailureReason,
    ParsedCommand,
    ParseFailure,
    ParseResult,
    parse_command,
    tokenize,
)

__all__ = [
    "EMPTY_INPUT",
    "UNKNOWN_COMMAND",
    "USAGE",
    "CommandParser",
    "CommandType",
    "FailureReason",
    "ParsedCommand",
    "ParseFailure",
    "ParseResult",
    "parse_command",
    "tokenize",
]
