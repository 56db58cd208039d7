"""
treefs command processing.

This package contains the command interpreter that maps parsed command lines
onto namespace operations and formats their replies.
"""

from treefs.commands.interpreter import CommandInterpreter, CommandOutcome

__all__ = ["CommandInterpreter", "CommandOutcome"]
