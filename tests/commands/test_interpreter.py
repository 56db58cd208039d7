"""
Tests for the command interpreter.

Focus Areas:
1. Each command form reaches the matching namespace operation
2. Reply formatting for successes and failures
3. Injected presentation callbacks (current path, open file)
4. Faults never escape the interpreter
"""

from unittest.mock import patch

import pytest

from treefs.commands import messages
from treefs.commands.interpreter import CommandInterpreter
from treefs.core.namespace import Namespace
from treefs.exceptions import ErrorKind
from treefs.parsing.parser import CommandType, UNKNOWN_COMMAND, USAGE
from treefs.storage import PersistenceGateway

from conftest import FailingStore


class TestBasicCommands:
    """Test the happy path of every command."""

    def test_help(self, interpreter):
        assert interpreter.execute("help") == messages.HELP_MESSAGE

    def test_create_file_with_content(self, interpreter, namespace):
        """Everything after the path becomes the content."""
        reply = interpreter.execute("create file /x.txt hi there")
        assert reply == "File `/x.txt` created successfully."
        assert namespace.read_file("/x.txt").value == "hi there"

    def test_create_file_in_new_directories(self, interpreter, namespace):
        interpreter.execute("create file /a/b/c.txt x")
        assert namespace.list("/a").value == ["b"]

    def test_write_file(self, interpreter, namespace):
        namespace.create_file("/x.txt", "old")
        reply = interpreter.execute('write file /x.txt "brand new"')
        assert reply == "File `/x.txt` updated successfully."
        assert namespace.read_file("/x.txt").value == "brand new"

    def test_read_file_fenced(self, interpreter, namespace):
        namespace.create_file("/readme.txt", "Hello")
        assert interpreter.execute("read file /readme.txt") == (
            "Content of `/readme.txt`:\n```\nHello\n```"
        )

    def test_mkdir_and_create_folder(self, interpreter, namespace):
        assert interpreter.execute("mkdir /a") == "Directory `/a` created successfully."
        assert interpreter.execute("create folder /b") == "Directory `/b` created successfully."
        assert namespace.get_node("/a").is_directory
        assert namespace.get_node("/b").is_directory

    def test_rmdir_and_delete_folder(self, interpreter, namespace):
        namespace.create_directory("/a")
        namespace.create_directory("/b")
        assert interpreter.execute("rmdir /a") == "Directory `/a` deleted successfully."
        assert interpreter.execute("delete folder /b") == "Directory `/b` deleted successfully."
        assert namespace.list("/").value == []

    def test_delete_file_forms(self, interpreter, namespace):
        namespace.create_file("/x.txt")
        namespace.create_file("/y.txt")
        assert interpreter.execute("delete file /x.txt") == "File `/x.txt` deleted successfully."
        assert interpreter.execute("delete /y.txt") == "File `/y.txt` deleted successfully."
        assert namespace.list("/").value == []

    def test_quoted_path_with_spaces(self, interpreter, namespace):
        interpreter.execute('create file "/my docs/a b.txt" content')
        assert namespace.read_file("/my docs/a b.txt").value == "content"


class TestListing:
    """Test ls/list replies."""

    def test_list_formats_entries(self, interpreter, namespace):
        """Entries are listed directories first with their type."""
        namespace.create_file("/b.txt")
        namespace.create_directory("/a")
        assert interpreter.execute("ls /") == (
            "Contents of `/`:\n- a (directory)\n- b.txt (file)"
        )

    def test_list_empty(self, interpreter, namespace):
        namespace.create_directory("/empty")
        assert interpreter.execute("list files /empty") == "Directory `/empty` is empty."

    def test_list_defaults_to_current_path(self, namespace):
        """Without a path, the caller's current path is listed."""
        namespace.create_file("/docs/a.txt")
        interpreter = CommandInterpreter(namespace, current_path=lambda: "/docs")
        assert interpreter.execute("ls") == "Contents of `/docs`:\n- a.txt (file)"

    def test_list_failure(self, interpreter, namespace):
        namespace.create_file("/f.txt")
        outcome = interpreter.run("ls /f.txt")
        assert not outcome.ok
        assert outcome.error_kind is ErrorKind.NOT_A_DIRECTORY
        assert outcome.message == "Error: Could not list contents of `/f.txt`. Not a directory: /f.txt."


class TestFailureReplies:
    """Test replies for failed operations and bad input."""

    def test_empty_input(self, interpreter):
        assert interpreter.execute("   ") == "Please enter a command."

    def test_unknown_command(self, interpreter):
        outcome = interpreter.run("dance")
        assert not outcome.ok
        assert outcome.command_type is None
        assert outcome.message == UNKNOWN_COMMAND

    def test_usage_message(self, interpreter):
        assert interpreter.execute("write file /x.txt") == USAGE["write file"]

    def test_create_existing(self, interpreter, namespace):
        namespace.create_file("/x.txt")
        outcome = interpreter.run("create file /x.txt again")
        assert outcome.error_kind is ErrorKind.ALREADY_EXISTS
        assert outcome.message == (
            "Error: Could not create file `/x.txt`. /x.txt already exists."
        )

    def test_read_missing(self, interpreter):
        assert interpreter.execute("read file /nope.txt") == (
            "Error: Could not read file `/nope.txt`. Path not found: /nope.txt."
        )

    def test_delete_non_empty_directory(self, interpreter, namespace):
        namespace.create_file("/docs/a.txt", "1")
        outcome = interpreter.run("rmdir /docs")
        assert outcome.error_kind is ErrorKind.DIRECTORY_NOT_EMPTY
        assert namespace.read_file("/docs/a.txt").value == "1"

    def test_bare_delete_of_directory_fails_as_file_delete(self, interpreter, namespace):
        """Bare delete uses file semantics even when the target is a directory."""
        namespace.create_directory("/docs")
        outcome = interpreter.run("delete /docs")
        assert outcome.command_type is CommandType.DELETE_FILE
        assert outcome.error_kind is ErrorKind.NOT_A_FILE
        assert namespace.get_node("/docs") is not None

    def test_rmdir_of_file_fails_as_directory_delete(self, interpreter, namespace):
        """rmdir on a file is routed to directory deletion."""
        namespace.create_file("/x.txt")
        outcome = interpreter.run("rmdir /x.txt")
        assert outcome.command_type is CommandType.DELETE_DIRECTORY
        assert outcome.error_kind is ErrorKind.NOT_A_DIRECTORY

    def test_delete_root(self, interpreter):
        outcome = interpreter.run("delete folder /")
        assert outcome.error_kind is ErrorKind.INVALID_OPERATION

    def test_unsaved_change_warning(self):
        """A successful mutation that could not be saved says so."""
        namespace = Namespace(gateway=PersistenceGateway(FailingStore()))
        reply = CommandInterpreter(namespace).execute("mkdir /a")
        assert reply.startswith("Directory `/a` created successfully.")
        assert reply.endswith(messages.NOT_SAVED_WARNING)


class TestOpenFileQuery:
    """Test use of the injected open-file query."""

    def test_deleting_open_file_is_reported(self, namespace):
        namespace.create_file("/open.txt")
        interpreter = CommandInterpreter(namespace, is_open_file=lambda p: p == "/open.txt")
        reply = interpreter.execute("delete file /open.txt")
        assert reply == "File `/open.txt` deleted successfully." + messages.OPEN_FILE_DELETED

    def test_deleting_other_file_is_plain(self, namespace):
        namespace.create_file("/other.txt")
        interpreter = CommandInterpreter(namespace, is_open_file=lambda p: p == "/open.txt")
        assert interpreter.execute("delete /other.txt") == "File `/other.txt` deleted successfully."

    def test_failed_delete_ignores_open_state(self, namespace):
        interpreter = CommandInterpreter(namespace, is_open_file=lambda p: True)
        reply = interpreter.execute("delete file /missing.txt")
        assert reply.startswith("Error:")
        assert messages.OPEN_FILE_DELETED not in reply


class TestFaultContainment:
    """Test that unexpected faults become a generic reply."""

    def test_namespace_fault_is_contained(self, interpreter, namespace):
        with patch.object(namespace, "create_file", side_effect=RuntimeError("boom")):
            outcome = interpreter.run("create file /a.txt")
        assert not outcome.ok
        assert outcome.message == messages.UNEXPECTED_ERROR

    def test_callback_fault_is_contained(self, namespace):
        def broken_query(path):
            raise KeyError(path)

        interpreter = CommandInterpreter(namespace, is_open_file=broken_query)
        assert interpreter.execute("delete /a.txt") == messages.UNEXPECTED_ERROR

    @pytest.mark.parametrize("line", [None, 'read file "', '"""', "create file /a/ \"x"])
    def test_odd_input_never_raises(self, interpreter, line):
        """Malformed input always produces exactly one reply string."""
        reply = interpreter.execute(line)
        assert isinstance(reply, str)
        assert reply
