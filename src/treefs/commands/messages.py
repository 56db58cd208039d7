"""
Reply texts of the treefs command interpreter.
"""

HELP_MESSAGE = """Available commands:
- `help`: Shows this help message.
- `create file <path> [content]`: Creates a new file with optional content.
    Example: create file /my_file.txt Hello world
- `write file <path> <content>`: Writes (overwrites) content to a file.
    Example: write file /my_file.txt New content
- `read file <path>`: Displays the content of a file.
    Example: read file /my_file.txt
- `delete file <path>` or `delete <path>`: Deletes a file.
    Example: delete file /my_file.txt
- `create folder <path>` or `mkdir <path>`: Creates a new directory.
    Example: create folder /my_docs
- `delete folder <path>` or `rmdir <path>`: Deletes an empty directory.
    Example: delete folder /my_docs
- `list files [path]` or `ls [path]`: Lists files and directories. Path is optional, defaults to the current directory.
    Example: ls /documents
    Example: ls
Use double quotes for paths or content containing spaces."""

UNEXPECTED_ERROR = "An unexpected error occurred while processing the command."
NOT_SAVED_WARNING = " Warning: the change could not be saved and exists in memory only."

LIST_HEADER = "Contents of `{path}`:"
LIST_ENTRY = "- {name} ({type})"
LIST_EMPTY = "Directory `{path}` is empty."
LIST_FAILED = "Error: Could not list contents of `{path}`. {reason}."

FILE_CONTENT = "Content of `{path}`:\n```\n{content}\n```"
READ_FAILED = "Error: Could not read file `{path}`. {reason}."

FILE_CREATED = "File `{path}` created successfully."
FILE_CREATE_FAILED = "Error: Could not create file `{path}`. {reason}."
FILE_UPDATED = "File `{path}` updated successfully."
FILE_UPDATE_FAILED = "Error: Could not update file `{path}`. {reason}."
FILE_DELETED = "File `{path}` deleted successfully."
FILE_DELETE_FAILED = "Error: Could not delete file `{path}`. {reason}."
OPEN_FILE_DELETED = " It was open in the editor and has been closed."

DIRECTORY_CREATED = "Directory `{path}` created successfully."
DIRECTORY_CREATE_FAILED = "Error: Could not create directory `{path}`. {reason}."
DIRECTORY_DELETED = "Directory `{path}` deleted successfully."
DIRECTORY_DELETE_FAILED = "Error: Could not delete directory `{path}`. {reason}."
OPEN_DIRECTORY_DELETED = " The open file was in it and has been closed."
