"""
Sample content for a freshly initialized namespace.
"""

from treefs.core.namespace import Namespace

SAMPLE_DIRECTORIES = ["/documents", "/documents/work", "/empty_folder"]

SAMPLE_FILES = {
    "/documents/notes.txt": "This is a note.",
    "/documents/work/report.docx": "Work report content.",
    "/readme.txt": "Hello VFS!",
}


def seed_sample_content(namespace: Namespace) -> None:
    """Create the sample directories and files, skipping entries that already exist."""
    for path in SAMPLE_DIRECTORIES:
        namespace.create_directory(path)
    for path, content in SAMPLE_FILES.items():
        namespace.create_file(path, content)
