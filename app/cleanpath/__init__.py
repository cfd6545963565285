"""cleanpath - Delete zero-byte and pattern-matched files and directories.

Walks a target directory (optionally recursively), selects deletion
candidates, optionally backs them up and asks for confirmation, then
removes them while isolating failures per file and per directory.
"""

__version__ = "0.3.0"
