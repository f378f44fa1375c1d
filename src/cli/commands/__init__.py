"""CLI command modules."""

from .export import export, import_cmd
from .report import report
from .selections import set_cmd, shuffle, table
from .shell import shell

__all__ = [
    "table",
    "set_cmd",
    "shuffle",
    "export",
    "import_cmd",
    "report",
    "shell",
]
