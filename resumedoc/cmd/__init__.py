"""Command implementations for the resumedoc CLI."""

from resumedoc.cmd.convert import cmd_convert
from resumedoc.cmd.new import cmd_new
from resumedoc.cmd.pdf import cmd_pdf

__all__ = [
    "cmd_convert",
    "cmd_new",
    "cmd_pdf",
]
