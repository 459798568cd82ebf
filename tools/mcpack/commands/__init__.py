"""CLI commands for datapack management.

This module exports all command handlers:
- create: Scaffold a new pack
- info: Summarize a pack directory or archive
- add: Add one element to a pack
- zip: Compress a pack into an archive
"""

from mcpack.commands.add import cmd_add
from mcpack.commands.create import cmd_create
from mcpack.commands.info import cmd_info
from mcpack.commands.zip import cmd_zip

__all__ = [
    "cmd_create",
    "cmd_info",
    "cmd_add",
    "cmd_zip",
]
