"""Command Objects, the ordered registry and output helpers.

Registration order lives in :mod:`pwv_terminal.commands.catalog`.  This
package module stays import-light so that services rendering through
:mod:`pwv_terminal.commands.helpers` can be imported from command modules.
"""

from pwv_terminal.commands.base import BaseCommand
from pwv_terminal.commands.registry import CommandRegistry

__all__ = ["BaseCommand", "CommandRegistry"]
