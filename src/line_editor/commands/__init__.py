"""Command-line scanner, grammar, and address resolution."""

from .models import DOLLAR, Address, AddressToken, Command, CommandKind
from .parser import parse_address, parse_command
from .resolver import LineRange, resolve_range
from .scanner import LineScanner

__all__ = [
    "Address",
    "AddressToken",
    "Command",
    "CommandKind",
    "DOLLAR",
    "LineRange",
    "LineScanner",
    "parse_address",
    "parse_command",
    "resolve_range",
]
