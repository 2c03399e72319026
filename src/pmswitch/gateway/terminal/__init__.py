"""Terminal detection operations."""

from pmswitch.gateway.terminal.abc import Terminal as Terminal
from pmswitch.gateway.terminal.fake import FakeTerminal as FakeTerminal
from pmswitch.gateway.terminal.real import RealTerminal as RealTerminal
