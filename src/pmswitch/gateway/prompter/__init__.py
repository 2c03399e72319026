"""Interactive prompt operations."""

from pmswitch.gateway.prompter.abc import Prompter as Prompter
from pmswitch.gateway.prompter.fake import FakePrompter as FakePrompter
from pmswitch.gateway.prompter.real import ClickPrompter as ClickPrompter
