"""Package manager process operations."""

from pmswitch.gateway.process.abc import ProcessResult as ProcessResult
from pmswitch.gateway.process.abc import ProcessRunner as ProcessRunner
from pmswitch.gateway.process.dry_run import DryRunProcessRunner as DryRunProcessRunner
from pmswitch.gateway.process.fake import FakeProcessRunner as FakeProcessRunner
from pmswitch.gateway.process.fake import RunCall as RunCall
from pmswitch.gateway.process.real import RealProcessRunner as RealProcessRunner
