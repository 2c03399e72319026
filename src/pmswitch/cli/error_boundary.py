"""Translation of pmswitch errors into user-facing messages and exit codes."""

import functools
import traceback
from collections.abc import Callable
from typing import Concatenate, ParamSpec

from pmswitch.context import PmsContext
from pmswitch.errors import CommandExecutionError, PmSwitchError
from pmswitch.output import style_error, user_output

P = ParamSpec("P")


def exit_code_for(error: PmSwitchError) -> int:
    """Process exit code for an error.

    A failed child process propagates its own exit code; everything else
    exits with 1.
    """
    if isinstance(error, CommandExecutionError) and error.exit_code > 0:
        return error.exit_code
    return 1


def cli_error_boundary(
    func: Callable[Concatenate[PmsContext, P], None],
) -> Callable[Concatenate[PmsContext, P], None]:
    """Decorator that reports PmSwitchError as `Error: <message>` and exits.

    The traceback is printed too when the context has debug enabled.
    Click exceptions and anything else pass through untouched.
    """

    @functools.wraps(func)
    def wrapper(ctx: PmsContext, *args: P.args, **kwargs: P.kwargs) -> None:
        try:
            func(ctx, *args, **kwargs)
        except PmSwitchError as e:
            if ctx.debug:
                user_output(traceback.format_exc())
            user_output(style_error(str(e)))
            raise SystemExit(exit_code_for(e)) from e

    return wrapper
