"""Interactive calculator loop.

One iteration walks the State machine:
AWAITING_FIRST → AWAITING_OPERATOR → AWAITING_SECOND → COMPUTED →
AWAITING_CONTINUE, then back to AWAITING_FIRST or on to EXIT.

A rejected operand (either one) restarts the iteration from the first
prompt. Calculation errors are printed and the loop carries on. End of
input at any prompt ends the session the same way a "no" answer does.
"""

from __future__ import annotations

from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from simplecalc import messages
from simplecalc.arithmetic import calculate, format_number, parse_operand
from simplecalc.models import Outcome, ParseError, SessionStats, State

# Takes the prompt, returns one line without its newline. Raises EOFError
# when input is exhausted.
LineReader = Callable[[str], str]


class Session:
    """State for one interactive run: console, reader and counters."""

    def __init__(
        self,
        console: Console,
        read_line: Optional[LineReader] = None,
        trace: Optional[Console] = None,
    ) -> None:
        self.console = console
        self.read_line = read_line or self._console_input
        self.trace = trace
        self.stats = SessionStats()
        self.state = State.AWAITING_FIRST

    def _console_input(self, prompt: str) -> str:
        return self.console.input(prompt, markup=False)

    def _say(self, text: str) -> None:
        self.console.print(text, markup=False)

    def _debug(self, text: str) -> None:
        if self.trace is not None:
            self.trace.print(f"[dim]{text}[/dim]")

    def _enter(self, state: State) -> None:
        self.state = state
        self._debug(f"state: {state.value}")

    def _read_operand(self, prompt: str) -> Optional[float]:
        """Prompt for a number. Returns None after reporting a rejected line."""
        line = self.read_line(prompt)
        try:
            return parse_operand(line)
        except ParseError as e:
            self.stats.rejected_operands += 1
            self._debug(f"rejected operand {escape(repr(e.text))}")
            self._say(messages.INVALID_NUMBER)
            return None

    def _report(self, a: float, token: str, b: float, outcome: Outcome) -> None:
        self.stats.record(outcome)
        if outcome.ok:
            self._say(messages.RESULT.format(
                a=format_number(a),
                op=token,
                b=format_number(b),
                value=format_number(outcome.value),
            ))
        else:
            self._debug(f"error: {outcome.error.value}")
            self._say(messages.ERRORS[outcome.error])

    def run(self) -> SessionStats:
        """Run the loop until the user declines to continue or input ends."""
        self._say(messages.TITLE)
        self._say(messages.RULE)

        a = b = 0.0
        token = ""
        self._enter(State.AWAITING_FIRST)
        try:
            while self.state is not State.EXIT:
                if self.state is State.AWAITING_FIRST:
                    first = self._read_operand(messages.PROMPT_FIRST)
                    if first is None:
                        continue
                    a = first
                    self._enter(State.AWAITING_OPERATOR)

                elif self.state is State.AWAITING_OPERATOR:
                    token = self.read_line(messages.PROMPT_OPERATOR).strip()
                    self._enter(State.AWAITING_SECOND)

                elif self.state is State.AWAITING_SECOND:
                    second = self._read_operand(messages.PROMPT_SECOND)
                    if second is None:
                        self._enter(State.AWAITING_FIRST)
                        continue
                    b = second
                    self._enter(State.COMPUTED)

                elif self.state is State.COMPUTED:
                    self._report(a, token, b, calculate(a, token, b))
                    self._enter(State.AWAITING_CONTINUE)

                elif self.state is State.AWAITING_CONTINUE:
                    answer = self.read_line(messages.PROMPT_CONTINUE)
                    if answer.strip().lower() == messages.AFFIRMATIVE:
                        self._enter(State.AWAITING_FIRST)
                    else:
                        self._enter(State.EXIT)
        except EOFError:
            # The pending prompt has no newline yet.
            self.console.print()
            self._debug("end of input")
            self._enter(State.EXIT)

        self._say(messages.FAREWELL)
        self._debug(self.stats.summary())
        return self.stats


def run_session(
    console: Console,
    read_line: Optional[LineReader] = None,
    trace: Optional[Console] = None,
) -> SessionStats:
    """Run one interactive calculator session on ``console``.

    Args:
        console: Where prompts and results go.
        read_line: Reader for input lines; defaults to ``console.input``.
        trace: Optional console for dim diagnostic lines (state changes,
            rejected operands, error outcomes, final counters).

    Returns:
        The counters for the run.
    """
    return Session(console, read_line=read_line, trace=trace).run()
