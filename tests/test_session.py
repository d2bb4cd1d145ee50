"""Tests for the interactive loop, driven by a scripted reader."""

import io

import pytest
from rich.console import Console

from simplecalc import messages
from simplecalc.session import run_session

FIRST = messages.PROMPT_FIRST
OPERATOR = messages.PROMPT_OPERATOR
SECOND = messages.PROMPT_SECOND
CONTINUE = messages.PROMPT_CONTINUE


def _console(buf: io.StringIO) -> Console:
    return Console(file=buf, highlight=False, soft_wrap=True)


@pytest.fixture
def run():
    """Run a session over the given input lines.

    Returns (stdout text, prompts asked, stats). Input running out raises
    EOFError, like ``input()`` does.
    """
    def _run(*lines, trace=None):
        out = io.StringIO()
        prompts = []
        feed = iter(lines)

        def read_line(prompt):
            prompts.append(prompt)
            try:
                return next(feed)
            except StopIteration:
                raise EOFError from None

        stats = run_session(_console(out), read_line=read_line, trace=trace)
        return out.getvalue(), prompts, stats
    return _run


# --- Scenarios ---

def test_addition_scenario(run):
    out, prompts, stats = run("3", "+", "4", "n")
    assert "结果: 3 + 4 = 7\n" in out
    assert prompts == [FIRST, OPERATOR, SECOND, CONTINUE]
    assert stats.computations == 1
    assert stats.errors == 0


def test_banner_and_farewell(run):
    out, _, _ = run("1", "+", "1", "n")
    assert out.startswith("简单计算器\n----------\n")
    assert out.endswith("感谢使用！\n")


def test_division_by_zero_scenario(run):
    out, _, stats = run("5", "/", "0", "n")
    assert "错误：除数不能为零" in out
    assert "结果" not in out
    assert stats.errors == 1
    assert stats.computations == 0


def test_invalid_operator(run):
    out, _, stats = run("1", "%", "2", "n")
    assert "无效的操作符" in out
    assert "结果" not in out
    assert stats.errors == 1


def test_operator_is_trimmed(run):
    out, _, _ = run("6", "  *  ", "7", "n")
    assert "结果: 6 * 7 = 42" in out


def test_result_line_formats_all_numbers(run):
    out, _, _ = run("1.5", "*", "-2", "y", "0.1", "+", "0.2", "n")
    assert "结果: 1.5 * -2 = -3" in out
    assert "结果: 0.1 + 0.2 = 0.30000000000000004" in out


# --- Operand retry ---

def test_bad_first_operand_reprompts(run):
    out, prompts, stats = run("abc", "1", "+", "2", "n")
    assert out.count(messages.INVALID_NUMBER) == 1
    assert prompts == [FIRST, FIRST, OPERATOR, SECOND, CONTINUE]
    assert "结果: 1 + 2 = 3" in out
    assert stats.rejected_operands == 1


def test_bad_second_operand_restarts_iteration(run):
    out, prompts, stats = run("1", "+", "x", "2", "*", "3", "n")
    assert prompts == [FIRST, OPERATOR, SECOND, FIRST, OPERATOR, SECOND, CONTINUE]
    assert "结果: 2 * 3 = 6" in out
    assert "1 +" not in out
    assert stats.rejected_operands == 1
    assert stats.computations == 1


def test_empty_operand_is_rejected(run):
    out, prompts, _ = run("", "4", "-", "1", "n")
    assert messages.INVALID_NUMBER in out
    assert prompts[:2] == [FIRST, FIRST]


# --- Continue prompt ---

@pytest.mark.parametrize("answer", ["y", "Y", " y "])
def test_affirmative_answer_repeats(run, answer):
    out, prompts, stats = run("1", "+", "1", answer, "2", "+", "2", "n")
    assert "结果: 2 + 2 = 4" in out
    assert prompts.count(FIRST) == 2
    assert stats.computations == 2


@pytest.mark.parametrize("answer", ["n", "N", "yes", "", "q"])
def test_other_answers_stop(run, answer):
    out, prompts, _ = run("1", "+", "1", answer)
    assert prompts[-1] == CONTINUE
    assert out.endswith(messages.FAREWELL + "\n")


def test_error_iteration_continues(run):
    out, _, stats = run("1", "/", "0", "y", "8", "/", "2", "n")
    assert "错误：除数不能为零" in out
    assert "结果: 8 / 2 = 4" in out
    assert stats.errors == 1
    assert stats.computations == 1


# --- End of input ---

def test_eof_at_first_prompt(run):
    out, prompts, _ = run()
    assert prompts == [FIRST]
    assert out == "简单计算器\n----------\n\n感谢使用！\n"


def test_eof_mid_iteration(run):
    out, prompts, stats = run("1", "+")
    assert prompts == [FIRST, OPERATOR, SECOND]
    assert out.endswith(messages.FAREWELL + "\n")
    assert stats.computations == 0


# --- Diagnostic trace ---

def test_trace_reports_states_and_summary(run):
    trace_buf = io.StringIO()
    run("z", "2", "/", "0", "n", trace=_console(trace_buf))
    trace = trace_buf.getvalue()
    assert "state: awaiting-operator" in trace
    assert "state: exit" in trace
    assert "rejected operand 'z'" in trace
    assert "error: division-by-zero" in trace
    assert "0 computed, 1 failed, 1 operands rejected" in trace


def test_no_trace_by_default(run, capsys):
    run("1", "+", "1", "n")
    assert capsys.readouterr().err == ""
