"""User-facing text for the calculator loop.

Every string the loop prints to stdout lives here.
"""

from __future__ import annotations

from simplecalc.models import ErrorKind

TITLE = "简单计算器"
RULE = "----------"

PROMPT_FIRST = "请输入第一个数字: "
PROMPT_OPERATOR = "请输入操作符 (+, -, *, /): "
PROMPT_SECOND = "请输入第二个数字: "
PROMPT_CONTINUE = "继续计算？(y/n): "

INVALID_NUMBER = "无效的数字，请重试"
RESULT = "结果: {a} {op} {b} = {value}"
FAREWELL = "感谢使用！"

ERRORS: dict[ErrorKind, str] = {
    ErrorKind.DIVISION_BY_ZERO: "错误：除数不能为零",
    ErrorKind.INVALID_OPERATOR: "无效的操作符",
}

# Answer to PROMPT_CONTINUE that keeps the loop going (compared lower-cased).
AFFIRMATIVE = "y"
