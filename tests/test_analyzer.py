import logging

import pytest

from exprtree import core
from exprtree.core import (
    EmptyParentheses,
    ExpressionParser,
    Notation,
    UnexpectedFailure,
    UnknownNotation,
    analyze,
)


def test_infix_analysis():
    result = analyze("a + b * c")
    assert result.ok
    assert result.expression == "a+b*c"
    assert result.notation is Notation.INFIX
    assert result.postfix == "abc*+"
    assert result.prefix == "+a*bc"
    assert result.infix == "(a+(b*c))"


def test_prefix_analysis():
    result = analyze(" * + a b c ")
    assert result.notation is Notation.PREFIX
    assert result.expression == "*+abc"
    assert result.postfix == "ab+c*"
    assert result.prefix == "*+abc"
    assert result.infix == "((a+b)*c)"


def test_postfix_is_passed_through_unchanged():
    parser = ExpressionParser("ab+c*")
    assert parser.notation is Notation.POSTFIX
    assert parser.to_postfix() == "ab+c*"
    assert analyze("ab+c*").postfix == "ab+c*"


@pytest.mark.parametrize("text, kind", [
    ("", "EmptyExpression"),
    ("   ", "EmptyExpression"),
    ("a$b", "InvalidCharacter"),
    ("a()", "EmptyParentheses"),
    ("ab", "MissingOperator"),
    ("ab+c", "MissingOperator"),
    ("a(b)", "MissingOperatorBeforeParen"),
    ("(a+)", "DanglingOperatorBeforeParen"),
    ("a+b)", "UnmatchedClosingParen"),
    ("(a+b", "UnmatchedOpeningParen"),
    ("a*/b", "MissingOperand"),
    ("a+", "InsufficientOperands"),
    ("+a", "InsufficientOperands"),
    ("a+-b", "InsufficientOperands"),
    ("+abc", "UnbalancedExpression"),
    ("abc+", "UnbalancedExpression"),
])
def test_rejected_expressions(text, kind):
    result = analyze(text)
    assert not result.ok
    assert result.error.kind == kind
    assert result.root is None
    assert result.notation is None
    assert result.postfix == result.prefix == result.infix == ""


def test_parser_raises_instead_of_returning():
    with pytest.raises(EmptyParentheses):
        ExpressionParser("a()").build_tree()


def test_unknown_notation():
    parser = ExpressionParser("ab+")
    parser.notation = "unknown"
    with pytest.raises(UnknownNotation):
        parser.to_postfix()


def test_rejection_is_logged(caplog):
    caplog.set_level(logging.INFO, logger="exprtree.core")
    analyze("a()")
    assert any("EmptyParentheses" in record.getMessage() for record in caplog.records)


def test_unexpected_failure_is_wrapped_and_logged(monkeypatch, caplog):
    def explode(postfix):
        raise RuntimeError("internal detail")

    monkeypatch.setattr(core, "build_from_postfix", explode)
    with caplog.at_level(logging.ERROR, logger="exprtree.core"):
        result = analyze("a+b")

    assert isinstance(result.error, UnexpectedFailure)
    assert "internal detail" not in result.error.message
    assert result.root is None
    assert any(record.exc_info for record in caplog.records)


def test_non_string_input_is_an_unexpected_failure():
    assert analyze(None).error.kind == "UnexpectedFailure"


def test_each_call_builds_a_fresh_tree():
    first = analyze("a+b")
    second = analyze("a+b")
    assert first.root == second.root
    assert first.root is not second.root


def test_analysis_fields():
    ok = analyze(" a + b ")
    assert ok.source == " a + b "
    assert ok.expression == "a+b"
    assert (ok.postfix, ok.prefix, ok.infix) == ("ab+", "+ab", "(a+b)")
    assert ok.error is None

    failed = analyze("a+")
    assert not failed.ok
    assert failed.source == "a+"
    assert failed.notation is None
    assert failed.root is None
    assert (failed.postfix, failed.prefix, failed.infix) == ("", "", "")


def test_long_flat_expression():
    result = analyze("+".join(["a"] * 2000))
    assert result.ok
    assert result.postfix == "a" + "a+" * 1999
    assert result.prefix == "+" * 1999 + "a" * 2000
    assert result.infix == "(" * 1999 + "a+a)" + "+a)" * 1998


def test_long_right_leaning_prefix_expression():
    result = analyze("+a" * 1999 + "a")
    assert result.ok
    assert result.notation is Notation.PREFIX
    assert result.postfix == "a" * 2000 + "+" * 1999
    assert result.infix == "(a+" * 1999 + "a" + ")" * 1999
