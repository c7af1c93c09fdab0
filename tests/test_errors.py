import pytest

from atto.errors import (
    AttoEmptyList,
    AttoEntryPointError,
    AttoError,
    AttoLexError,
    AttoNoEntryPoint,
    AttoParseError,
    AttoRuntimeError,
    AttoTypeMismatch,
    AttoUnexpectedEndOfExpression,
    AttoUnknownFunction,
)


def test_error_hierarchy():
    assert issubclass(AttoLexError, AttoParseError)
    assert issubclass(AttoEmptyList, AttoRuntimeError)
    assert issubclass(AttoParseError, AttoError)
    assert issubclass(AttoRuntimeError, AttoError)
    assert issubclass(AttoNoEntryPoint, AttoError)


def test_parse_error_message_carries_position():
    err = AttoUnknownFunction("Unknown function 'x'", 3, 7)
    assert (err.line, err.col) == (3, 7)
    assert err.message == "Unknown function 'x'"
    assert str(err) == "Unknown function 'x' at 3:7"


def test_runtime_error_locate_keeps_innermost_position():
    err = AttoEmptyList("head", "head of an empty list")
    assert str(err) == "head: head of an empty list"
    err.locate((2, 5)).locate((1, 1))
    assert (err.line, err.col) == (2, 5)
    assert str(err) == "head: head of an empty list at 2:5"


def test_parse_error_aborts_before_any_evaluation(bare, console):
    with pytest.raises(AttoUnexpectedEndOfExpression):
        bare.run('fn main is print "started"\nfn broken is + 1')
    assert console.outputs == []


def test_unknown_function_in_program(bare):
    with pytest.raises(AttoUnknownFunction) as exc:
        bare.run("fn main is\n  frobnicate 1")
    assert (exc.value.line, exc.value.col) == (2, 3)


def test_lex_error_in_program(bare):
    with pytest.raises(AttoLexError):
        bare.run('fn main is print "unterminated')


def test_runtime_error_after_side_effects(bare, console):
    with pytest.raises(AttoTypeMismatch) as exc:
        bare.run('fn main is + print 1 "two"')
    assert console.outputs == ["1"]
    assert exc.value.operation == "+"
    assert (exc.value.line, exc.value.col) == (1, 12)


def test_missing_entry_point(bare):
    with pytest.raises(AttoNoEntryPoint):
        bare.run("fn helper is 1")


def test_entry_point_argument_count(bare):
    bare.load("fn main a b is + a b")
    with pytest.raises(AttoEntryPointError):
        bare.run(args=["only one"])
    assert bare.run(args=["x", "y"]) == "xy"


def test_call_unknown_name(bare):
    with pytest.raises(AttoUnknownFunction):
        bare.call("nothing")


def test_errors_are_catchable_as_base_class(bare):
    with pytest.raises(AttoError):
        bare.eval_expr("head null")
