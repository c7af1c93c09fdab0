import pytest

from atto.errors import (
    AttoDivisionByZero,
    AttoEmptyList,
    AttoTypeMismatch,
    AttoUnboundVariable,
    AttoUnknownFunction,
)
from atto.evaluation.evaluator import evaluate
from atto.reader.ast import Call, Literal, Variable
from atto.registry import FunctionRegistry
from atto.types.environment import Environment
from atto.types.nil import Nil
from atto.types.pair import Pair
from atto.types.values import from_python, to_python


# -----------------------------------------------------
# Arithmetic and order of evaluation
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("+ 5 7", 12),
        ("- * 3 3 5", 4),
        ("* + 1 2 - 10 4", 18),
        ("/ 7 2", 3),
        ("% 7 3", 1),
        ("/ - 0 7 2", -4),   # floor division
        ("% - 0 7 3", 2),
        ("+ 1 * 2 + 3 4", 15),
        ('+ "ab" "cd"', "abcd"),
    ]
)
def test_arithmetic(bare, source, expected):
    assert bare.eval_expr(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("< 1 2", True),
        ("< 2 1", False),
        ("<= 2 2", True),
        ('< "apple" "banana"', True),
        ("= 1 1", True),
        ("= 1 2", False),
        ("= true litr \"false\"", False),
        ("= null litr \"null\"", True),
        ("= pair 1 2 pair 1 2", True),
        ("= pair 1 2 pair 1 3", False),
        ("= pair 1 2 fuse 1 2", True),
        ("= null pair 1 2", False),
        ("= 1 true", False),
        ('= "1" 1', False),
    ]
)
def test_comparison_and_equality(bare, source, expected):
    assert bare.eval_expr(source) is expected


# -----------------------------------------------------
# Lists
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("pair 3 17", [3, 17]),
        ("fuse pair 3 17 pair 5 8", [3, 17, 5, 8]),
        ("head pair 3 17", 3),
        ("tail pair 3 17", [17]),
        ("tail fuse 3 fuse 17 9", [17, 9]),
        ("fuse 1 2", [1, 2]),
        ("fuse pair 1 2 3", [1, 2, 3]),
        ("fuse null 4", [4]),
        ("fuse 4 null", [4]),
        ("fuse null null", None),
        ("tail tail pair 1 2", None),
        ("pair pair 1 2 3", [[1, 2], 3]),
        ('words "  the quick\tbrown  "', ["the", "quick", "brown"]),
        ('words ""', None),
    ]
)
def test_list_operations(bare, source, expected):
    assert to_python(bare.eval_expr(source)) == expected


def test_fuse_shares_right_operand(bare):
    right = from_python([5, 8])
    bare.load("fn f l is fuse 1 l")
    out = bare.call("f", right)
    assert out.tail is right


# -----------------------------------------------------
# Strings and conversion
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ('litr "3"', 3),
        ('- 7 litr "3"', 4),
        ('litr " -12 "', -12),
        ('litr " 5 "', 5),
        ('litr " hi "', " hi "),
        ('litr "true"', True),
        ('litr "hello"', "hello"),
        ("str 4", "4"),
        ("str true", "true"),
        ("str null", "null"),
        ("str pair 1 pair 2 3", "[1, [2, 3]]"),
        ('str pair "a" "b"', "[a, b]"),
        ('str "plain"', "plain"),
    ]
)
def test_conversions(bare, source, expected):
    assert bare.eval_expr(source) == expected


def test_litr_null(bare):
    assert bare.eval_expr('litr "null"') is Nil


# -----------------------------------------------------
# Conditional non-strictness
# -----------------------------------------------------

def test_if_skips_else_branch(bare):
    assert bare.eval_expr("if true 10 / 1 0") == 10


def test_if_skips_then_branch(bare):
    assert bare.eval_expr("if false head null 5") == 5


def test_if_untaken_branch_has_no_side_effects(bare, console):
    assert bare.eval_expr('if = 1 1 print "yes" print "no"') == "yes"
    assert console.outputs == ["yes"]


def test_if_condition_must_be_bool(bare):
    with pytest.raises(AttoTypeMismatch) as exc:
        bare.eval_expr("if 1 2 3")
    assert exc.value.operation == "if"


# -----------------------------------------------------
# User functions
# -----------------------------------------------------

def test_user_function_call(bare):
    bare.load("fn add x y is + x y")
    assert bare.eval_expr("add 5 3") == 8


def test_recursive_size(bare):
    bare.load("fn size l is if = null l 0 + 1 size tail l")
    assert bare.eval_expr("size fuse 1 fuse 2 3") == 3
    assert bare.eval_expr("size fuse pair 1 2 fuse 3 pair 4 5") == 5


def test_factorial(bare):
    bare.load("fn fact n is if <= n 1 1 * n fact - n 1")
    assert bare.eval_expr("fact 20") == 2432902008176640000


def test_mutual_recursion(bare):
    bare.load(
        """
        fn is_even n is if = n 0 true is_odd - n 1
        fn is_odd n is if = n 0 false is_even - n 1
        """
    )
    assert bare.eval_expr("is_even 10") is True
    assert bare.eval_expr("is_odd 7") is True


def test_zero_arity_function(bare):
    bare.load("fn answer is 42\nfn main is + answer 0")
    assert bare.run() == 42


def test_main_with_arguments(bare):
    bare.load('fn main name is + "hello " name')
    assert bare.run(args=["world"]) == "hello world"


def test_functions_are_not_closures(bare):
    # g's body may only see its own parameter, never f's x
    bare.load("fn f x is g 1\nfn g y is y")
    assert bare.eval_expr("f 99") == 1


# -----------------------------------------------------
# Evaluator used directly
# -----------------------------------------------------

def test_evaluate_with_explicit_program(console):
    reg = FunctionRegistry()
    program = reg.snapshot()
    expr = Call("+", (Variable("x"), Literal(1)))
    assert evaluate(expr, Environment({"x": 41}), program, console) == 42


def test_unbound_variable_is_checked(console):
    program = FunctionRegistry().snapshot()
    with pytest.raises(AttoUnboundVariable):
        evaluate(Variable("ghost"), Environment(), program, console)


def test_call_to_missing_definition(console):
    program = FunctionRegistry().snapshot()
    with pytest.raises(AttoUnknownFunction):
        evaluate(Call("nowhere", (Literal(1),)), Environment(), program, console)


# -----------------------------------------------------
# Error laws
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,error,operation",
    [
        ("head null", AttoEmptyList, "head"),
        ("tail null", AttoEmptyList, "tail"),
        ("/ 1 0", AttoDivisionByZero, "/"),
        ("% 1 0", AttoDivisionByZero, "%"),
        ('- "a" 1', AttoTypeMismatch, "-"),
        ('+ "a" 1', AttoTypeMismatch, "+"),
        ("* true 2", AttoTypeMismatch, "*"),
        ('< 1 "a"', AttoTypeMismatch, "<"),
        ("head 5", AttoTypeMismatch, "head"),
        ("litr 5", AttoTypeMismatch, "litr"),
        ("words 5", AttoTypeMismatch, "words"),
    ]
)
def test_runtime_errors(bare, source, error, operation):
    with pytest.raises(error) as exc:
        bare.eval_expr(source)
    assert exc.value.operation == operation


def test_runtime_error_names_innermost_call(bare):
    bare.load("fn first l is head l\nfn main is + 1 first null")
    with pytest.raises(AttoEmptyList) as exc:
        bare.run()
    assert exc.value.operation == "head"
    assert (exc.value.line, exc.value.col) == (1, 15)


def test_unknown_function_never_evaluates_arguments(bare, console):
    with pytest.raises(AttoUnknownFunction):
        bare.eval_expr('undefined print "side effect"')
    assert console.outputs == []


def test_pair_values_are_structural(bare):
    assert bare.eval_expr("pair 1 2") == Pair(1, Pair(2, Nil))


def test_litr_parses_integers_of_any_length(bare):
    digits = "9" * 5000
    assert bare.eval_expr('litr "' + digits + '"') == 10**5000 - 1
    assert bare.eval_expr("str litr " + '"' + digits + '"') == digits


def test_numeric_literals_of_any_length(bare):
    assert bare.eval_expr("- " + "1" * 5000 + " 1") == int("1" * 4999 + "0")
