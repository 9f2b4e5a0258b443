import pytest

from impeval import Env, Num, Var, Add, Mul, UnboundVariable, eval_arith
from impeval.z3_ops import WORD_MAX


def test_arith_num():
    assert eval_arith(Num(21), Env()) == 21


def test_arith_var():
    env = Env({"test": 99})
    assert eval_arith(Var("test"), env) == 99


def test_arith_var_unbound():
    with pytest.raises(UnboundVariable) as exc:
        eval_arith(Var("missing"), Env({"other": 1}))
    assert exc.value.name == "missing"


def test_arith_add():
    assert eval_arith(Add(Num(4), Num(5)), Env()) == 9


def test_arith_mul():
    assert eval_arith(Mul(Num(4), Num(5)), Env()) == 20


def test_arith_add_num_and_product():
    assert eval_arith(Add(Num(3), Mul(Num(4), Num(5))), Env()) == 23
    assert eval_arith(Add(Mul(Num(4), Num(5)), Num(3)), Env()) == 23


def test_arith_add_sum_and_product():
    expr = Add(Add(Num(4), Num(5)), Mul(Num(2), Num(3)))
    assert eval_arith(expr, Env()) == 15


def test_arith_add_var():
    env = Env({"x": 10})
    assert eval_arith(Add(Var("x"), Num(42)), env) == 52


def test_add_wraps_on_overflow():
    assert eval_arith(Add(Num(WORD_MAX), Num(1)), Env()) == 0
    assert eval_arith(Add(Num(WORD_MAX), Num(WORD_MAX)), Env()) == WORD_MAX - 1


def test_mul_wraps_on_overflow():
    assert eval_arith(Mul(Num(1 << 32), Num(1 << 32)), Env()) == 0
    assert eval_arith(Mul(Num(WORD_MAX), Num(2)), Env()) == WORD_MAX - 1


def test_add_and_mul_commute():
    env = Env({"a": WORD_MAX - 3, "b": 17})
    assert eval_arith(Add(Var("a"), Var("b")), env) == eval_arith(Add(Var("b"), Var("a")), env)
    assert eval_arith(Mul(Var("a"), Var("b")), env) == eval_arith(Mul(Var("b"), Var("a")), env)


def test_unbound_in_right_operand_still_fails():
    with pytest.raises(UnboundVariable):
        eval_arith(Add(Num(1), Var("y")), Env())


def test_eval_does_not_touch_env():
    env = Env({"x": 3})
    eval_arith(Mul(Var("x"), Var("x")), env)
    assert env == {"x": 3}


def test_num_rejects_out_of_range():
    with pytest.raises(ValueError):
        Num(-1)
    with pytest.raises(ValueError):
        Num(WORD_MAX + 1)
    with pytest.raises(TypeError):
        Num(1.5)
    with pytest.raises(TypeError):
        Num(True)
