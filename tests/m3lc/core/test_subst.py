from m3lc.core.alpha import alpha_equiv
from m3lc.core.ast import Appl, Lam, Var
from m3lc.core.names import NameSupply, stem
from m3lc.core.reduce import reduce
from m3lc.core.subst import free_vars, subst


def test_variable_cases() -> None:
    s = Lam("q", Var("q"))
    assert subst(Var("x"), "x", s) is s
    assert subst(Var("y"), "x", s) == Var("y")


def test_application_substitutes_both_sides() -> None:
    term = Appl(Var("x"), Appl(Var("y"), Var("x")))
    assert subst(term, "x", Var("s")) == Appl(Var("s"), Appl(Var("y"), Var("s")))


def test_shadowing_binder_stops_substitution() -> None:
    term = Lam("x", Appl(Var("x"), Var("y")))
    assert subst(term, "x", Var("s")) is term


def test_inner_shadowing_binder() -> None:
    term = Appl(Var("x"), Lam("x", Var("x")))
    out = subst(term, "x", Var("s"))
    assert alpha_equiv(out, Appl(Var("s"), Lam("x", Var("x"))))


def test_free_name_in_replacement_is_preserved() -> None:
    # [fn z => x / y] (fn x => y)
    term = Lam("x", Var("y"))
    out = subst(term, "y", Lam("z", Var("x")))
    expected = Lam("z", Lam("y", Var("x")))
    assert alpha_equiv(out, expected)


def test_no_capture() -> None:
    term = Lam("y", Var("x"))
    out = subst(term, "x", Var("y"))

    assert isinstance(out, Lam)
    assert out.param != "y"
    assert out.body == Var("y")
    assert alpha_equiv(out, Lam("w", Var("y")))
    assert not alpha_equiv(out, Lam("y", Var("y")))


def test_no_op_substitution() -> None:
    term = Lam("x", Var("y"))
    out = subst(term, "z", Appl(Var("x"), Var("y")))
    assert alpha_equiv(term, out)


def test_binders_are_always_renamed() -> None:
    out = subst(Lam("y", Lam("w", Var("y"))), "x", Var("z"), NameSupply())
    assert isinstance(out, Lam) and isinstance(out.body, Lam)
    assert stem(out.param) == "y" and out.param != "y"
    assert stem(out.body.param) == "w" and out.body.param != "w"
    assert out.body.body == Var(out.param)


def test_renamed_binders_keep_their_stem() -> None:
    out = subst(Lam("a.3", Var("a.3")), "x", Var("z"), NameSupply())
    assert isinstance(out, Lam)
    assert stem(out.param) == "a"
    assert out.param.count(".") == 1
    assert out.body == Var(out.param)


def test_generated_free_name_in_replacement_is_not_captured() -> None:
    generated = NameSupply().fresh("a")
    out = subst(Lam("a", Var("y")), "y", Var(generated), NameSupply())

    assert isinstance(out, Lam)
    assert out.param != generated
    assert alpha_equiv(out, Lam("b", Var(generated)))


def test_generated_free_name_in_body_is_not_captured() -> None:
    generated = NameSupply().fresh("a")
    term = Lam("a", Appl(Var("y"), Var(generated)))
    out = subst(term, "y", Var("z"), NameSupply())

    assert alpha_equiv(out, Lam("b", Appl(Var("z"), Var(generated))))


def test_reducing_across_sessions_does_not_capture() -> None:
    k = Lam("y", Lam("a", Var("y")))
    first = reduce(Appl(k, Var("w")), names=NameSupply())
    assert isinstance(first, Lam)

    # the second session must not reuse the binder the first one generated
    term = Lam(first.param, Appl(k, Var(first.param)))
    second = reduce(term, names=NameSupply())
    assert alpha_equiv(second, Lam("b", Lam("c", Var("b"))))


def test_method_delegates() -> None:
    assert Var("x").subst("x", Var("y")) == Var("y")


def test_free_vars() -> None:
    term = Appl(Lam("x", Appl(Var("x"), Var("y"))), Lam("z", Var("w")))
    assert free_vars(term) == {"y", "w"}
    assert Lam("x", Var("x")).free_vars() == frozenset()
