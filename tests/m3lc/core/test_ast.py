from m3lc.core.ast import Appl, Defn, File, Lam, Var


def test_var_accepts_any_name() -> None:
    assert Var("x.12").name == "x.12"
    assert Var("fn => (").name == "fn => ("


def test_call_builds_application() -> None:
    f, x, y = Var("f"), Var("x"), Var("y")
    assert f(x)(y) == Appl(Appl(f, x), y)


def test_unroll_without_definitions_is_main() -> None:
    main = Appl(Var("f"), Var("x"))
    assert File(defns=(), main=main).unroll() is main


def test_unroll_nests_definitions_in_order() -> None:
    ident = Lam("x", Var("x"))
    zero = Lam("f", Lam("a", Var("a")))
    file = File(
        defns=(Defn("ident", ident), Defn("zero", zero)),
        main=Appl(Var("ident"), Var("zero")),
    )

    expected = Appl(
        Lam("ident", Appl(Lam("zero", Appl(Var("ident"), Var("zero"))), zero)),
        ident,
    )
    assert file.unroll() == expected


def test_unroll_leaves_file_untouched() -> None:
    file = File(defns=(Defn("a", Var("b")),), main=Var("a"))
    file.unroll()
    assert file == File(defns=(Defn("a", Var("b")),), main=Var("a"))


def test_unrolled_definitions_resolve_by_reduction() -> None:
    file = File(
        defns=(Defn("ident", Lam("x", Var("x"))), Defn("k", Var("ident"))),
        main=Appl(Var("k"), Var("z")),
    )
    assert file.unroll().reduce() == Var("z")
