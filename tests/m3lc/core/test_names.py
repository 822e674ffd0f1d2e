import threading

from m3lc.core.names import NameSupply, default_supply, stem


def test_fresh_names_are_unique() -> None:
    names = NameSupply()
    generated = [names.fresh("foo") for _ in range(100)]
    assert len(set(generated)) == 100


def test_mixed_bases_are_unique() -> None:
    names = NameSupply()
    bases = ["hello", "goodbye", "foo", "bar", "foo", "goodbye", "World", "x", "y"]
    generated = [names.fresh(base) for base in bases]
    assert len(set(generated)) == len(bases)


def _suffix(name: str) -> int:
    return int(name.rsplit(".", 1)[1])


def test_fresh_name_format() -> None:
    names = NameSupply()
    x, y = names.fresh("x"), names.fresh("y")
    assert stem(x) == "x"
    assert stem(y) == "y"
    assert _suffix(y) > _suffix(x)


def test_renaming_a_generated_name_does_not_stack_suffixes() -> None:
    out = NameSupply().fresh("f.3")
    assert stem(out) == "f"
    assert out.count(".") == 1
    assert stem("f.3") == "f"
    assert stem("f") == "f"


def test_supplies_never_repeat_each_others_names() -> None:
    first, second = NameSupply(), NameSupply()
    from_first = {first.fresh("a") for _ in range(50)}
    from_second = {second.fresh("a") for _ in range(50)}
    assert from_first.isdisjoint(from_second)
    assert first.issued == second.issued == 50
    assert default_supply() is default_supply()


def test_concurrent_requests_never_collide() -> None:
    names = NameSupply()
    results: list[list[str]] = [[] for _ in range(8)]

    def worker(out: list[str]) -> None:
        for _ in range(250):
            out.append(names.fresh("v"))

    threads = [threading.Thread(target=worker, args=(out,)) for out in results]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    generated = [name for out in results for name in out]
    assert len(set(generated)) == len(generated) == names.issued == 2000
