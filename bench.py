import cProfile
import pathlib
import pstats

from m3lc.surface.parse import parse_file

FIB = pathlib.Path(__file__).parent / "examples" / "fib.m3lc"


def main():
    term = parse_file(FIB.read_text(encoding="utf-8")).unroll()
    term.reduce()


if __name__ == "__main__":
    with cProfile.Profile() as profile:
        main()
        print("bench done")
        results = pstats.Stats(profile)
        results.sort_stats(pstats.SortKey.TIME)
        results.dump_stats("results.profile")
