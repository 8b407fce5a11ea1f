import math

import pytest

from cassel.cyclotomic import CyclotomicIntegerExponents
from cassel.search import (
    loop_over_roots,
    main,
    normalized_level,
    search_exponents,
)


@pytest.mark.parametrize("n0", [1, 3, 5, 7, 19, 31])
def test_normalized_level_doubles_odd(n0):
    assert normalized_level(n0) == 2 * n0


@pytest.mark.parametrize("n0", [2, 4, 12, 84, 420])
def test_normalized_level_keeps_even(n0):
    assert normalized_level(n0) == n0


@pytest.mark.parametrize("n0", [0, -3])
def test_normalized_level_rejects_non_positive(n0):
    with pytest.raises(ValueError):
        normalized_level(n0)


def test_search_rejects_short_length():
    with pytest.raises(ValueError):
        list(search_exponents(7, 2))


def test_small_case_level_four():
    assert list(search_exponents(4, 3)) == [(0, 1, 0), (0, 1, 1)]


@pytest.mark.parametrize("n0,length", [(4, 3), (7, 4), (12, 4), (5, 4), (15, 3)])
def test_results_satisfy_search_invariants(n0, length):
    n = normalized_level(n0)
    results = list(search_exponents(n0, length))
    assert results
    for exps in results:
        assert len(exps) == length
        assert exps[0] == 0
        assert n % exps[1] == 0
        assert list(exps[2:]) == sorted(exps[2:])
        assert all(0 <= e <= n for e in exps)
        assert exps[2] < n
        house = CyclotomicIntegerExponents(exponents=exps, level=n).house_squared()
        assert house < 5.1
        # No two roots differ by a factor of -1.
        for i, hi in enumerate(exps):
            if hi < n:
                assert all(hi - lo != n // 2 for lo in exps[:i])


def test_results_are_distinct():
    results = list(search_exponents(12, 4))
    assert len(results) == len(set(results))


def test_no_zeta3_pairs_when_three_divides_level():
    n = normalized_level(3)
    for exps in search_exponents(3, 4):
        for i, hi in enumerate(exps):
            if hi < n:
                for lo in exps[:i]:
                    assert hi - lo not in (n // 3, 2 * n // 3)


def test_loop_over_roots_writes_tables_and_output(tmp_path):
    tables_path = tmp_path / "tables.txt"
    output_path = tmp_path / "output.txt"
    with open(tables_path, "w") as tables, open(output_path, "w") as output:
        found = loop_over_roots(7, 4, tables, output)

    n = normalized_level(7)
    table_lines = tables_path.read_text().splitlines()
    assert len(table_lines) == n
    assert table_lines[0] == f"{n} 0 1 0"
    for j, line in enumerate(table_lines):
        level, index, cos_text, sin_text = line.split(" ")
        assert (int(level), int(index)) == (n, j)
        assert "e" not in cos_text and "e" not in sin_text
        assert float(cos_text) == math.cos(math.tau / n * j)
        assert float(sin_text) == math.sin(math.tau / n * j)

    output_lines = output_path.read_text().splitlines()
    assert output_lines == [f"{n}; {case}" for case in found]
    assert found == [list(e) for e in search_exponents(7, 4)]


def test_main_runs_given_cases(tmp_path, capsys):
    tables_path = tmp_path / "t.txt"
    output_path = tmp_path / "o.txt"
    code = main(["--tables", str(tables_path), "--output", str(output_path), "4:3"])
    assert code == 0
    assert output_path.read_text().splitlines() == ["4; [0, 1, 0]", "4; [0, 1, 1]"]
    assert len(tables_path.read_text().splitlines()) == 4
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "All cases checked!"
    assert "[0, 1, 0]" in out


def test_main_reports_bad_length(tmp_path):
    code = main(
        ["--tables", str(tmp_path / "t.txt"), "--output", str(tmp_path / "o.txt"), "5:2"]
    )
    assert code == 2


def test_main_rejects_malformed_case(tmp_path):
    with pytest.raises(SystemExit):
        main(["--tables", str(tmp_path / "t.txt"), "bogus"])