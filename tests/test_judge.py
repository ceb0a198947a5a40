import io

import pytest

from solvekit.contest import aznet, min_road, min_spanning_weight
from solvekit.judge import ballgmvn, lcs2x, main, solve


def _collinear(p, q, r):
    return (q[0] - p[0]) * (r[1] - p[1]) - (q[1] - p[1]) * (r[0] - p[0]) == 0


def _point(numbers, a_points, b_points):
    n = len(a_points)
    return [a_points[k - 1] if k <= n else b_points[k - n - 1] for k in numbers]


@pytest.mark.parametrize(
    "a_points, b_points",
    [
        ([(0, 0), (5, 7)], [(1, 1), (2, 2)]),
        ([(0, 0), (3, 7)], [(0, 1), (0, 2)]),
        ([(1, 1), (2, 2)], [(9, 4), (3, 3)]),
        ([(4, 0), (-2, 0)], [(1, 0), (3, 5)]),
    ],
)
def test_ballgmvn_finds_collinear_triple_from_both_teams(a_points, b_points):
    found = ballgmvn(a_points, b_points)
    assert found is not None
    n = len(a_points)
    assert len(set(found)) == 3
    assert all(1 <= k <= 2 * n for k in found)
    assert any(k <= n for k in found) and any(k > n for k in found)
    assert _collinear(*_point(found, a_points, b_points))


def test_ballgmvn_prefers_one_a_point_with_two_b_points():
    a_points = [(0, 0), (5, 7)]
    b_points = [(1, 1), (2, 2)]
    found = ballgmvn(a_points, b_points)
    assert found[0] <= len(a_points)
    assert all(k > len(a_points) for k in found[1:])


def test_ballgmvn_none_when_no_triple():
    assert ballgmvn([(0, 0), (1, 0)], [(0, 1), (1, 2)]) is None


def test_ballgmvn_rejects_unequal_teams():
    with pytest.raises(ValueError):
        ballgmvn([(0, 0)], [(1, 1), (2, 2)])


def test_solve_ballgmvn_reports_minus_one_without_triple():
    assert solve("ballgmvn", "2\n0 0\n1 0\n0 1\n1 2\n") == "-1"


def test_solve_ballgmvn_matches_function():
    a_points = [(0, 0), (5, 7)]
    b_points = [(1, 1), (2, 2)]
    text = "2\n0 0\n5 7\n1 1\n2 2\n"
    assert solve("ballgmvn", text) == " ".join(map(str, ballgmvn(a_points, b_points)))


@pytest.mark.parametrize("seq", [[1, 2, 4, 8], [3, 7, 20], [5]])
def test_lcs2x_doubling_chain_against_itself(seq):
    assert lcs2x(seq, seq) == len(seq)


@pytest.mark.parametrize(
    "a, b",
    [([1, 2, 3, 4], [4, 3, 2, 1]), ([5, 1, 10, 2], [1, 2, 5, 10]), ([7], [8, 9])],
)
def test_lcs2x_bounded_by_lengths(a, b):
    result = lcs2x(a, b)
    assert 0 <= result <= min(len(a), len(b))


def test_lcs2x_ignores_elements_not_doubling():
    # 1, 2, 3 is common, but 3 < 2 * 2, so only two of them can chain.
    assert lcs2x([1, 2, 3], [1, 2, 3]) < 3


def test_lcs2x_nothing_in_common():
    assert lcs2x([1, 2], [3, 4]) == 0


def test_lcs2x_rejects_empty_b():
    with pytest.raises(ValueError):
        lcs2x([1, 2], [])


def test_solve_lcs2x_one_line_per_case():
    text = "2\n4 4\n1 2 4 8\n1 2 4 8\n3 2\n1 2 3\n3 4\n"
    lines = solve("lcs2x", text).splitlines()
    assert lines == [str(lcs2x([1, 2, 4, 8], [1, 2, 4, 8])), str(lcs2x([1, 2, 3], [3, 4]))]


def test_solve_qbmst_matches_min_spanning_weight():
    edges = [(1, 2, 4), (2, 3, 1), (1, 3, 2), (3, 4, 7)]
    text = "4 4\n" + "\n".join(" ".join(map(str, e)) for e in edges)
    assert solve("qbmst", text) == str(min_spanning_weight(4, edges))


def test_solve_minroad_matches_min_road():
    trees = [(10, 1), (2, 2), (5, 1), (7, 2), (1, 1)]
    text = "5 2 1\n" + "\n".join(f"{d} {k}" for d, k in trees)
    assert solve("minroad", text) == str(min_road(2, 1, trees))


def test_solve_aznet_matches_aznet():
    edges = [(1, 2, 1), (2, 3, 2), (1, 3, 1), (3, 4, 2), (2, 4, 1)]
    a_costs, b_costs = [1, 5, 9], [2, 3, 4]
    text = (
        "1\n4 5\n1 5 9\n2 3 4\n"
        + "\n".join(" ".join(map(str, e)) for e in edges)
    )
    expected = " ".join(map(str, aznet(4, a_costs, b_costs, edges)))
    assert solve("aznet", text) == expected


def test_solve_unknown_problem():
    with pytest.raises(ValueError):
        solve("nosuch", "1")


def test_solve_truncated_input():
    with pytest.raises(ValueError):
        solve("qbmst", "3 2\n1 2 5\n")


def test_solve_non_integer_input():
    with pytest.raises(ValueError):
        solve("minroad", "x 1 1")


def test_main_reads_file(tmp_path, capsys):
    text = "1\n3 3\n1 2 4\n1 2 4\n"
    path = tmp_path / "input.txt"
    path.write_text(text, encoding="utf-8")
    assert main(["lcs2x", str(path)]) == 0
    assert capsys.readouterr().out == solve("lcs2x", text) + "\n"


def test_main_reads_stdin(monkeypatch, capsys):
    text = "2\n0 0\n1 0\n0 1\n1 2\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main(["ballgmvn"]) == 0
    assert capsys.readouterr().out == "-1\n"


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n"))
    assert main(["qbmst"]) == 1
    assert "ended" in capsys.readouterr().err


def test_main_rejects_unknown_problem():
    with pytest.raises(SystemExit):
        main(["nosuch"])