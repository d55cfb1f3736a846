import re

import pytest

from structbench.commands import (
    CommandRunner,
    main,
    read_edges,
    read_ints,
    run_file,
)

LINE = re.compile(r"^\S+( \S+)? \d+us$")


def texts(runner, script):
    return [result.text for result in runner.run(script.split())]


@pytest.fixture
def runner(tmp_path):
    return CommandRunner(tmp_path)


def test_read_ints_stops_at_non_integer(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("5 -3\n+8 x 9\n")
    assert read_ints(path) == [5, -3, 8]


def test_read_ints_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_ints(tmp_path / "absent.txt")


def test_read_edges_drops_incomplete_triple(tmp_path):
    path = tmp_path / "edges.txt"
    path.write_text("0 1 4\n1 2 6\n3 4\n")
    assert read_edges(path) == [(0, 1, 4), (1, 2, 6)]


def test_build_heaps_from_file(tmp_path, runner):
    values = [5, 3, 8, 1]
    (tmp_path / "nums.txt").write_text(" ".join(map(str, values)))
    script = (
        "BUILD MINHEAP nums.txt BUILD MAXHEAP nums.txt "
        "GETSIZE MINHEAP FINDMIN MINHEAP FINDMAX MAXHEAP DELETEMIN MINHEAP GETSIZE MINHEAP"
    )
    assert texts(runner, script) == [
        "SUCCESS",
        "SUCCESS",
        str(len(values)),
        str(min(values)),
        str(max(values)),
        str(min(values)),
        str(len(values) - 1),
    ]


def test_empty_heaps_report_minus_one(runner):
    script = "FINDMIN MINHEAP DELETEMIN MINHEAP FINDMAX MAXHEAP DELETEMAX MAXHEAP FINDMIN AVLTREE"
    assert texts(runner, script) == ["-1"] * 5


def test_heap_insert_then_delete_max(runner):
    script = "INSERT MAXHEAP 4 INSERT MAXHEAP 11 DELETEMAX MAXHEAP GETSIZE MAXHEAP"
    assert texts(runner, script) == ["SUCCESS", "SUCCESS", "11", "1"]


def test_avl_commands(runner):
    script = (
        "INSERT AVLTREE 7 INSERT AVLTREE 2 INSERT AVLTREE 7 GETSIZE AVLTREE "
        "SEARCH AVLTREE 2 DELETE AVLTREE 2 SEARCH AVLTREE 2 DELETE AVLTREE 2 FINDMIN AVLTREE"
    )
    assert texts(runner, script) == [
        "SUCCESS",
        "SUCCESS",
        "SUCCESS",
        "2",
        "SUCCESS",
        "SUCCESS",
        "FAILURE",
        "FAILURE",
        "7",
    ]
    assert list(runner.avl_tree) == [7]


def test_hashtable_build_and_search(tmp_path, runner):
    values = [4, 9, 11]
    (tmp_path / "keys.txt").write_text("\n".join(map(str, values)))
    script = "BUILD HASHTABLE keys.txt GETSIZE HASHTABLE SEARCH HASHTABLE 9 SEARCH HASHTABLE 5"
    assert texts(runner, script) == ["SUCCESS", str(len(values)), "SUCCESS", "FAILURE"]


def test_graph_commands(tmp_path, runner):
    (tmp_path / "graph.txt").write_text("0 1 4\n1 2 6\n")
    script = (
        "BUILD GRAPH graph.txt GETSIZE GRAPH COMPUTESHORTESTPATH GRAPH 0 1 "
        "COMPUTESHORTESTPATH GRAPH 0 0 FINDCONNECTEDCOMPONENTS GRAPH COMPUTESPANNINGTREE GRAPH"
    )
    assert texts(runner, script) == ["SUCCESS", "3 2", "4", "FAILURE", "1", "10"]


def test_graph_insert_and_delete(runner, tmp_path):
    (tmp_path / "graph.txt").write_text("0 1 4\n2 2 1\n")
    script = (
        "BUILD GRAPH graph.txt INSERT GRAPH 1 2 5 DELETE GRAPH 0 1 GETSIZE GRAPH "
        "COMPUTESHORTESTPATH GRAPH 0 1 INSERT GRAPH 0 9 1 GETSIZE GRAPH"
    )
    assert texts(runner, script) == [
        "SUCCESS",
        "SUCCESS",
        "SUCCESS",
        "3 2",
        "FAILURE",
        "SUCCESS",
        "3 2",
    ]


def test_shortest_path_out_of_range_fails(runner):
    assert texts(runner, "COMPUTESHORTESTPATH GRAPH 0 3") == ["FAILURE"]


def test_build_from_missing_file_gives_empty_structure(runner):
    script = "INSERT AVLTREE 3 BUILD AVLTREE nothing.txt GETSIZE AVLTREE BUILD GRAPH nothing.txt GETSIZE GRAPH"
    assert texts(runner, script) == ["SUCCESS", "SUCCESS", "0", "SUCCESS", "0 0"]


def test_unknown_command_or_target_fails(runner):
    script = "FROBNICATE MINHEAP FINDMAX MINHEAP GETSIZE TREE BUILD STACK x.txt"
    assert texts(runner, script) == ["FAILURE"] * 4


def test_trailing_single_token_is_ignored(runner):
    assert texts(runner, "GETSIZE MINHEAP GETSIZE") == ["0"]


def test_missing_argument_uses_zero_and_stops(runner):
    assert texts(runner, "INSERT MINHEAP") == ["SUCCESS"]
    assert len(runner.min_heap) == 1
    assert runner.min_heap.find_min() == 0


def test_non_integer_argument_stops_processing(runner):
    assert texts(runner, "INSERT AVLTREE x GETSIZE AVLTREE") == ["SUCCESS"]


def test_results_format_with_timing(runner):
    results = list(runner.run("INSERT MINHEAP 2 GETSIZE MINHEAP".split()))
    assert [result.microseconds >= 0 for result in results] == [True, True]
    assert all(LINE.match(str(result)) for result in results)
    assert str(results[1]).startswith("1 ")


def test_run_file_writes_one_line_per_command(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    commands = tmp_path / "commands.txt"
    output = tmp_path / "output.txt"
    commands.write_text("INSERT MINHEAP 6\nFINDMIN MINHEAP\nSEARCH HASHTABLE 1\n")
    assert run_file(commands, output) == 0
    lines = output.read_text().splitlines()
    assert [line.split()[0] for line in lines] == ["SUCCESS", "6", "FAILURE"]
    assert all(LINE.match(line) for line in lines)


def test_run_file_missing_commands_returns_one(tmp_path, capsys):
    assert run_file(tmp_path / "absent.txt", tmp_path / "output.txt") == 1
    assert "absent.txt" in capsys.readouterr().err


def test_main_runs_given_files(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "nums.txt").write_text("3 1 2")
    commands = tmp_path / "cmds.txt"
    output = tmp_path / "out.txt"
    commands.write_text("BUILD AVLTREE nums.txt\nFINDMIN AVLTREE\n")
    assert main([str(commands), str(output)]) == 0
    assert [line.split()[0] for line in output.read_text().splitlines()] == ["SUCCESS", "1"]


def test_main_uses_default_file_names(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "commands.txt").write_text("GETSIZE HASHTABLE\n")
    assert main([]) == 0
    assert (tmp_path / "output.txt").read_text().split()[0] == "0"