"""Command-file driver that exercises the data structures and times each command."""

from __future__ import annotations

import argparse
import itertools
import os
import re
import sys
import time
from collections.abc import Callable, Iterable, Iterator
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path

from structbench.avl_tree import AVLTree
from structbench.graph import Graph
from structbench.hashtable import HashTable
from structbench.max_heap import MaxHeap
from structbench.min_heap import MinHeap

SUCCESS = "SUCCESS"
FAILURE = "FAILURE"
EMPTY = "-1"

_INTEGER = re.compile(r"[+-]?\d+")

PathLike = str | os.PathLike[str]


def _read_tokens(path: PathLike) -> list[str]:
    with open(path, encoding="utf-8") as handle:
        return handle.read().split()


def _leading_ints(tokens: Iterable[str]) -> Iterator[int]:
    for token in tokens:
        if not _INTEGER.fullmatch(token):
            return
        yield int(token)


def read_ints(path: PathLike) -> list[int]:
    """Whitespace-separated integers of a file, up to the first non-integer."""
    return list(_leading_ints(_read_tokens(path)))


def read_edges(path: PathLike) -> list[tuple[int, int, int]]:
    """``(u, v, weight)`` triples of a file; an incomplete last triple is dropped."""
    values = iter(read_ints(path))
    return list(zip(values, values, values))


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one command and the time it took."""

    text: str
    microseconds: int

    def __str__(self) -> str:
        return f"{self.text} {self.microseconds}us"


class _TokenReader:
    """Pulls words and integers from a token stream.

    Once a read fails, every later read fails too and yields an empty word or 0.
    """

    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens = iter(tokens)
        self.failed = False

    def word(self) -> str:
        if self.failed:
            return ""
        token = next(self._tokens, None)
        if token is None:
            self.failed = True
            return ""
        return token

    def integer(self) -> int:
        if self.failed:
            return 0
        token = next(self._tokens, None)
        if token is None or not _INTEGER.fullmatch(token):
            self.failed = True
            return 0
        return int(token)


Handler = Callable[[str, _TokenReader], str]


class CommandRunner:
    """Holds one of each structure and applies text commands to them."""

    def __init__(self, base_dir: PathLike = ".") -> None:
        self.base_dir = Path(base_dir)
        self.min_heap = MinHeap()
        self.max_heap = MaxHeap()
        self.avl_tree = AVLTree()
        self.graph = Graph()
        self.hashtable = HashTable()
        self._handlers: dict[str, Handler] = {
            "BUILD": self._build,
            "GETSIZE": self._get_size,
            "FINDMIN": self._find_min,
            "FINDMAX": self._find_max,
            "SEARCH": self._search,
            "INSERT": self._insert,
            "DELETEMIN": self._delete_min,
            "DELETEMAX": self._delete_max,
            "DELETE": self._delete,
            "COMPUTESHORTESTPATH": self._shortest_path,
            "COMPUTESPANNINGTREE": self._spanning_tree,
            "FINDCONNECTEDCOMPONENTS": self._components,
        }

    def run(self, tokens: Iterable[str]) -> Iterator[CommandResult]:
        """Execute the commands in a token stream, yielding one result each.

        Processing stops when fewer than two tokens remain or an argument
        cannot be read.
        """
        reader = _TokenReader(tokens)
        while True:
            command = reader.word()
            target = reader.word()
            if reader.failed:
                return
            start = time.perf_counter_ns()
            handler = self._handlers.get(command)
            text = handler(target, reader) if handler is not None else FAILURE
            elapsed = (time.perf_counter_ns() - start) // 1000
            yield CommandResult(text, elapsed)

    def _build(self, target: str, reader: _TokenReader) -> str:
        path = self.base_dir / reader.word()
        loaders = {
            "MINHEAP": self.min_heap,
            "MAXHEAP": self.max_heap,
            "AVLTREE": self.avl_tree,
        }
        if target in loaders:
            try:
                values = read_ints(path)
            except OSError:
                values = []
            loaders[target].build(values)
            return SUCCESS
        if target == "GRAPH":
            try:
                edges = read_edges(path)
            except OSError:
                edges = []
            highest = max(
                itertools.chain([-1], itertools.chain.from_iterable((u, v) for u, v, _ in edges))
            )
            self.graph.build(highest + 1)
            for u, v, weight in edges:
                with suppress(IndexError):
                    self.graph.insert_edge(u, v, weight)
            return SUCCESS
        if target == "HASHTABLE":
            with suppress(OSError):
                self.hashtable.build_from_file(path)
            return SUCCESS
        return FAILURE

    def _get_size(self, target: str, reader: _TokenReader) -> str:
        if target == "GRAPH":
            vertices, edges = self.graph.size()
            return f"{vertices} {edges}"
        sized = {
            "MINHEAP": self.min_heap,
            "MAXHEAP": self.max_heap,
            "AVLTREE": self.avl_tree,
            "HASHTABLE": self.hashtable,
        }.get(target)
        return FAILURE if sized is None else str(len(sized))

    @staticmethod
    def _or_empty(query: Callable[[], int]) -> str:
        try:
            return str(query())
        except (IndexError, ValueError):
            return EMPTY

    def _find_min(self, target: str, reader: _TokenReader) -> str:
        if target == "MINHEAP":
            return self._or_empty(self.min_heap.find_min)
        if target == "AVLTREE":
            return self._or_empty(self.avl_tree.find_min)
        return FAILURE

    def _find_max(self, target: str, reader: _TokenReader) -> str:
        if target == "MAXHEAP":
            return self._or_empty(self.max_heap.find_max)
        return FAILURE

    def _search(self, target: str, reader: _TokenReader) -> str:
        key = reader.integer()
        container = {"AVLTREE": self.avl_tree, "HASHTABLE": self.hashtable}.get(target)
        if container is not None and key in container:
            return SUCCESS
        return FAILURE

    def _insert(self, target: str, reader: _TokenReader) -> str:
        if target == "GRAPH":
            u, v, weight = reader.integer(), reader.integer(), reader.integer()
            with suppress(IndexError):
                self.graph.insert_edge(u, v, weight)
            return SUCCESS
        structure = {
            "MINHEAP": self.min_heap,
            "MAXHEAP": self.max_heap,
            "AVLTREE": self.avl_tree,
            "HASHTABLE": self.hashtable,
        }.get(target)
        if structure is None:
            return FAILURE
        structure.insert(reader.integer())
        return SUCCESS

    def _delete_min(self, target: str, reader: _TokenReader) -> str:
        if target == "MINHEAP":
            return self._or_empty(self.min_heap.delete_min)
        return FAILURE

    def _delete_max(self, target: str, reader: _TokenReader) -> str:
        if target == "MAXHEAP":
            return self._or_empty(self.max_heap.delete_max)
        return FAILURE

    def _delete(self, target: str, reader: _TokenReader) -> str:
        if target == "AVLTREE":
            key = reader.integer()
            if key not in self.avl_tree:
                return FAILURE
            self.avl_tree.delete(key)
            return SUCCESS
        if target == "GRAPH":
            u, v = reader.integer(), reader.integer()
            with suppress(IndexError):
                self.graph.delete_edge(u, v)
            return SUCCESS
        return FAILURE

    def _shortest_path(self, target: str, reader: _TokenReader) -> str:
        src, dest = reader.integer(), reader.integer()
        if target != "GRAPH":
            return FAILURE
        try:
            distance = self.graph.shortest_path(src, dest)
        except IndexError:
            return FAILURE
        if distance is None or distance <= 0:
            return FAILURE
        return str(distance)

    def _spanning_tree(self, target: str, reader: _TokenReader) -> str:
        if target == "GRAPH":
            return str(self.graph.spanning_tree_weight())
        return FAILURE

    def _components(self, target: str, reader: _TokenReader) -> str:
        if target == "GRAPH":
            return str(self.graph.connected_components())
        return FAILURE


def run_file(commands_path: PathLike, output_path: PathLike) -> int:
    """Run a command file, writing one timed result line per command.

    Returns 0 on success and 1 when either file cannot be opened.
    """
    try:
        tokens = _read_tokens(commands_path)
        output = open(output_path, "w", encoding="utf-8")
    except OSError:
        print(f"cannot open {commands_path} or {output_path}", file=sys.stderr)
        return 1
    runner = CommandRunner()
    with output:
        for result in runner.run(tokens):
            output.write(f"{result}\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run data-structure commands from a file and time each one."
    )
    parser.add_argument("commands", nargs="?", default="commands.txt")
    parser.add_argument("output", nargs="?", default="output.txt")
    args = parser.parse_args(argv)
    return run_file(args.commands, args.output)


if __name__ == "__main__":
    raise SystemExit(main())