"""Parser and evaluator for integer expressions with ``+ - * /`` and parentheses."""

from __future__ import annotations

from dataclasses import dataclass

_END = "\0"


@dataclass(frozen=True)
class Node:
    """Expression tree node: an operator with two child indices, or a number ``n``."""

    kind: str
    children: tuple[int, ...] = ()
    value: int = 0


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class Parser:
    """Parses an expression into a flat node list whose last node is the root.

    The input is assumed to be a valid expression; spaces are skipped.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.nodes: list[Node] = []
        self._pos = -1

    def _current(self) -> str:
        return self.text[self._pos] if self._pos < len(self.text) else _END

    def _advance(self) -> None:
        self._pos += 1
        while self._current() == " ":
            self._pos += 1

    def read(self) -> list[Node]:
        """Parse the text and return the node list."""
        self.nodes = []
        self._pos = -1
        self._advance()
        self._read_sum()
        return self.nodes

    def _read_binary(self, operators: str, operand) -> None:
        operand()
        left = len(self.nodes) - 1
        while self._current() in operators and self._current() != _END:
            op = self._current()
            self._advance()
            operand()
            right = len(self.nodes) - 1
            self.nodes.append(Node(op, (left, right)))
            left = len(self.nodes) - 1

    def _read_sum(self) -> None:
        self._read_binary("+-", self._read_product)

    def _read_product(self) -> None:
        self._read_binary("*/", self._read_element)

    def _read_element(self) -> None:
        if self._current() == "(":
            self._advance()
            self._read_sum()
            self._advance()
            return
        number = 0
        while "0" <= self._current() <= "9":
            number = number * 10 + int(self._current())
            self._advance()
        self.nodes.append(Node("n", (), number))

    def evaluate(self, index: int | None = None) -> int:
        """Value of the subtree at ``index``, the root by default.

        Division truncates toward zero.
        """
        if not self.nodes:
            raise ValueError("nothing has been parsed")
        node = self.nodes[-1 if index is None else index]
        if node.kind == "n":
            return node.value
        a = self.evaluate(node.children[0])
        b = self.evaluate(node.children[1])
        if node.kind == "+":
            return a + b
        if node.kind == "-":
            return a - b
        if node.kind == "*":
            return a * b
        if node.kind == "/":
            return _truncating_div(a, b)
        raise ValueError(f"unknown node kind {node.kind!r}")