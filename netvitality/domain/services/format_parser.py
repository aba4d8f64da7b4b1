"""
Format Parser

Reads one graph description from a character stream:

    Input     := '{' '[' EdgeList ']' ',' '{' ValueList '}' '}'
    EdgeList  := Edge (',' Edge)*
    Edge      := '[' Name ',' Name ']'
    ValueList := Pair (',' Pair)*
    Pair      := Name ':' Integer
    Name      := "'" <chars except quote and whitespace> "'"

Whitespace is ignored between tokens. Both lists may be empty (``{[],{}}``).

Position counting starts at the first non-whitespace character; the char
counter is cumulative over the whole input, the line counter is one plus the
newlines consumed. A violation raises InputFormatError and nothing parsed so
far is returned, so callers never see a partial graph.

The parser pulls characters one at a time and stops right after the closing
brace, so several graphs can be read back to back from one open stream.

Usage:
    state = FormatParser(stream).parse()
    state = parse_text("{[['A','B']],{'A':1}}")
"""

from __future__ import annotations

import io
import logging
import re
from typing import Dict, List, Optional, TextIO, Tuple

from netvitality.domain.models.graph import Node, WeightedGraph

WHITESPACE = " \t\n\r"
INTEGER_TERMINATORS = ",}]" + WHITESPACE
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

logger = logging.getLogger(__name__)


class InputFormatError(ValueError):
    """Syntax violation in the graph description."""

    def __init__(self, line: int, column: int, reason: str) -> None:
        self.line = line
        self.column = column
        self.reason = reason
        super().__init__(
            f"Input format violation at line {line} char {column}: {reason}"
        )


# ---------------------------------------------------------------------------
# Character cursor
# ---------------------------------------------------------------------------

class _CharCursor:
    """Single-character lookahead over a text stream with position counters."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._lookahead: Optional[str] = None
        self.line = 1
        self.column = 0

    def peek(self) -> str:
        """Next character without consuming it; '' at end of input."""
        if self._lookahead is None:
            self._lookahead = self._stream.read(1)
        return self._lookahead

    def consume(self) -> str:
        ch = self.peek()
        self._lookahead = None
        if ch and (self.column or ch not in WHITESPACE):
            self.column += 1
            if ch == "\n":
                self.line += 1
        return ch

    def skip_whitespace(self) -> str:
        """Drop whitespace and return the next significant character (peeked)."""
        while self.peek() and self.peek() in WHITESPACE:
            self.consume()
        return self.peek()

    def error(self, reason: str) -> InputFormatError:
        return InputFormatError(self.line, self.column, reason)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class FormatParser:
    """Recursive-descent parser for the bracketed edge/weight format."""

    def __init__(self, stream: TextIO) -> None:
        self._cursor = _CharCursor(stream)

    def parse(self) -> WeightedGraph:
        """
        Parse exactly one graph description.

        Returns:
            Reconciled WeightedGraph (every node in both the Graph and the
            node table).

        Raises:
            InputFormatError: on the first grammar violation.
        """
        self._expect("{")
        edges = self._parse_edge_list()
        self._expect(",")
        weights = self._parse_value_list()
        self._expect("}")

        state = WeightedGraph()
        for a, b in edges:
            state.graph.add_edge(a, b)
        for name, weight in weights.items():
            state.nodes[name] = Node(name, weight)
        state.reconcile()

        logger.debug(
            "Parsed %d edges, %d weights, %d nodes",
            len(edges), len(weights), len(state.nodes),
        )
        return state

    # -- lists ----------------------------------------------------------------

    def _parse_edge_list(self) -> List[Tuple[str, str]]:
        self._expect("[")
        edges: List[Tuple[str, str]] = []
        if self._cursor.skip_whitespace() == "]":
            self._cursor.consume()
            return edges
        while True:
            self._expect("[")
            a = self._parse_name()
            self._expect(",")
            b = self._parse_name()
            self._expect("]")
            edges.append((a, b))
            if self._expect_one_of(",]") == "]":
                return edges

    def _parse_value_list(self) -> Dict[str, int]:
        self._expect("{")
        weights: Dict[str, int] = {}
        if self._cursor.skip_whitespace() == "}":
            self._cursor.consume()
            return weights
        while True:
            name = self._parse_name()
            self._expect(":")
            weights[name] = self._parse_integer()
            if self._expect_one_of(",}") == "}":
                return weights

    # -- tokens ---------------------------------------------------------------

    def _parse_name(self) -> str:
        self._expect("'")
        chars: List[str] = []
        while True:
            ch = self._cursor.peek()
            if not ch:
                raise self._cursor.error("unexpected end of input inside name")
            if ch == "'" or ch in WHITESPACE:
                break
            chars.append(self._cursor.consume())
        if ch == "'":
            self._cursor.consume()
        else:
            # whitespace ends the name; only the closing quote may follow
            self._expect("'")
        if not chars:
            raise self._cursor.error("empty node name")
        return "".join(chars)

    def _parse_integer(self) -> int:
        ch = self._cursor.skip_whitespace()
        if not ch:
            raise self._cursor.error("expected integer but end of input reached")
        if ch in INTEGER_TERMINATORS:
            self._cursor.consume()
            raise self._cursor.error(f"expected integer but found {ch}")
        chars: List[str] = []
        while self._cursor.peek() and self._cursor.peek() not in INTEGER_TERMINATORS:
            chars.append(self._cursor.consume())
        token = "".join(chars)
        if not INTEGER_PATTERN.fullmatch(token):
            raise self._cursor.error(f"value {token} is not an integer")
        value = int(token)
        if value < 0:
            raise self._cursor.error(f"weight {token} must be non-negative")
        return value

    def _expect(self, symbol: str) -> None:
        self._expect_one_of(symbol)

    def _expect_one_of(self, symbols: str) -> str:
        """Consume the next significant character, which must be in *symbols*."""
        self._cursor.skip_whitespace()
        ch = self._cursor.consume()
        wanted = " or ".join(symbols)
        if not ch:
            raise self._cursor.error(f"expected char {wanted} but end of input reached")
        if ch not in symbols:
            raise self._cursor.error(f"expected char {wanted} but found {ch}")
        return ch


# ---------------------------------------------------------------------------
# Convenience functions
# ---------------------------------------------------------------------------

def parse_stream(stream: TextIO) -> WeightedGraph:
    return FormatParser(stream).parse()


def parse_text(text: str) -> WeightedGraph:
    return FormatParser(io.StringIO(text)).parse()
