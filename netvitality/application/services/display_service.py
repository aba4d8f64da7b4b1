"""
Display Application Service
"""
from typing import TextIO, Optional
import sys

from netvitality.domain.models import VitalityResult


class Colors:
    """ANSI color codes for terminal output."""
    RED = "\033[91m"
    GREEN = "\033[92m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


class DisplayService:
    """
    Service for rendering vitality results in the terminal.

    Color is only applied when the target stream is a TTY, so piped output
    stays plain.
    """
    Colors = Colors

    def __init__(self, stream: Optional[TextIO] = None, use_color: Optional[bool] = None) -> None:
        self.stream = stream or sys.stdout
        if use_color is None:
            use_color = hasattr(self.stream, "isatty") and self.stream.isatty()
        self.use_color = use_color

    def colored(self, text: str, color: str, bold: bool = False) -> str:
        """Apply color to text."""
        if not self.use_color:
            return text
        style = Colors.BOLD if bold else ""
        return f"{style}{color}{text}{Colors.RESET}"

    def print_header(self, title: str, char: str = "=", width: int = 60) -> None:
        """Print a formatted header."""
        print(self.colored(char * width, Colors.CYAN), file=self.stream)
        print(self.colored(f" {title} ".center(width), Colors.CYAN, bold=True), file=self.stream)
        print(self.colored(char * width, Colors.CYAN), file=self.stream)

    def display_scores(self, result: VitalityResult, title: str = "Vitality Scores") -> None:
        """Print every node's score; minimum-score nodes are highlighted."""
        self.print_header(title)
        if result.is_empty:
            print(self.colored("  (empty graph)", Colors.GRAY), file=self.stream)
            return

        width = max(len(name) for name in result.scores)
        selected = set(result.selected)
        for name, score in sorted(result.scores.items()):
            line = f"  {name:<{width}} = {score}"
            if name in selected:
                line = self.colored(line + "  *", Colors.GREEN, bold=True)
            print(line, file=self.stream)

        summary = result.summary
        print(
            self.colored(
                f"\n  nodes={summary.nodes} edges={summary.edges} "
                f"components={summary.num_components} cut_vertices={summary.num_cut_vertices}",
                Colors.GRAY,
            ),
            file=self.stream,
        )

    def display_error(self, message: str) -> None:
        print(self.colored(message, Colors.RED), file=sys.stderr)
