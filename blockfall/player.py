"""Player records with a best score kept in a plain text file."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

log = logging.getLogger(__name__)

_SEPARATOR = "---------------------------"
_SCORE_RE = re.compile(r"Max\s*score:\s*([+-]?\d+)")


def _parse_score(line: str) -> int:
    match = _SCORE_RE.match(line)
    return int(match.group(1)) if match else 0


def _read_lines(path: Path) -> list[str]:
    lines = path.read_text().split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


@dataclass
class Player:
    """A named player whose best score is stored in a records file."""

    name: str = ""
    password: str = ""
    path: Path = Path("player.txt")
    score: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def update_score(self, score: int) -> None:
        """Set the score of the current session."""
        self.score = score

    def max_score(self) -> int:
        """The highest stored score for this name and password, or 0."""
        try:
            lines = _read_lines(self.path)
        except OSError:
            log.warning("Cannot open file for reading: %s", self.path)
            return 0
        best = 0
        it = iter(lines)
        for line in it:
            if f"Name: {self.name}" in line:
                password_line = next(it, "")
                score_line = next(it, "")
                if f"Password: {self.password}" in password_line:
                    best = max(best, _parse_score(score_line))
        return best

    def save(self) -> None:
        """Store the session score, keeping the higher of old and new."""
        try:
            lines = _read_lines(self.path)
        except OSError:
            lines = []
        output: list[str] = []
        updated = False
        it = iter(lines)
        for line in it:
            if f"Name: {self.name}" in line:
                password_line = next(it, "")
                score_line = next(it, "")
                if f"Password: {self.password}" in password_line:
                    if self.score > _parse_score(score_line):
                        score_line = f"Max score: {self.score}"
                    updated = True
                output.extend((line, password_line, score_line))
                continue
            output.append(line)
        if not updated:
            output.extend(
                (
                    _SEPARATOR,
                    f"Name: {self.name}",
                    f"Password: {self.password}",
                    f"Max score: {self.score}",
                )
            )
        self.path.write_text("".join(f"{line}\n" for line in output))