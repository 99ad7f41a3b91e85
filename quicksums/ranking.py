"""Round ranking: keeps finished players sorted by score and renders the leaderboard.

Players are inserted one at a time as their turns finish. The list stays
sorted highest score first; a new score that ties the current leader takes the
top spot. At the end of the round the list is trimmed to the top 5 and shown
either as a Rich table or as plain text.
"""

from __future__ import annotations

from typing import Iterator, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from quicksums.models import Player

TOP_N = 5

_HEADER = "--- FINAL RANKING (TOP 5) ---"
_NO_PLAYERS = "No players registered."

# Podium colors for the first three places.
_PLACE_STYLES = {1: "bold yellow", 2: "white", 3: "dark_orange"}


class RankingList:
    """Players ordered by descending score."""

    def __init__(self) -> None:
        self._entries: list[Player] = []

    def insert_sorted(self, player: Player) -> None:
        """Insert a player keeping the list sorted by descending score.

        A score equal to or above the current leader goes to the front.
        Otherwise the scan starts at the second entry and the player lands
        before the first entry whose score is not greater than theirs, or at
        the end if there is none.
        """
        entries = self._entries
        if not entries or player.score >= entries[0].score:
            entries.insert(0, player)
            return

        index = 1
        while index < len(entries) and player.score < entries[index].score:
            index += 1
        entries.insert(index, player)

    def keep_top5(self) -> None:
        """Drop everything after the fifth entry."""
        del self._entries[TOP_N:]

    def top(self, limit: int = TOP_N) -> list[Player]:
        return list(self._entries[:limit])

    def display_top5(self) -> str:
        """Plain-text leaderboard, numbered from 1."""
        lines = [_HEADER]
        if not self._entries:
            lines.append(_NO_PLAYERS)
            return "\n".join(lines)
        for position, player in enumerate(self.top(), 1):
            lines.append(f"{position}. {player}")
        return "\n".join(lines)

    def get_winner(self) -> Optional[Player]:
        """Highest scorer, or None when nobody has played."""
        if self._entries:
            return self._entries[0]
        return None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


def render_ranking(ranking: RankingList, console: Console) -> None:
    """Render the top 5 of a ranking as a Rich table."""
    if not ranking:
        console.print(f"[yellow]{_NO_PLAYERS}[/yellow]")
        return

    table = Table(
        title="Final Ranking (Top 5)",
        show_header=True,
        header_style="bold",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Player", min_width=15)
    table.add_column("Score", justify="right", min_width=8)

    for position, player in enumerate(ranking.top(), 1):
        style = _PLACE_STYLES.get(position)
        table.add_row(str(position), escape(player.name), str(player.score), style=style)

    console.print()
    console.print(table)
    console.print()
