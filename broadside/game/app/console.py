"""Plain-text rendering of grids, fleet status, scores and help."""

from __future__ import annotations

from broadside.game.core.board import OceanGrid, TargetGrid
from broadside.game.core.coords import column_letter, encode_coord
from broadside.game.core.models import FLEET_SPECS, TOTAL_SEGMENTS, CellKind, Coord, ShipSpec, ShotOutcome
from broadside.game.core.rules import FireReport, GameSession, fleet_status
from broadside.game.scores.schema import TIMESTAMP_FORMAT, ScoreEntry

EMPTY_SYMBOL = "~"
MISS_SYMBOL = "M"
HIT_SYMBOL = "H"

RULE = "---------------------------------------"


def render_main_menu() -> str:
    return "\n".join(
        [
            "=======================================",
            "    B A T T L E S H I P    ",
            "=======================================",
            "",
            "MAIN MENU",
            RULE,
            "1. Start New Game",
            "2. Resume Game",
            "3. View Top 10 Scores",
            "4. How to Play",
            "5. Quit Game",
            RULE,
        ]
    )


def render_target_grid(target: TargetGrid, last_shot: Coord | None = None) -> str:
    """Render the player's view, bracketing the most recent shot."""
    lines = ["", "YOUR TARGET GRID:", *_grid_header(target.size)]
    for row in range(target.size):
        cells: list[str] = []
        for col in range(target.size):
            symbol = _target_symbol(target, Coord(row, col))
            if last_shot == Coord(row, col):
                cells.append(f"[{symbol}]|")
            else:
                cells.append(f" {symbol} |")
        lines.append(f"{row + 1:2d}|" + "".join(cells))
        lines.append(_grid_rule(target.size))
    lines.append(RULE)
    return "\n".join(lines)


def render_ocean_grid(ocean: OceanGrid) -> str:
    """Render the revealed computer setup; struck segments in lowercase."""
    lines = ["", "COMPUTER'S SECRET OCEAN GRID (Revealed):", *_grid_header(ocean.size)]
    for row in range(ocean.size):
        cells: list[str] = []
        for col in range(ocean.size):
            cell = ocean.cell_at(Coord(row, col))
            if cell.ship_id is None:
                symbol = EMPTY_SYMBOL
            elif cell.kind is CellKind.HIT:
                symbol = cell.ship_id.lower()
            else:
                symbol = cell.ship_id
            cells.append(f" {symbol} |")
        lines.append(f"{row + 1:2d}|" + "".join(cells))
        lines.append(_grid_rule(ocean.size))
    lines.append(RULE)
    return "\n".join(lines)


def render_status(session: GameSession) -> str:
    """Render shot count and per-ship damage."""
    lines = [
        "",
        "GAME STATUS:",
        RULE,
        f"Missiles Fired: {session.shots_fired}",
        f"Ships Remaining: {session.ships_remaining}",
        "Enemy Fleet Status:",
    ]
    for status in fleet_status(session):
        if status.sunk:
            label = "SUNK"
        elif status.hits_taken > 0:
            label = f"HIT ({status.hits_taken}/{status.length})"
        else:
            label = "Undamaged"
        lines.append(f"  ({status.letter}) {status.name:<20} : {label}")
    lines.append(RULE)
    return "\n".join(lines)


def render_scores(entries: list[ScoreEntry]) -> str:
    lines = ["--- TOP 10 SCORES ---"]
    if not entries:
        lines.append("No scores recorded yet. Be the first!")
    else:
        lines.append("Rank | Name | Score (Missiles) | Date Achieved")
        lines.append("-----|------|------------------|--------------------")
        for rank, entry in enumerate(entries, start=1):
            when = entry.achieved.strftime(TIMESTAMP_FORMAT)
            lines.append(f"{rank:<4d} | {entry.initials:<4} | {entry.score:<16d} | {when}")
    lines.append("------------------------------------------------------")
    return "\n".join(lines)


def render_help(specs: tuple[ShipSpec, ...] = FLEET_SPECS) -> str:
    lines = [
        "-----------------------------------------------------------------",
        "                       HOW TO PLAY BATTLESHIP                    ",
        "-----------------------------------------------------------------",
        "OBJECTIVE:",
        f"  Sink all {len(specs)} of the computer's hidden ships.",
        "",
        "THE FLEET (Name, Letter on Grid when Sunk, Size):",
    ]
    for spec in specs:
        lines.append(f"  - {spec.name:<20} ({spec.letter}) - {spec.length} holes")
    lines += [
        "",
        "GAMEPLAY:",
        "  1. Call out a shot by entering coordinates (e.g., A5, J10).",
        "  2. The grid will update with the result of your shot:",
        f"     '{EMPTY_SYMBOL}' : Unexplored water",
        f"     '{MISS_SYMBOL}' : Miss",
        f"     '{HIT_SYMBOL}' : Hit on a ship that is not yet sunk",
        "     Ship letter : A segment of that specific sunk ship.",
        "  3. A ship is sunk when all its segments have been hit.",
        "  4. The game ends when every ship is sunk.",
        "",
        "SCORING:",
        f"  Use as few missiles as possible. A perfect game uses {TOTAL_SEGMENTS} missiles.",
        "  Your score (missiles fired) might make the Top 10 list!",
        "",
        "SAVING/LOADING:",
        "  Type 'quit' during a game to save it and resume later.",
        "-----------------------------------------------------------------",
    ]
    return "\n".join(lines)


def describe_outcome(report: FireReport) -> str:
    """Return the player-facing message for one turn."""
    outcome = report.outcome
    target = encode_coord(report.result.coord)
    if outcome is ShotOutcome.MISS:
        return "***** M I S S *****"
    if outcome is ShotOutcome.HIT:
        return "***** H I T ! *****"
    if outcome is ShotOutcome.SUNK and report.ship is not None:
        return f"***** YOU SUNK THE {report.ship.name}! ({report.ship.letter}) *****"
    if outcome is ShotOutcome.ALREADY_PROCESSED:
        if report.ship is not None:
            return f"You already hit {target}. It's part of a ship ({report.ship.letter})."
        return f"You've already fired at {target}. Try a different spot."
    return "Error processing shot. Please report this."


def _target_symbol(target: TargetGrid, coord: Coord) -> str:
    cell = target.cell_at(coord)
    if cell.kind is CellKind.MISS:
        return MISS_SYMBOL
    if cell.kind is CellKind.HIT:
        return HIT_SYMBOL
    if cell.kind is CellKind.SUNK and cell.ship_id:
        return cell.ship_id
    return EMPTY_SYMBOL


def _grid_header(size: int) -> list[str]:
    return ["  |" + "".join(f" {column_letter(col)} |" for col in range(size)), _grid_rule(size)]


def _grid_rule(size: int) -> str:
    return "  +" + "---+" * size
