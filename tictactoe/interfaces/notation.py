"""
notation.py - Move notation parsing for the command-line interface

Maps the textual move spellings a player can type onto board coordinates.
The engine only ever sees the resulting Coordinate.
"""

import re
from typing import Dict, Optional

from tictactoe.game.coordinate import Coordinate, Hor, Vert

INSTRUCTIONS = """\
Moves can be made using several methods:
 Top Mid Bot     Compass     Number pad
+---+---+---+ +---+---+---+ +---+---+---+
|tl | t | tr| |nw | n | ne| | 7 | 8 | 9 |
+---+---+---+ +---+---+---+ +---+---+---+
| l | m | r | | w | c | e | | 4 | 5 | 6 |
+---+---+---+ +---+---+---+ +---+---+---+
|bl | b | br| |sw | s | se| | 1 | 2 | 3 |
+---+---+---+ +---+---+---+ +---+---+---+
You can also give a row and column (e.g. "0,2") or a name (e.g. "top left").
"""

_CELL_ALIASES = {
    (Vert.TOP, Hor.LEFT): ("tl", "lt", "nw", "wn", "7"),
    (Vert.TOP, Hor.MID): ("t", "n", "8"),
    (Vert.TOP, Hor.RIGHT): ("tr", "rt", "ne", "en", "9"),
    (Vert.MID, Hor.LEFT): ("l", "w", "4"),
    (Vert.MID, Hor.MID): ("m", "c", "5"),
    (Vert.MID, Hor.RIGHT): ("r", "e", "6"),
    (Vert.BOTTOM, Hor.LEFT): ("bl", "lb", "sw", "ws", "1"),
    (Vert.BOTTOM, Hor.MID): ("b", "s", "2"),
    (Vert.BOTTOM, Hor.RIGHT): ("br", "rb", "se", "es", "3"),
}

SHORT_NOTATION: Dict[str, Coordinate] = {
    alias: Coordinate.named(vert, hor)
    for (vert, hor), aliases in _CELL_ALIASES.items()
    for alias in aliases
}

# Spelled-out words for each axis, mapped to Vert/Hor member names
_VERT_WORDS = {
    "top": "top", "upper": "top",
    "mid": "mid", "middle": "mid", "center": "mid", "centre": "mid",
    "bottom": "bottom", "bot": "bottom", "lower": "bottom",
}
_HOR_WORDS = {
    "left": "left",
    "mid": "mid", "middle": "mid", "center": "mid", "centre": "mid",
    "right": "right",
}

_PAIR_PATTERN = re.compile(r"^\(?\s*(-?\d+)\s*[,\s]\s*(-?\d+)\s*\)?$")
_WORD_SPLIT = re.compile(r"[\s_-]+")


def _parse_pair(text: str) -> Optional[Coordinate]:
    match = _PAIR_PATTERN.match(text)
    if match is None:
        return None
    return Coordinate(int(match.group(1)), int(match.group(2)))


def _parse_words(text: str) -> Optional[Coordinate]:
    words = [w for w in _WORD_SPLIT.split(text) if w]

    if len(words) == 1:
        # A lone "middle"/"center" names the centre cell; "top" etc. the edge middles
        word = words[0]
        if word in _VERT_WORDS and word in _HOR_WORDS:
            return Coordinate.from_name("mid", "mid")
        if word in _VERT_WORDS:
            return Coordinate.from_name(_VERT_WORDS[word], "mid")
        if word in _HOR_WORDS:
            return Coordinate.from_name("mid", _HOR_WORDS[word])
        return None

    if len(words) != 2:
        return None

    first, second = words
    if first in _VERT_WORDS and second in _HOR_WORDS:
        return Coordinate.from_name(_VERT_WORDS[first], _HOR_WORDS[second])
    # "left top" style
    if first in _HOR_WORDS and second in _VERT_WORDS:
        return Coordinate.from_name(_VERT_WORDS[second], _HOR_WORDS[first])
    return None


def parse_move(text: str) -> Optional[Coordinate]:
    """
    Parse a move typed by a player.

    Args:
        text: User input, e.g. "tl", "nw", "7", "0,0" or "top left"

    Returns:
        The coordinate named by the input, or None if it could not be understood.
        Row/column pairs are returned as given; range is checked by the engine.
    """
    if not isinstance(text, str):
        return None

    command = text.strip().lower()
    if not command:
        return None

    if command in SHORT_NOTATION:
        return SHORT_NOTATION[command]

    coord = _parse_pair(command)
    if coord is not None:
        return coord

    return _parse_words(command)
