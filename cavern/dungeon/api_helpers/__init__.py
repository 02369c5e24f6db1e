"""Helpers that consume a built dungeon: movement and text rendering."""

from .movement import DIRECTIONS, attempt_move, describe_node_and_exits, exits_from
from .render import render_ascii

__all__ = ["DIRECTIONS", "attempt_move", "describe_node_and_exits", "exits_from", "render_ascii"]
