"""Advent of Code solutions, refactored into small testable functions."""

from advent_of_code.day1 import (
    Instruction,
    count_zero_passings,
    move_position,
    parse_instruction,
)

__all__ = [
    "Instruction",
    "count_zero_passings",
    "move_position",
    "parse_instruction",
]
