"""Day 1 - Rotation/Dial Problem (testable version)

The dial has positions 0-99 and starts at 50. Each instruction is a direction
(`L` or `R`) followed by a distance. The password is the number of
instructions after which the dial points exactly at 0.

The parsing and movement helpers are total: malformed instructions never
raise, they produce NaN distances which then stick to the position for the
rest of the run.
"""

import argparse
import math
import re
import sys
from typing import Iterable, List, NamedTuple, Optional, Union

from advent_of_code.day1_input import INPUT

INITIAL_POSITION: int = 50
N_POSITION: int = 100

LEFT: str = "L"

Number = Union[int, float]

# Whitespace skipped by JavaScript's parseInt() and trim(). Python's \s and
# str.strip() disagree with it on U+FEFF and \x1c-\x1f.
WHITESPACE: str = "".join(
    chr(code)
    for code in (
        [0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0xA0, 0x1680]
        + list(range(0x2000, 0x200B))
        + [0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF]
    )
)

_LEADING_INT = re.compile(f"[{re.escape(WHITESPACE)}]*([+-]?)([0-9]+)")

# Digit strings longer than this are beyond float range however they start.
_MAX_FLOAT_DIGITS: int = len(str(int(sys.float_info.max)))


class Instruction(NamedTuple):
    direction: Optional[str]
    distance: Number


def _parse_int(text: str) -> Number:
    """Read a leading base-10 integer, or NaN if there isn't one.

    Values beyond float range become +/-inf, as they would in JavaScript.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return math.nan
    sign = -1 if match.group(1) == "-" else 1
    digits = match.group(2).lstrip("0") or "0"
    if len(digits) > _MAX_FLOAT_DIGITS:
        return sign * math.inf
    value = int(digits)
    if value > sys.float_info.max:
        return sign * math.inf
    return sign * value


def _is_nan_or_inf(value: Number) -> bool:
    return isinstance(value, float) and not math.isfinite(value)


def _remainder(value: Number, n_position: int) -> Number:
    # Truncating remainder: the sign follows the dividend, unlike Python's %.
    remainder = abs(value) % n_position
    return remainder if value >= 0 else -remainder


def parse_instruction(instruction: str) -> Instruction:
    """Split an instruction like `L68` into its direction and distance.

    The direction is taken verbatim (no validation), `None` for an empty
    string. A missing or non-numeric distance becomes NaN.
    """
    direction: Optional[str] = instruction[0] if instruction else None
    return Instruction(direction, _parse_int(instruction[1:]))


def move_position(
    current_position: Number,
    direction: Optional[str],
    distance: Number,
    n_position: int = N_POSITION,
) -> Number:
    """Rotate the dial and return the new position.

    Only `L` is checked; every other direction turns right. Moving right from
    a negative position can return a negative value. A NaN or infinite
    position or distance gives NaN.
    """
    if _is_nan_or_inf(current_position) or _is_nan_or_inf(distance):
        return math.nan
    if direction == LEFT:
        return _remainder(
            _remainder(current_position - distance, n_position) + n_position,
            n_position,
        )
    return _remainder(current_position + distance, n_position)


def count_zero_passings(
    instructions: Iterable[str], start_position: Number = INITIAL_POSITION
) -> int:
    """Count the instructions that leave the dial pointing at 0."""
    position: Number = start_position
    zero_count: int = 0

    for instruction in instructions:
        direction, distance = parse_instruction(instruction)
        position = move_position(position, direction, distance)

        if position == 0:
            zero_count += 1

    return zero_count


def load_instructions(text: str) -> List[str]:
    """Split the puzzle input into lines, dropping blank ones."""
    return [line for line in text.split("\n") if line.strip(WHITESPACE)]


def read_input(filename: Optional[str]) -> str:
    if filename is None:
        return INPUT
    with open(filename, "r") as file:
        return file.read()


def print_trace(instructions: List[str], start_position: Number) -> None:
    print(f"Info - number of rotations: {len(instructions)}")
    print(f"The dial starts by pointing at {start_position}.")

    position: Number = start_position
    for instruction in instructions:
        direction, distance = parse_instruction(instruction)
        position = move_position(position, direction, distance)
        print(f"The dial is rotated {instruction} to point at {position}.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Count how many rotations leave the dial pointing at 0."
    )
    parser.add_argument(
        "--input",
        metavar="PATH",
        help="Read rotations from a file instead of the bundled puzzle input",
    )
    parser.add_argument(
        "--start",
        type=int,
        default=INITIAL_POSITION,
        help=f"Starting dial position (default: {INITIAL_POSITION})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print every rotation and the resulting position",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the dial rotation calculation and print the password."""
    args = build_parser().parse_args(argv)

    try:
        text: str = read_input(args.input)
    except OSError as exc:
        print(f"Error: cannot read '{args.input}': {exc.strerror}", file=sys.stderr)
        return 1

    instructions: List[str] = load_instructions(text)

    if args.debug:
        print_trace(instructions, args.start)

    result: int = count_zero_passings(instructions, args.start)
    print("The password is:", result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
