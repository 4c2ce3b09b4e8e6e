"""Towers of Hanoi, solved recursively and with an explicit stack."""

from __future__ import annotations

import argparse
import sys
from enum import Enum
from typing import Optional, Sequence

from strutturedati.stacks import LinkedStack

Move = tuple["Peg", "Peg"]


class Peg(Enum):
    """The three pegs."""

    ORIGIN = "origine"
    MIDDLE = "intermedio"
    DESTINATION = "destinazione"


def _check(disks: int) -> None:
    if disks < 1:
        raise ValueError("the number of disks must be at least 1")


def moves_recursive(
    disks: int,
    origin: Peg = Peg.ORIGIN,
    middle: Peg = Peg.MIDDLE,
    destination: Peg = Peg.DESTINATION,
) -> list[Move]:
    """Return the moves that carry the disks from origin to destination."""
    _check(disks)
    if disks == 1:
        return [(origin, destination)]
    return (
        moves_recursive(disks - 1, origin, destination, middle)
        + [(origin, destination)]
        + moves_recursive(disks - 1, middle, origin, destination)
    )


def moves_iterative(
    disks: int,
    origin: Peg = Peg.ORIGIN,
    middle: Peg = Peg.MIDDLE,
    destination: Peg = Peg.DESTINATION,
) -> list[Move]:
    """Return the same moves as moves_recursive, keeping pending work on a stack."""
    _check(disks)
    moves: list[Move] = []
    stack = LinkedStack()
    n, orig, inter, dest = disks, origin, middle, destination
    step = 1
    while True:
        if step == 1:
            if n == 1:
                moves.append((orig, dest))
                step = 3
                continue
            stack.push((n, orig, inter, dest, 2))
            n -= 1
            dest, inter = inter, dest
        elif step == 2:
            moves.append((orig, dest))
            stack.push((n, orig, inter, dest, 3))
            n -= 1
            orig, inter = inter, orig
            step = 1
        else:
            if stack.empty():
                return moves
            n, orig, inter, dest, step = stack.pop()


def describe_move(source: Peg, target: Peg) -> str:
    """Return the sentence describing one move."""
    return f"muovi un disco da {source.value} a {target.value}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the moves for a number of disks given as argument or on standard input."""
    parser = argparse.ArgumentParser(description="Towers of Hanoi.")
    parser.add_argument("disks", nargs="?", type=int)
    parser.add_argument("--iterative", action="store_true")
    args = parser.parse_args(argv)
    disks = args.disks if args.disks is not None else int(sys.stdin.readline())
    solve = moves_iterative if args.iterative else moves_recursive
    try:
        moves = solve(disks)
    except ValueError as error:
        parser.error(str(error))
    print(f"per {disks} dischi i movimenti richiesti sono:")
    for source, target in moves:
        print(describe_move(source, target))
    return 0