"""Arithmetic expressions in postfix notation, and infix-to-postfix conversion."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from strutturedati.stacks import ArrayStack


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of non-negative integers with + and *.

    Adjacent digits form one number; any other character ends it.
    """
    stack = ArrayStack(max(len(expression), 1))
    in_number = False
    for char in expression:
        if char in "+*":
            in_number = False
            top = stack.pop()
            below = stack.pop()
            stack.push(top + below if char == "+" else top * below)
        elif "0" <= char <= "9":
            digit = ord(char) - ord("0")
            if in_number:
                stack.push(10 * stack.pop() + digit)
            else:
                in_number = True
                stack.push(digit)
        else:
            in_number = False
    return stack.top()


def evaluate_polish(expression: str) -> int:
    """Evaluate a postfix expression with + - * / where each number ends with a space.

    Characters other than digits read while a number is open are skipped.
    Every intermediate result is truncated toward zero.
    """
    stack = ArrayStack()
    chars = iter(expression)
    for char in chars:
        if "0" <= char <= "9":
            number = ord(char) - ord("0")
            for following in chars:
                if following == " ":
                    break
                if "0" <= following <= "9":
                    number = number * 10 + ord(following) - ord("0")
            stack.push(number)
        elif char in "+-*/":
            top = stack.pop()
            below = stack.pop()
            if char == "+":
                result = below + top
            elif char == "-":
                result = below - top
            elif char == "*":
                result = below * top
            else:
                if top == 0:
                    raise ZeroDivisionError("division by zero in expression")
                result = int(below / top)
            stack.push(result)
    return stack.top()


def infix_to_postfix(expression: str) -> str:
    """Convert a fully parenthesised infix expression with + and * to postfix.

    Every digit is emitted as its own token; an operator is emitted at each ')'.
    """
    operators = ArrayStack(max(len(expression), 1))
    tokens: list[str] = []
    for char in expression:
        if char == ")":
            tokens.append(operators.pop())
        elif char in "+*":
            operators.push(char)
        elif "0" <= char <= "9":
            tokens.append(char)
    return " ".join(tokens)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Evaluate or convert the expression given on the command line."""
    parser = argparse.ArgumentParser(description="Postfix expression tools.")
    commands = parser.add_subparsers(dest="command", required=True)
    for name, text in (
        ("postfix", "evaluate a postfix expression with + and *"),
        ("polish", "evaluate a space-terminated postfix expression with + - * /"),
        ("infix", "convert a fully parenthesised infix expression to postfix"),
    ):
        command = commands.add_parser(name, help=text)
        command.add_argument("expression")
    args = parser.parse_args(argv)
    if args.command == "postfix":
        print(evaluate_postfix(args.expression))
    elif args.command == "polish":
        print(evaluate_polish(args.expression))
    else:
        print(infix_to_postfix(args.expression))
    return 0