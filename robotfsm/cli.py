"""Command-line entry point running the robot state machine."""

from __future__ import annotations

import argparse
import sys

from robotfsm.fsm import FSM

_DELAY_MS = 2000


def main(argv: list[str] | None = None) -> int:
    """Run the interactive state machine on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="robotfsm",
        description="Drive a robot state machine from the terminal.",
    )
    parser.parse_args(argv)

    machine = FSM(_DELAY_MS)
    try:
        machine.start()
    except EOFError:
        print("\nInput ended before the system stopped.", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())