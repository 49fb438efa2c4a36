"""A small robot controller modelled as a finite state machine."""

from __future__ import annotations

import sys
import time
from collections import deque
from enum import IntEnum
from typing import Callable, NamedTuple, TextIO

_UINT32_MASK = 0xFFFFFFFF
_TICK_SECONDS = 1.0

_MENU = (
    "\nChoose an action:\n"
    "1. Display Status and History\n"
    "2. Move\n"
    "3. Shoot\n"
    "4. Calculate\n"
    "Enter choice: "
)


def millis() -> int:
    """Milliseconds of the monotonic clock, wrapped to 32 bits."""
    return (time.monotonic_ns() // 1_000_000) & _UINT32_MASK


class SystemState(IntEnum):
    """States the machine can be in."""

    INIT = 0
    IDLE = 1
    MOVEMENT = 2
    SHOOTING = 3
    CALCULATION = 4
    ERROR = 5
    STOPPED = 6


class HistoryEntry(NamedTuple):
    """A state together with the time, in milliseconds, it was recorded."""

    state: SystemState
    time: int


class FSM:
    """Robot state machine driven by user choices read from a text stream."""

    def __init__(
        self,
        delay: int = 1000,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
        sleep: Callable[[float], object] | None = None,
    ) -> None:
        self.state = SystemState.INIT
        self.last_heartbeat = 0
        self.delay = delay
        self.error_count = 0
        self.move_count = 0
        self._history: list[HistoryEntry] = []
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output_stream if output_stream is not None else sys.stdout
        self._sleep = sleep if sleep is not None else time.sleep
        self._tokens: deque[str] = deque()

    def _write(self, text: str) -> None:
        self._output.write(text)
        self._output.flush()

    def _next_token(self) -> str:
        while not self._tokens:
            line = self._input.readline()
            if not line:
                raise EOFError("input ended while waiting for a choice")
            self._tokens.extend(line.split())
        return self._tokens.popleft()

    def transition_to(self, new_state: SystemState) -> None:
        """Enter a new state, stamping the heartbeat and recording it."""
        self.state = SystemState(new_state)
        self.last_heartbeat = millis()
        self.record(self.state, self.last_heartbeat)

    def record(self, state: SystemState, time: int) -> None:
        """Append a state and its time to the history."""
        self._history.append(HistoryEntry(SystemState(state), time))

    def history(self) -> list[HistoryEntry]:
        """A copy of the recorded state history."""
        return list(self._history)

    def start(self) -> None:
        """Run the update loop once a second until the machine stops."""
        while self.state is not SystemState.STOPPED:
            self.update()
            self._sleep(_TICK_SECONDS)
        self.shutdown()

    def update(self) -> None:
        """Stamp the heartbeat, record the current state and act on it."""
        self.last_heartbeat = millis()
        self.record(self.state, self.last_heartbeat)
        handlers = {
            SystemState.INIT: self.perform_init,
            SystemState.IDLE: self.perform_process,
            SystemState.MOVEMENT: self.perform_movement,
            SystemState.SHOOTING: self.perform_shooting,
            SystemState.CALCULATION: self.perform_calculation,
            SystemState.ERROR: self.perform_error_handling,
            SystemState.STOPPED: self.shutdown,
        }
        handlers[self.state]()

    def print_status(self) -> None:
        """Write the current state, heartbeat, delay and counters."""
        self._write(
            "Status:\n"
            f"- State: {int(self.state)}\n"
            f"- Last Heartbeat: {self.last_heartbeat} ms\n"
            f"- Delay: {self.delay} ms\n"
            f"- Error Count: {self.error_count}\n"
            f"- Move Count: {self.move_count}\n"
        )

    def print_history(self) -> None:
        """Write every recorded state with its time."""
        lines = ["State History:\n"]
        lines.extend(
            f"- State: {int(entry.state)} at {entry.time} ms\n"
            for entry in self._history
        )
        self._write("".join(lines))

    def perform_init(self) -> None:
        """Reset the delay, move to IDLE and report the status."""
        self._write("Initializing system...\n")
        self.delay = 1000
        self.transition_to(SystemState.IDLE)
        self.print_status()

    def perform_process(self) -> None:
        """Ask the user for an action and move to the matching state."""
        self._write(_MENU)
        token = self._next_token()
        try:
            choice = int(token)
        except ValueError:
            choice = 0

        if choice == 1:
            self.print_status()
            self.print_history()
        elif choice == 2:
            self.transition_to(SystemState.MOVEMENT)
        elif choice == 3:
            self.transition_to(SystemState.SHOOTING)
        elif choice == 4:
            self.transition_to(SystemState.CALCULATION)
        else:
            self._write("Invalid input. Staying in IDLE.\n")

    def perform_movement(self) -> None:
        """Count a move; after three moves, shoot."""
        self._write("Moving...\n")
        self.move_count += 1
        if self.move_count >= 3:
            self.transition_to(SystemState.SHOOTING)
        else:
            self.transition_to(SystemState.IDLE)

    def perform_shooting(self) -> None:
        """Shoot, reset the move counter and go back to IDLE."""
        self._write("Shooting...\n")
        self.move_count = 0
        self.transition_to(SystemState.IDLE)

    def perform_calculation(self) -> None:
        """Calculate; without any moves this is an error."""
        self._write("Performing calculation...\n")
        if self.move_count == 0:
            self.transition_to(SystemState.ERROR)
        else:
            self.transition_to(SystemState.IDLE)

    def perform_error_handling(self) -> None:
        """Count an error; after more than three, stop."""
        self._write("Error occurred, performing error handling...\n")
        self.error_count += 1
        if self.error_count > 3:
            self.transition_to(SystemState.STOPPED)
        else:
            self.transition_to(SystemState.IDLE)

    def shutdown(self) -> None:
        """Announce the shutdown and clear the history."""
        self._write("System stopped, shutting down...\n")
        self._history.clear()