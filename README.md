# robotfsm

An interactive finite state machine that drives a simple robot through a
fixed set of states:

| State         | What happens                                                      |
|---------------|-------------------------------------------------------------------|
| `INIT`        | Sets the delay to 1000 ms, moves to `IDLE`, prints the status.    |
| `IDLE`        | Asks for an action: status and history, move, shoot or calculate. |
| `MOVEMENT`    | Counts a move; from the third move on goes to `SHOOTING`.         |
| `SHOOTING`    | Resets the move count and returns to `IDLE`.                      |
| `CALCULATION` | Goes to `ERROR` if no move has been made, otherwise to `IDLE`.    |
| `ERROR`       | Counts an error; after more than three errors goes to `STOPPED`.  |
| `STOPPED`     | Shuts down and clears the state history.                          |

Every update and every transition records the state and a millisecond
timestamp in the machine's history.

## Installation

```
pip install .
```

## Running it

```
robotfsm
```

The command takes no options besides `--help`. It runs the machine on
standard input and output, updating once a second. While idle it shows a
menu:

```
Choose an action:
1. Display Status and History
2. Move
3. Shoot
4. Calculate
Enter choice:
```

Any other choice, including text that is not a number, leaves the machine
in `IDLE`. Choosing "Calculate" before any move counts as an error, and the
machine stops after the fourth error.

The command exits with status 0 once the machine has stopped, 1 if input
ends before that, and 130 if interrupted with Ctrl-C.

## Using it from Python

`robotfsm.fsm` holds the machine:

- `SystemState` – an `IntEnum` of the states, `INIT` (0) to `STOPPED` (6).
- `HistoryEntry` – a named tuple of `state` and `time` in milliseconds.
- `FSM(delay=1000, input_stream=None, output_stream=None, sleep=None)` –
  reads choices from `input_stream` (standard input by default), writes to
  `output_stream` (standard output by default) and pauses between updates
  with `sleep` (`time.sleep` by default).
- `millis()` – the monotonic clock in milliseconds, wrapped to 32 bits,
  used to timestamp the history.

```python
import io

from robotfsm.fsm import FSM, SystemState

commands = io.StringIO("2\n4\n")
output = io.StringIO()
machine = FSM(2000, input_stream=commands, output_stream=output, sleep=lambda seconds: None)

machine.update()   # INIT -> IDLE
machine.update()   # reads "2": IDLE -> MOVEMENT
machine.update()   # MOVEMENT -> IDLE, one move counted

assert machine.state is SystemState.IDLE
assert machine.move_count == 1

for entry in machine.history():
    print(entry.state.name, entry.time)

machine.print_status()
print(output.getvalue())
```

The machine's `state`, `last_heartbeat`, `delay`, `error_count` and
`move_count` are plain attributes. `transition_to()` enters a state and
records it, `record()` appends an entry to the history, and `history()`
returns a copy of it. `print_status()` and `print_history()` write reports
to the output stream. Each `perform_*` method carries out one state's step,
and `shutdown()` announces the stop and clears the history.

`FSM.start()` runs `update()` until the machine reaches `STOPPED`, pausing
one second between updates with the `sleep` callable, and then shuts down.
If the input ends while the machine is waiting for a choice, `EOFError` is
raised.

## Limitations

The `delay` value is kept and reported in the status but does not set the
pace of the loop, which always pauses one second between updates. The
machine only prints what the robot would do; it drives no hardware.

## Tests

```
pip install ".[test]"
pytest
```