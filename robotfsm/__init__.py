"""An interactive finite state machine for a simple robot, with a console command."""

__version__ = "0.1.0"
__all__ = ["cli", "fsm"]