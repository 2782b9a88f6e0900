# Optscan Option Scanner — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parse cursor threaded through successive scan calls of one session.

The cursor is owned by the caller. Independent parses use independent cursors,
and a cursor must be `reset()` before it is reused on another argument vector.

States:
- `FRESH`: the next call starts examining the token at `next_index`.
- `MID_CLUSTER`: the next call continues inside a clustered token (`-abc`)
  at `sub_position`.
- `DONE`: end-of-options has been reported; every further call reports it again.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ScanState(Enum):
    """Position of the scanner relative to the current token."""

    FRESH = "fresh"
    MID_CLUSTER = "mid_cluster"
    DONE = "done"

    def __str__(self) -> str:
        return self.value


@dataclass
class ScanCursor:
    """
    Mutable parse position for one scanning session.

    Attributes:
        next_index (int): Index of the next unconsumed token. Index 0 holds the
            program name, so scanning starts at 1.
        sub_position (int): Offset of the next option letter inside a clustered token.
        current_value (str | None): Value attached to the most recent option.
        error_char (str | None): Offending option letter or long option name.
        long_index (int | None): Table index of the last matched long option.
        state (ScanState): Where the scanner stands.
    """

    next_index: int = 1
    sub_position: int = 1
    current_value: str | None = None
    error_char: str | None = None
    long_index: int | None = None
    state: ScanState = ScanState.FRESH

    def reset(self, start_index: int = 1) -> None:
        """Rewind the cursor for a new argument vector."""
        if start_index < 0:
            raise ValueError("start_index must not be negative")
        self.next_index = start_index
        self.sub_position = 1
        self.current_value = None
        self.error_char = None
        self.long_index = None
        self.state = ScanState.FRESH

    @property
    def done(self) -> bool:
        return self.state is ScanState.DONE

    def enter_cluster(self) -> None:
        self.sub_position = 1
        self.state = ScanState.MID_CLUSTER

    def advance_in_cluster(self, token: str) -> None:
        """Step past one option letter, moving to the next token when `token` runs out."""
        self.sub_position += 1
        if self.sub_position >= len(token):
            self.next_token()

    def next_token(self, count: int = 1) -> None:
        """Skip `count` whole tokens and return to the fresh-token state."""
        self.next_index += count
        self.sub_position = 1
        self.state = ScanState.FRESH

    def finish(self, consumed: int = 0) -> None:
        self.next_index += consumed
        self.sub_position = 1
        self.state = ScanState.DONE
