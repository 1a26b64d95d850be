"""
Mode machine for the editor.

Like vim, Command is the default mode with nothing pending, and Insert
modifies the graph an object at a time. Creating an edge needs extra input,
so the machine collects the vertex ids in InsertEdgePending until Enter.

`transition(mode, key)` is a pure function: it never touches the document
or the history, it only reports what the session should do next.
"""

from dataclasses import dataclass
from typing import Union

from modalgraph.edit.keys import ENTER, ESC, E_LOWER, I_LOWER, U_LOWER, U_UPPER, V_LOWER, describe_key


# --- Modes ---

@dataclass(frozen=True)
class Command:
    pass


@dataclass(frozen=True)
class Insert:
    pass


@dataclass(frozen=True)
class InsertEdgePending:
    buffer: str = ""


EditorMode = Union[Command, Insert, InsertEdgePending]


# --- Intents ---

@dataclass(frozen=True)
class CreateNewVertex:
    pass


@dataclass(frozen=True)
class CreateNewEdge:
    raw_text: str


@dataclass(frozen=True)
class Undo:
    pass


@dataclass(frozen=True)
class Redo:
    pass


Intent = Union[CreateNewVertex, CreateNewEdge, Undo, Redo]


# --- Outcomes ---

@dataclass(frozen=True)
class ModeChange:
    """A mode change with nothing for the editor to apply."""
    mode: EditorMode


@dataclass(frozen=True)
class Apply:
    """An intent to resolve, plus the (possibly unchanged) mode to enter."""
    intent: Intent
    mode: EditorMode


@dataclass(frozen=True)
class Error:
    """A message to report to the user and the mode to enter afterwards."""
    message: str
    mode: EditorMode


Outcome = Union[ModeChange, Apply, Error]


def describe_mode(mode: EditorMode) -> str:
    if isinstance(mode, InsertEdgePending):
        return f"InsertEdgePending({mode.buffer!r})"
    return type(mode).__name__


def unknown_command(mode: EditorMode, key: str) -> Error:
    return Error(
        f"Input {describe_key(key)} doesn't do anything in the current mode: {describe_mode(mode)}",
        mode,
    )


def transition(mode: EditorMode, key: str) -> Outcome:
    if isinstance(mode, Command):
        if key == I_LOWER:
            return ModeChange(Insert())
        if key == U_LOWER:
            return Apply(Undo(), Command())
        if key == U_UPPER:
            return Apply(Redo(), Command())
        return unknown_command(mode, key)

    if isinstance(mode, Insert):
        if key == ESC:
            return ModeChange(Command())
        if key == V_LOWER:
            return Apply(CreateNewVertex(), Insert())
        if key == E_LOWER:
            return ModeChange(InsertEdgePending(""))
        return unknown_command(mode, key)

    if isinstance(mode, InsertEdgePending):
        if key == ESC:
            return ModeChange(Insert())
        if key == ENTER:
            return Apply(CreateNewEdge(mode.buffer), Insert())
        return ModeChange(InsertEdgePending(mode.buffer + key))

    raise TypeError(f"Unknown editor mode: {mode!r}")
