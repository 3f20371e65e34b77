from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union


@dataclass(frozen=True, slots=True)
class Command:
    """A literal shell command run on the target host."""
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Marker:
    """Opens the progress event for a milestone; never reaches the host."""
    key: str


@dataclass(frozen=True, slots=True)
class Effect:
    """
    A local closure run in sequence with the commands.

    A ``str``, ``bytes`` (decoded as UTF-8) or ``Command`` result is executed
    as a command in the same iteration; any other result is treated as a
    finished side effect.
    The thunk may be a coroutine function.
    """
    thunk: Callable[[], Any]


Step = Union[Command, Marker, Effect]


def track(key: str) -> Marker:
    return Marker(key)


def effect(thunk: Callable[[], Any]) -> Effect:
    return Effect(thunk)


def steps(*items: Step | str) -> tuple[Step, ...]:
    built: list[Step] = []
    for position, item in enumerate(items):
        if isinstance(item, str):
            built.append(Command(item))
        elif isinstance(item, (Command, Marker, Effect)):
            built.append(item)
        else:
            raise TypeError(f"Unsupported step at position {position}: {type(item).__name__}")
    return tuple(built)
