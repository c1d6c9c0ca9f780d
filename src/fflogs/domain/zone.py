from dataclasses import dataclass


@dataclass(frozen=True)
class Encounter:
    id: int | None = None
    name: str | None = None


@dataclass(frozen=True)
class Bracket:
    id: int | None = None
    name: str | None = None


@dataclass(frozen=True)
class Zone:
    """A raid or dungeon instance and the encounters ranked inside it.

    ``frozen`` is set once the zone's rankings will never change again.
    """

    id: int | None = None
    name: str | None = None
    frozen: bool | None = None
    encounters: list[Encounter] | None = None
    brackets: list[Bracket] | None = None
