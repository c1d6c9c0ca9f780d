from dataclasses import dataclass


@dataclass(frozen=True)
class Spec:
    id: int | None = None
    name: str | None = None


@dataclass(frozen=True)
class GameClass:
    id: int | None = None
    name: str | None = None
    specs: list[Spec] | None = None
