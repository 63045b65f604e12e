from dataclasses import dataclass, field
from typing import Union

# Expression tree nodes. Each List owns its items outright; no node is shared.


@dataclass
class Noop:
    pass


@dataclass
class List:
    items: list["Expr"] = field(default_factory=list)


@dataclass
class Identifier:
    name: str


@dataclass
class StringLiteral:
    value: str


Expr = Union[Noop, List, Identifier, StringLiteral]
