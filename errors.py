"""
Typed errors for the shortest-path engine.

Almost everything in the engine reports "no value" with None or an empty
result. The exceptions here cover the few cases that are genuine caller
mistakes: wiring an edge to a vertex the graph never created, or handing the
engine an invalid setting.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ShortestPathError(Exception):
    """
    Base error for the engine.

    Attributes:
        message: human-readable description
        cause: optional underlying exception
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class VertexNotFoundError(ShortestPathError):
    """
    An edge endpoint was not created by the graph it is being added to.

    Attributes:
        vertex: the offending vertex
    """

    vertex: Any = None


@dataclass
class ConfigurationError(ShortestPathError):
    """
    Invalid engine setting.

    Attributes:
        setting_name: name of the problematic setting
    """

    setting_name: str = ""
