"""
Result types returned by the transport layer.

Every exchange ends in exactly one of three states:
- Success: a GET completed and its JSON body was parsed
- Acknowledged: a POST completed; success tells whether the appliance
  reported success
- TransportFailure: the exchange could not be completed

Acknowledged(False) and TransportFailure are both falsy but are different
types, so "the appliance said no" can be told apart from "no answer".
"""

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Success:
    """Parsed JSON body of a completed GET."""
    data: Any

    @property
    def ok(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Acknowledged:
    """Outcome of a completed POST."""
    success: bool

    @property
    def ok(self) -> bool:
        return self.success

    def __bool__(self) -> bool:
        return self.success


@dataclass(frozen=True)
class TransportFailure:
    """Exchange could not be completed (connection error or non-2xx status)."""
    message: str
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return False


GetResult = Union[Success, TransportFailure]
PostResult = Union[Acknowledged, TransportFailure]
TransportResult = Union[Success, Acknowledged, TransportFailure]
