"""ViewModel: the single exhaustive state consumed by the presentation layer.

Exactly one of Unauthenticated, Loading, Failed, Empty or Populated. Replaces
independent loading/error/data flags so impossible combinations cannot occur.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Union


class ViewState(str, Enum):
    """Discriminator of a ViewModel."""

    UNAUTHENTICATED = "UNAUTHENTICATED"
    LOADING = "LOADING"
    FAILED = "FAILED"
    EMPTY = "EMPTY"
    POPULATED = "POPULATED"


@dataclass(frozen=True, slots=True)
class RecordRow:
    """One table row: compact identifiers for display, full ones for navigation."""

    certificate_id: str
    certificate_id_short: str
    project_id: str
    project_id_short: str
    display_amount: Decimal
    amount_display: str
    """E.g. ``2.5000 SUI``."""
    project_path: str
    """Navigation target built from the untruncated project id."""


@dataclass(frozen=True, slots=True)
class SummaryView:
    """Summary cards of the dashboard."""

    count: int
    total_display_amount: Decimal
    total_display: str
    skipped_count: int = 0

    @property
    def certificate_count(self) -> int:
        """One certificate is minted per donation."""
        return self.count


@dataclass(frozen=True, slots=True)
class Unauthenticated:
    """No wallet connected. Not an error and not an empty result."""

    state: ClassVar[ViewState] = ViewState.UNAUTHENTICATED


@dataclass(frozen=True, slots=True)
class Loading:
    """A fetch for ``address`` is in flight."""

    address: str
    state: ClassVar[ViewState] = ViewState.LOADING


@dataclass(frozen=True, slots=True)
class Failed:
    """The cycle failed; ``message`` is stable and user-facing."""

    address: str
    message: str
    state: ClassVar[ViewState] = ViewState.FAILED


@dataclass(frozen=True, slots=True)
class Empty:
    """Fetch succeeded and the donor holds no certificates (or every one was skipped as malformed)."""

    address: str
    skipped_count: int = 0
    state: ClassVar[ViewState] = ViewState.EMPTY


@dataclass(frozen=True, slots=True)
class Populated:
    """Fetch succeeded with at least one certificate."""

    address: str
    summary: SummaryView
    rows: tuple[RecordRow, ...]
    state: ClassVar[ViewState] = ViewState.POPULATED


ViewModel = Union[Unauthenticated, Loading, Failed, Empty, Populated]
