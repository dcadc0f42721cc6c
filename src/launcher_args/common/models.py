"""Shared data models for the launcher argument parser."""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType

from .exceptions import ReleasedArgumentsError


class ParsedArguments:
    """Result of a successful parse.

    Values are read through properties only. ``release()`` drops the owned
    strings; any read after that is a caller bug and raises
    ``ReleasedArgumentsError``.
    """

    __slots__ = ("_security_tag", "_executable", "_is_version_query", "_is_classic_confinement", "_released")

    def __init__(
        self,
        security_tag: str | None = None,
        executable: str | None = None,
        is_version_query: bool = False,
        is_classic_confinement: bool = False,
    ) -> None:
        self._security_tag = security_tag
        self._executable = executable
        self._is_version_query = is_version_query
        self._is_classic_confinement = is_classic_confinement
        self._released = False

    def _check(self, what: str) -> None:
        if self._released:
            raise ReleasedArgumentsError(f"cannot obtain {what} from released argument parser")

    @property
    def security_tag(self) -> str | None:
        self._check("security tag")
        return self._security_tag

    @property
    def executable(self) -> str | None:
        self._check("executable")
        return self._executable

    @property
    def is_version_query(self) -> bool:
        self._check("version query flag")
        return self._is_version_query

    @property
    def is_classic_confinement(self) -> bool:
        self._check("classic confinement flag")
        return self._is_classic_confinement

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Drops the owned strings. Safe to call more than once."""
        self._security_tag = None
        self._executable = None
        self._released = True

    def __enter__(self) -> ParsedArguments:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    def __repr__(self) -> str:
        if self._released:
            return "ParsedArguments(<released>)"
        return (
            "ParsedArguments("
            f"security_tag={self._security_tag!r}, "
            f"executable={self._executable!r}, "
            f"is_version_query={self._is_version_query}, "
            f"is_classic_confinement={self._is_classic_confinement})"
        )


@dataclass(frozen=True)
class ParseOutcome:
    arguments: ParsedArguments
    remaining_argv: tuple[str, ...]

    @property
    def remaining_argc(self) -> int:
        return len(self.remaining_argv)

    def release(self) -> None:
        self.arguments.release()

    def __enter__(self) -> ParseOutcome:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()


@dataclass
class ArgsRef:
    """Mutable single slot holding parsed arguments owned by a caller."""

    value: ParsedArguments | None = None


def release_args(ref: ArgsRef) -> None:
    """Releases the held arguments and empties the slot."""
    if ref.value is not None:
        ref.value.release()
    ref.value = None
