"""Tools for hydrating tmux data into python dataclass objects.

Every record type declares its properties as dataclass fields created with
:func:`tmux_field`. The field metadata is a static table of
``(name, tmux field, coercion)`` which drives both the ``-F`` template sent to
tmux and the parsing of what tmux prints back.
"""

from __future__ import annotations

import dataclasses
import logging
import typing as t

from appear import exc
from appear.formats import build_format

if t.TYPE_CHECKING:
    import sys
    from collections.abc import Mapping, Sequence

    from appear.client import Client
    from appear.formats import RawRecord
    from appear.pane import Pane
    from appear.window import Window

    if sys.version_info >= (3, 11):
        from typing import Self
    else:
        from typing_extensions import Self

logger = logging.getLogger(__name__)

Coercion = t.Callable[[str], t.Any]

TMUX_FIELD = "tmux"
PARSE = "parse"


class TmuxOps(t.Protocol):
    """Operations a record may ask of the server that produced it."""

    def clients(self) -> list[Client]: ...

    def panes(self) -> list[Pane]: ...

    def windows(self) -> list[Window]: ...

    def reveal_pane(self, pane: Pane) -> Pane: ...

    def new_window(self, **flags: t.Any) -> Window: ...

    def split_window(self, **flags: t.Any) -> Pane: ...

    def send_keys(
        self,
        pane: Pane,
        keys: str | Sequence[str],
        **flags: t.Any,
    ) -> None: ...


class TmuxProperty(t.NamedTuple):
    """One row of a record's property table."""

    name: str
    tmux: str | None
    parse: Coercion | None


def to_int(value: str) -> int:
    """Coerce a tmux number.

    >>> to_int("42")
    42
    """
    return int(value)


def nonzero(value: str) -> bool:
    """Coerce a tmux flag, true when the number is not zero.

    >>> nonzero("1"), nonzero("0")
    (True, False)
    """
    return int(value) != 0


def tmux_field(
    tmux: str | None = None,
    parse: Coercion | None = None,
) -> t.Any:
    """Declare a record property sourced from the tmux format ``tmux``."""
    return dataclasses.field(
        default=None,
        metadata={TMUX_FIELD: tmux, PARSE: parse},
    )


@dataclasses.dataclass(frozen=True)
class Obj:
    """Dataclass of generic tmux record.

    ``server`` is the capability used to act on the record. It is not part of
    the record's value: it takes no part in equality or repr.
    """

    server: TmuxOps = dataclasses.field(repr=False, compare=False)

    @classmethod
    def properties(cls) -> tuple[TmuxProperty, ...]:
        """Return the declared property table, in declaration order."""
        return tuple(
            TmuxProperty(f.name, f.metadata[TMUX_FIELD], f.metadata.get(PARSE))
            for f in dataclasses.fields(cls)
            if TMUX_FIELD in f.metadata
        )

    @classmethod
    def format_string(cls) -> str:
        """Return the ``-F`` template making tmux print this record type."""
        return build_format(
            (prop.name, prop.tmux) for prop in cls.properties() if prop.tmux
        )

    @classmethod
    def parse(cls, raw: Mapping[str, str], server: TmuxOps) -> Self:
        """Build a record from one parsed line of tmux output.

        Missing and empty values leave the property at ``None``.

        Raises
        ------
        :exc:`exc.ParseMismatch`
            A coercion rejected its value.
        """
        values: dict[str, t.Any] = {}
        for prop in cls.properties():
            value = raw.get(prop.name)
            if not value:
                continue
            if prop.parse is not None:
                try:
                    values[prop.name] = prop.parse(value)
                except (TypeError, ValueError) as e:
                    raise exc.ParseMismatch(
                        field=prop.name,
                        value=value,
                        record_type=cls.__name__,
                    ) from e
            else:
                values[prop.name] = value
        return cls(server=server, **values)

    @classmethod
    def parse_all(cls, raws: Sequence[RawRecord], server: TmuxOps) -> list[Self]:
        """Build one record per raw record, keeping order."""
        return [cls.parse(raw, server) for raw in raws]

    @property
    def target(self) -> str | None:
        """String suitable for use as the target specifier of a tmux command."""
        raise NotImplementedError
