"""Event layers: the set of events sharing one slot index.

A layer is homogeneous in kind (directed, step or a lone external event) and
its events never claim the same actor column. Column claims are kept as a
bitmask over ``column + 1``; bit 0 is the whole-row claim of an external
event.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from seqlayout.errors import EventCollision, IncompatibleLayerMix
from seqlayout.ir.entities import Event
from seqlayout.types import LayerKind

EXTERNAL_MASK: int = 0b1


def event_mask(event: Event) -> int:
    """Column bitmask claimed by ``event`` within its layer."""
    if event.arrow.is_external:
        return EXTERNAL_MASK
    mask = 0
    for column in event.columns:
        mask |= 1 << (column + 1)
    return mask


@dataclass
class EventLayer:
    slot: int
    kind: LayerKind = LayerKind.Empty
    mask: int = 0
    events: list[str] = field(default_factory=list)
    # column bit -> id of the event holding it, for collision diagnostics
    owners: dict[int, str] = field(default_factory=dict)

    def check(self, event: Event) -> int:
        """Validate ``event`` against this layer without changing it.

        Returns the event's mask. Raises IncompatibleLayerMix or EventCollision.
        """
        event_kind = LayerKind.of(event.arrow)
        if self.kind is not LayerKind.Empty and (
            self.kind is LayerKind.External or event_kind is LayerKind.External or self.kind is not event_kind
        ):
            raise IncompatibleLayerMix(event.id, self.slot, self.kind, event_kind)

        mask = event_mask(event)
        overlap = self.mask & mask
        if overlap:
            others = sorted({owner for bit, owner in self.owners.items() if overlap & bit})
            raise EventCollision(event.id, self.slot, others)
        return mask

    def admit(self, event: Event) -> None:
        mask = self.check(event)
        self.kind = LayerKind.of(event.arrow)
        self.mask |= mask
        self.events.append(event.id)
        bit = 1
        while bit <= mask:
            if mask & bit:
                self.owners[bit] = event.id
            bit <<= 1

    def __len__(self) -> int:
        return len(self.events)
