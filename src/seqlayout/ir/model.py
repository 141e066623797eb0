"""Diagram model — the identifier registry and append-only entity store.

Every entity is a node of a networkx MultiDiGraph keyed by its identifier, with the
entity stored under the ``data`` attribute. Cross-references (event -> actor,
note -> target, region -> actor/event) are ``refers-to`` edges carrying the
reference ``role``. Identifiers are unique across all entity kinds.
"""

from __future__ import annotations

import logging

import networkx as nx

from seqlayout.errors import DuplicateIdentifier, InvalidAttribute, TypeMismatch, UnknownReference
from seqlayout.ir.entities import Actor, ActorRegion, BoxRegion, Entity, Event, Note
from seqlayout.ir.layers import EventLayer
from seqlayout.types import ArrowDir, EntityKind, NoteRefKind

logger = logging.getLogger(__name__)


class DiagramModel:
    """All entities of one sequence diagram.

    Insertions validate before they store anything, so a failed ``add_*``
    leaves the model exactly as it was.
    """

    def __init__(self) -> None:
        self.graph: nx.MultiDiGraph = nx.MultiDiGraph()
        self.title: str | None = None
        self.description: str | None = None

        self.actors: list[Actor] = []
        self.events: list[Event] = []
        self.notes: list[Note] = []
        self.actor_regions: list[ActorRegion] = []
        self.box_regions: list[BoxRegion] = []
        self.layers: dict[int, EventLayer] = {}

        self.max_column = -1
        self.max_slot = -1
        self.max_note_index = -1

    # ─── Header ──────────────────────────────────────────────────────────

    def set_name(self, title: str | None) -> None:
        self.title = title

    def set_description(self, description: str | None) -> None:
        self.description = description

    # ─── Registry ────────────────────────────────────────────────────────

    def __contains__(self, ident: str) -> bool:
        return ident in self.graph

    def __len__(self) -> int:
        return self.graph.number_of_nodes()

    def lookup(self, ident: str) -> Entity | None:
        if ident not in self.graph:
            return None
        return self.graph.nodes[ident]["data"]

    def lookup_as(self, ident: str | None, kind: EntityKind, referrer: str, role: str) -> Entity:
        """Resolve a reference, failing with UnknownReference or TypeMismatch."""
        if ident is None:
            raise UnknownReference(referrer, None, role)
        entity = self.lookup(ident)
        if entity is None:
            raise UnknownReference(referrer, ident, role)
        if entity.kind is not kind:
            raise TypeMismatch(referrer, ident, kind, entity.kind)
        return entity

    def references(self, ident: str) -> list[tuple[str, str]]:
        """(role, target id) pairs that ``ident`` refers to."""
        return [(attrs["role"], tgt) for _, tgt, attrs in self.graph.out_edges(ident, data=True)]

    def referrers(self, ident: str) -> list[str]:
        return sorted(self.graph.predecessors(ident))

    def _check_new_id(self, ident: str) -> None:
        if ident in self.graph:
            raise DuplicateIdentifier(ident)

    def _register(self, entity: Entity, refs: list[tuple[str, str]]) -> None:
        self.graph.add_node(entity.id, data=entity)
        for role, target in refs:
            self.graph.add_edge(entity.id, target, role=role)

    # ─── Actors ──────────────────────────────────────────────────────────

    def add_actor(self, ident: str, style_class: str | None, column: int, title: str | None) -> Actor:
        self._check_new_id(ident)
        _require_index("column", ident, column)
        actor = Actor(id=ident, column=column, title=title, style_class=style_class)
        self._register(actor, [])
        self.actors.append(actor)
        self.max_column = max(self.max_column, column)
        logger.debug("actor %s column=%d", ident, column)
        return actor

    # ─── Events ──────────────────────────────────────────────────────────

    def add_directed_event(
        self,
        ident: str,
        style_class: str | None,
        slot: int,
        start_actor_id: str,
        end_actor_id: str,
        top_label: str | None = None,
        bottom_label: str | None = None,
    ) -> Event:
        self._check_new_id(ident)
        _require_index("slot", ident, slot)
        start = self.lookup_as(start_actor_id, EntityKind.Actor, ident, "start actor")
        end = self.lookup_as(end_actor_id, EntityKind.Actor, ident, "end actor")
        if start.id == end.id:
            raise InvalidAttribute(ident, "a directed event needs two distinct actors; use a step event")
        arrow = ArrowDir.LeftToRight if start.column < end.column else ArrowDir.RightToLeft
        event = Event(
            id=ident,
            slot=slot,
            arrow=arrow,
            start_actor=start.id,
            start_column=start.column,
            end_actor=end.id,
            end_column=end.column,
            upper_text=top_label,
            lower_text=bottom_label,
            style_class=style_class,
        )
        return self._add_event(event, [("start actor", start.id), ("end actor", end.id)])

    def add_step_event(
        self,
        ident: str,
        style_class: str | None,
        slot: int,
        actor_id: str,
        label: str | None = None,
    ) -> Event:
        self._check_new_id(ident)
        _require_index("slot", ident, slot)
        actor = self.lookup_as(actor_id, EntityKind.Actor, ident, "actor")
        event = Event(
            id=ident,
            slot=slot,
            arrow=ArrowDir.Step,
            start_actor=actor.id,
            start_column=actor.column,
            upper_text=label,
            style_class=style_class,
        )
        return self._add_event(event, [("actor", actor.id)])

    def add_external_event(
        self,
        ident: str,
        style_class: str | None,
        slot: int,
        actor_id: str,
        label: str | None = None,
        from_external: bool = False,
    ) -> Event:
        self._check_new_id(ident)
        _require_index("slot", ident, slot)
        actor = self.lookup_as(actor_id, EntityKind.Actor, ident, "actor")
        event = Event(
            id=ident,
            slot=slot,
            arrow=ArrowDir.ExternalFrom if from_external else ArrowDir.ExternalTo,
            start_actor=actor.id,
            start_column=actor.column,
            upper_text=label,
            style_class=style_class,
        )
        return self._add_event(event, [("actor", actor.id)])

    def _add_event(self, event: Event, refs: list[tuple[str, str]]) -> Event:
        layer = self.layers.get(event.slot)
        if layer is None:
            layer = EventLayer(slot=event.slot)
        layer.admit(event)
        self.layers[event.slot] = layer
        self._register(event, refs)
        self.events.append(event)
        self.max_slot = max(self.max_slot, event.slot)
        logger.debug("event %s slot=%d %s mask=0x%x", event.id, event.slot, event.arrow.name, layer.mask)
        return event

    # ─── Notes ───────────────────────────────────────────────────────────

    def add_note(
        self,
        ident: str,
        style_class: str | None,
        index: int,
        ref_kind: NoteRefKind,
        ref_id: str | None = None,
        text: str | None = None,
    ) -> Note:
        self._check_new_id(ident)
        _require_index("index", ident, index)
        refs: list[tuple[str, str]] = []
        target_kind = ref_kind.target_kind
        if target_kind is None:
            if ref_id is not None:
                logger.warning("note %s has no reference kind; ignoring reference '%s'", ident, ref_id)
                ref_id = None
        else:
            self.lookup_as(ref_id, target_kind, ident, target_kind.name)
            refs.append((ref_kind.name, ref_id))
        note = Note(id=ident, index=index, ref_kind=ref_kind, ref_id=ref_id, text=text, style_class=style_class)
        self._register(note, refs)
        self.notes.append(note)
        self.max_note_index = max(self.max_note_index, index)
        return note

    # ─── Regions ─────────────────────────────────────────────────────────

    def add_actor_region(
        self,
        ident: str,
        style_class: str | None,
        actor_id: str,
        start_event_id: str,
        end_event_id: str,
    ) -> ActorRegion:
        self._check_new_id(ident)
        self.lookup_as(actor_id, EntityKind.Actor, ident, "actor")
        self.lookup_as(start_event_id, EntityKind.Event, ident, "start event")
        self.lookup_as(end_event_id, EntityKind.Event, ident, "end event")
        region = ActorRegion(
            id=ident,
            actor=actor_id,
            start_event=start_event_id,
            end_event=end_event_id,
            style_class=style_class,
        )
        self._register(
            region,
            [("actor", actor_id), ("start event", start_event_id), ("end event", end_event_id)],
        )
        self.actor_regions.append(region)
        return region

    def add_box_region(
        self,
        ident: str,
        style_class: str | None,
        start_actor_id: str,
        end_actor_id: str,
        start_event_id: str,
        end_event_id: str,
    ) -> BoxRegion:
        self._check_new_id(ident)
        self.lookup_as(start_actor_id, EntityKind.Actor, ident, "start actor")
        self.lookup_as(end_actor_id, EntityKind.Actor, ident, "end actor")
        self.lookup_as(start_event_id, EntityKind.Event, ident, "start event")
        self.lookup_as(end_event_id, EntityKind.Event, ident, "end event")
        region = BoxRegion(
            id=ident,
            start_actor=start_actor_id,
            end_actor=end_actor_id,
            start_event=start_event_id,
            end_event=end_event_id,
            style_class=style_class,
        )
        self._register(
            region,
            [
                ("start actor", start_actor_id),
                ("end actor", end_actor_id),
                ("start event", start_event_id),
                ("end event", end_event_id),
            ],
        )
        self.box_regions.append(region)
        return region

    # ─── Typed access ────────────────────────────────────────────────────

    def actor(self, ident: str) -> Actor:
        return self.graph.nodes[ident]["data"]

    def event(self, ident: str) -> Event:
        return self.graph.nodes[ident]["data"]


def _require_index(name: str, ident: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidAttribute(ident, f"{name} must be a non-negative integer, got {value!r}")
