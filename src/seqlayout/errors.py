"""Errors raised while building a diagram model or arranging it.

Every error derives from ``LayoutError`` (itself a ``ValueError``) and keeps
the offending identifiers in ``ids`` for diagnostics.
"""

from __future__ import annotations


class LayoutError(ValueError):
    """Base class for model-construction and arrangement errors."""

    def __init__(self, message: str, *ids: str) -> None:
        super().__init__(message)
        self.ids: tuple[str, ...] = ids


class DuplicateIdentifier(LayoutError):
    def __init__(self, ident: str) -> None:
        super().__init__(f"object id '{ident}' already exists; ids must be unique", ident)


class UnknownReference(LayoutError):
    def __init__(self, referrer: str, ident: str | None, role: str) -> None:
        if ident is None:
            message = f"'{referrer}' requires a {role} reference"
            super().__init__(message, referrer)
        else:
            message = f"'{referrer}' references unknown {role} '{ident}'"
            super().__init__(message, referrer, ident)


class TypeMismatch(LayoutError):
    def __init__(self, referrer: str, ident: str, expected: object, actual: object) -> None:
        super().__init__(
            f"'{referrer}' expects '{ident}' to be {_kind_name(expected)}, found {_kind_name(actual)}",
            referrer,
            ident,
        )
        self.expected = expected
        self.actual = actual


class IncompatibleLayerMix(LayoutError):
    def __init__(self, ident: str, slot: int, layer_kind: object, event_kind: object) -> None:
        super().__init__(
            f"event '{ident}' ({_kind_name(event_kind)}) cannot share slot {slot} "
            f"with {_kind_name(layer_kind)} events",
            ident,
        )
        self.slot = slot


class EventCollision(LayoutError):
    def __init__(self, ident: str, slot: int, others: list[str]) -> None:
        super().__init__(
            f"event '{ident}' overlaps {', '.join(repr(o) for o in others)} in slot {slot}",
            ident,
            *others,
        )
        self.slot = slot


class InvalidAttribute(LayoutError):
    def __init__(self, ident: str, reason: str) -> None:
        super().__init__(f"'{ident}': {reason}", ident)


class PageTooSmall(LayoutError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidRegionOrder(LayoutError):
    def __init__(self, ident: str, reason: str) -> None:
        super().__init__(f"region '{ident}': {reason}", ident)


class ActorColumnError(LayoutError):
    def __init__(self, message: str, *ids: str) -> None:
        super().__init__(message, *ids)


class UnsupportedReference(LayoutError):
    def __init__(self, ident: str, kind: object) -> None:
        super().__init__(f"note '{ident}': reference kind {_kind_name(kind)} cannot be resolved", ident)


def _kind_name(kind: object) -> str:
    return getattr(kind, "name", str(kind))
