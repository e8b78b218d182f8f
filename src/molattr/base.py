"""Base class for tagged attributes attached to atoms, bonds and structures."""

from __future__ import annotations

from .kinds import DataKind


class TaggedAttribute:
    """A named payload distinguished by a fixed :class:`DataKind`.

    The kind is chosen by the concrete subclass and never changes. The name is
    a free-form label (e.g. ``"UnitCell"``, ``"Author"``) that defaults to the
    kind's human-readable description.

    Copies are made through :meth:`clone`, which always produces an instance of
    the most-derived type. Subclasses that own mutable containers override
    :meth:`_clone_payload` to duplicate them.

    Attributes:
        name (str): Label used for lookup by name on a host structure.
        kind (DataKind): Read-only discriminant of the stored data.

    """

    kind_tag: DataKind = DataKind.UNDEFINED

    def __init__(self, name: str | None = None, kind: DataKind | None = None) -> None:
        self._kind = DataKind(kind) if kind is not None else self.kind_tag
        self._name = name if name is not None else self._kind.label

    @property
    def kind(self) -> DataKind:
        return self._kind

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = str(value)

    def clone(self) -> TaggedAttribute:
        """Return an independent copy of this attribute.

        Name and kind are copied; the payload is duplicated by the subclass.
        Back-references into a host structure (atoms, bonds) are shared, never
        duplicated.
        """
        duplicate = self.__class__.__new__(self.__class__)
        duplicate.__dict__.update(self.__dict__)
        duplicate._clone_payload()
        return duplicate

    def assign(self, other: TaggedAttribute) -> TaggedAttribute:
        """Overwrite this attribute with a copy of ``other`` and return ``self``.

        Raises:
            TypeError: If ``other`` is not of the same concrete type.

        """
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot assign {type(other).__name__} to {type(self).__name__}"
            )
        if other is not self:
            self.__dict__.update(other.clone().__dict__)
        return self

    def _clone_payload(self) -> None:
        """Replace shared mutable payload containers on a fresh copy."""

    def __copy__(self) -> TaggedAttribute:
        return self.clone()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, kind={self._kind.name})"
