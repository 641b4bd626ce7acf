"""Enumeration items, frozen catalogs and the builder that assembles them.

A catalog goes through two phases. ``CatalogBuilder`` collects items and
alias keys while the catalog module is imported; ``build()`` checks the
catalog invariants and returns a frozen ``Enumeration`` whose index can no
longer change, so concurrent readers need no locking.
"""

import inspect
import re
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Generic, Iterable, Iterator, Mapping, Optional, TypeVar

from loguru import logger

from enumerations.core.errors import CatalogDefinitionError
from enumerations.core.identifier import EnumID

_WORD_BOUNDARY = re.compile(
    r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])|(?<=[A-Za-z])(?=[0-9])"
)


def accessor_name(item_name: str) -> str:
    """Turn an item name such as ``LessThan4000`` into ``less_than_4000``."""
    return _WORD_BOUNDARY.sub("_", item_name).lower()


def split_meta_list(value: Optional[str]) -> list[str]:
    """Split a comma-separated metadata value into trimmed, non-empty tokens."""
    if not value:
        return []

    return [token.strip() for token in value.split(",") if token.strip()]


@dataclass(frozen=True, eq=False)
class EnumItem:
    """Static descriptor of a single enumeration entry.

    Subclasses project well-known metadata keys onto dedicated fields by
    declaring them with ``field(init=False, default="")`` and listing them in
    ``meta_fields``. Both views are read-only after construction.

    Attributes:
        id: Canonical identifier
        description: Human-facing description
        name: Programmer-facing stable token
        sort_order: Informational sort order
        meta: Read-only metadata mapping
    """

    id: EnumID
    description: str
    name: str
    sort_order: int
    meta: Mapping[str, str] = field(default_factory=dict)

    meta_fields: ClassVar[dict[str, str]] = {}

    def __post_init__(self):
        object.__setattr__(self, "meta", MappingProxyType(dict(self.meta or {})))
        for attribute, key in self.meta_fields.items():
            object.__setattr__(self, attribute, self.meta.get(key, ""))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={str(self.id)!r}, name={self.name!r})"


@dataclass(frozen=True, eq=False)
class StateCodedItem(EnumItem):
    """Item whose ``StateCodes`` metadata lists the jurisdictions it applies to."""

    state_codes: str = field(init=False, default="")

    meta_fields: ClassVar[dict[str, str]] = {"state_codes": "StateCodes"}

    def state_code_list(self) -> list[str]:
        return split_meta_list(self.state_codes)

    def applies_in(self, state_code: str) -> bool:
        """Return True if this item is offered in ``state_code`` (case-insensitive)."""
        return state_code.strip().upper() in (code.upper() for code in self.state_code_list())


# set on each catalog instance by Enumeration.__init__
_INSTANCE_ATTRIBUTES = frozenset({"name", "description", "items", "_index"})

ItemT = TypeVar("ItemT", bound=EnumItem)
CatalogT = TypeVar("CatalogT", bound="Enumeration")


class Enumeration(Generic[ItemT]):
    """Frozen catalog of one enumeration.

    Subclasses set ``id_type`` and annotate one attribute per item; the
    builder fills those attributes in and nothing can reassign them later::

        class EnumGender(Enumeration[GenderItem]):
            id_type = GenderID

            male: GenderItem
            female: GenderItem
    """

    id_type: ClassVar[type[EnumID]]

    def __init__(
        self,
        name: str,
        description: str,
        items: Iterable[ItemT],
        index: Mapping[str, ItemT],
        accessors: Mapping[str, ItemT],
    ):
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "description", description)
        object.__setattr__(self, "items", tuple(items))
        object.__setattr__(self, "_index", MappingProxyType(dict(index)))
        for attribute, item in accessors.items():
            object.__setattr__(self, attribute, item)

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is frozen")

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"{type(self).__name__} is frozen")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} items={len(self.items)}>"

    def __iter__(self) -> Iterator[ItemT]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, identifier: object) -> bool:
        return self.by_id(identifier) is not None

    @classmethod
    def declared_accessors(cls) -> list[str]:
        """Names of the per-item attributes annotated on this catalog class."""
        return [
            attribute
            for attribute in inspect.get_annotations(cls)
            if not attribute.startswith("_") and attribute != "id_type"
        ]

    @property
    def index(self) -> Mapping[str, ItemT]:
        """Read-only lookup index keyed by lowercased id (aliases included)."""
        return self._index

    def by_id(self, identifier: Any) -> Optional[ItemT]:
        """Retrieve an entry by an identifier, a capturing identifier or a string."""
        if identifier is None:
            return None

        if isinstance(identifier, str):
            return self.by_id_string(identifier)

        resolved = identifier.id() if callable(getattr(identifier, "id", None)) else None
        if resolved is None:
            return None

        return self.by_id_string(resolved)

    def by_id_string(self, raw: Optional[str]) -> Optional[ItemT]:
        """Retrieve an entry by the string form of its id, ignoring case."""
        if not raw:
            return None

        return self._index.get(raw.lower())

    def by_index(self, position: int) -> Optional[ItemT]:
        """Retrieve an entry by insertion position (NOT sort order)."""
        if position < 0 or position >= len(self.items):
            return None

        return self.items[position]

    def subset(
        self: CatalogT,
        name: str,
        items: Iterable[ItemT],
        description: Optional[str] = None,
    ) -> CatalogT:
        """Build a display sub-collection sharing this catalog's item instances."""
        builder = CatalogBuilder(type(self), name=name, description=description or "")
        for item in items:
            if not any(existing is item for existing in self.items):
                raise CatalogDefinitionError(
                    f"{name}: item {item.name!r} does not belong to {self.name}"
                )
            builder.add(item)

        return builder.build(bind=False)


class CatalogBuilder(Generic[ItemT]):
    """Mutable, single-threaded assembly phase of a catalog."""

    def __init__(self, catalog_type: type[Enumeration], name: str, description: str):
        self._catalog_type = catalog_type
        self._name = name
        self._description = description
        self._items: list[ItemT] = []
        self._index: dict[str, ItemT] = {}
        self._accessors: dict[str, ItemT] = {}
        self._names: set[str] = set()
        self._alias_count = 0

    def add(self, item: ItemT, accessor: Optional[str] = None) -> "CatalogBuilder[ItemT]":
        """Append an item, indexing it under its lowercased id."""
        id_type = self._catalog_type.id_type
        if not isinstance(item.id, id_type):
            raise CatalogDefinitionError(
                f"{self._name}: item {item.name!r} id must be a {id_type.__name__}"
            )

        key = str(item.id).lower()
        if not key:
            raise CatalogDefinitionError(f"{self._name}: item {item.name!r} has an empty id")
        if key in self._index:
            raise CatalogDefinitionError(f"{self._name}: duplicate enumeration ID {item.id!r}")
        if item.name in self._names:
            raise CatalogDefinitionError(f"{self._name}: duplicate item name {item.name!r}")

        accessor = accessor or accessor_name(item.name)
        if accessor in _INSTANCE_ATTRIBUTES or hasattr(self._catalog_type, accessor):
            raise CatalogDefinitionError(
                f"{self._name}: accessor {accessor!r} shadows a catalog attribute"
            )
        if accessor in self._accessors:
            raise CatalogDefinitionError(f"{self._name}: duplicate accessor {accessor!r}")

        self._items.append(item)
        self._index[key] = item
        self._names.add(item.name)
        self._accessors[accessor] = item
        return self

    def alias(self, alias: str, item: ItemT) -> "CatalogBuilder[ItemT]":
        """Register an extra decode-only key for an item already in the catalog.

        Aliases only affect decoding; encoders always emit the canonical id.
        """
        key = alias.lower()
        if not key:
            raise CatalogDefinitionError(f"{self._name}: empty alias")
        if not any(existing is item for existing in self._items):
            raise CatalogDefinitionError(
                f"{self._name}: alias {alias!r} targets an item outside the catalog"
            )

        existing = self._index.get(key)
        if existing is not None and existing is not item:
            raise CatalogDefinitionError(
                f"{self._name}: alias {alias!r} shadows item {existing.name!r}"
            )

        self._index[key] = item
        self._alias_count += 1
        return self

    def build(self, bind: bool = True) -> Any:
        """Freeze the catalog.

        Args:
            bind: Attach the catalog to its identifier type (primary catalogs only)

        Raises:
            CatalogDefinitionError: If the catalog is empty or a declared
                accessor has no item
        """
        if not self._items:
            raise CatalogDefinitionError(f"{self._name} has no items")

        if bind:
            missing = [
                attribute
                for attribute in self._catalog_type.declared_accessors()
                if attribute not in self._accessors
            ]
            if missing:
                raise CatalogDefinitionError(
                    f"{self._name}: no items for declared accessors {missing}"
                )

        catalog = self._catalog_type(
            name=self._name,
            description=self._description,
            items=self._items,
            index=self._index,
            accessors=self._accessors,
        )

        if bind:
            self._catalog_type.id_type.bind(catalog)

        logger.debug(
            f"Built catalog {self._name} | items={len(self._items)} | "
            f"aliases={self._alias_count}"
        )
        return catalog


class AlternativeKeyIndex(Generic[ItemT]):
    """Lazily built lookup from alternative keys to identifiers.

    Items carry their alternative keys as comma-separated metadata. Canonical
    ids are indexed too, so any accepted form resolves. Keys are trimmed and
    lowercased on both sides.
    """

    def __init__(self, catalog: Enumeration, attribute: str = "alternative_keys"):
        self._catalog = catalog
        self._attribute = attribute
        self._lock = threading.Lock()
        self._index: Optional[Mapping[str, EnumID]] = None

    def _build(self) -> Mapping[str, EnumID]:
        with self._lock:
            if self._index is None:
                index: dict[str, EnumID] = {}
                for item in self._catalog:
                    index[str(item.id).lower()] = item.id
                    for token in split_meta_list(getattr(item, self._attribute, "")):
                        index[token.lower()] = item.id
                self._index = MappingProxyType(index)

        return self._index

    def lookup(self, key: Optional[str]) -> Optional[EnumID]:
        if key is None or not key.strip():
            return None

        index = self._index if self._index is not None else self._build()
        rtn = index.get(key.strip().lower())
        return rtn.clone() if rtn is not None else None
