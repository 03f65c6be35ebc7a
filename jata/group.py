"""Grouping of related typed properties."""

from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from .property import PathLike, TypedProperty


class PropertyGroup:
    """An ordered collection of properties under a shared namespace.

    The group only holds its members. It does not derive member paths from
    its location, look members up by name, or persist anything itself;
    each property keeps managing its own file.

    Example:
        group = PropertyGroup("settings/")
        group.add(TypedProperty.new_int("retries", "settings/retries", 3))
        group.add(TypedProperty.new_bool("verbose", "settings/verbose", False))

        for prop in group:
            print(prop.name, prop.get())
    """

    def __init__(
        self,
        location: PathLike,
        properties: Optional[Iterable[TypedProperty]] = None,
    ):
        self.location = Path(location)
        self.properties: List[TypedProperty] = list(properties or [])

    def add(self, prop: TypedProperty) -> None:
        """Append a property; duplicate names are allowed."""
        self.properties.append(prop)

    def extend(self, props: Iterable[TypedProperty]) -> None:
        self.properties.extend(props)

    def names(self) -> List[str]:
        """Member names in insertion order."""
        return [prop.name for prop in self.properties]

    def __iter__(self) -> Iterator[TypedProperty]:
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self.properties)

    def __getitem__(self, index: int) -> TypedProperty:
        return self.properties[index]

    def __repr__(self) -> str:
        return f"PropertyGroup(location='{self.location}', properties={len(self)})"
