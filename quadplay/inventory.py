"""An inventory of bought items and labelled slots they can be fitted into."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import Optional, Union

SLOT_LABELS = (
    "Left Mouse Button",
    "Right Mouse Button",
    "Middle Mouse Button",
    "Space",
    '"1"',
    '"2"',
    '"3"',
)


@dataclass
class Slot:
    """A labelled slot holding at most one item."""

    id: int
    label: str
    item: Optional[str] = None


@dataclass(frozen=True)
class Unfit:
    """Remove the item from a slot."""

    target_slot: int


@dataclass(frozen=True)
class Fit:
    """Put an item from the inventory into a slot."""

    target_slot: int
    item: str


@dataclass(frozen=True)
class Refit:
    """Move an item from one slot to another."""

    target_slot: int
    origin_slot: int


FittingCommand = Union[Unfit, Fit, Refit]


class Inventory:
    """Bought items plus the fixed set of slots."""

    def __init__(self) -> None:
        ids = count(1)
        self.items: list[str] = []
        self.slots: list[Slot] = [Slot(next(ids), label) for label in SLOT_LABELS]

    def buy(self, index: int) -> str:
        """Add shop item ``index`` to the inventory and return its name."""
        item = f"Item {index}"
        self.items.append(item)
        return item

    def slot(self, slot_id: int) -> Optional[Slot]:
        return next((slot for slot in self.slots if slot.id == slot_id), None)

    def set_item(self, slot_id: int, item: Optional[str]) -> None:
        """Set the item of a slot; unknown slot ids are ignored."""
        slot = self.slot(slot_id)
        if slot is not None:
            slot.item = item

    def apply(self, command: FittingCommand) -> None:
        """Carry out a fitting command."""
        match command:
            case Unfit(target_slot=target):
                self.set_item(target, None)
            case Fit(target_slot=target, item=item):
                self.set_item(target, item)
            case Refit(target_slot=target, origin_slot=origin):
                origin_slot = self.slot(origin)
                origin_item = origin_slot.item if origin_slot is not None else None
                self.set_item(target, origin_item)
                self.set_item(origin, None)
            case _:
                raise TypeError(f"not a fitting command: {command!r}")