"""
Cart commands and the pure reducer that applies them
"""
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from models.menu import MenuItem
from models.cart import CartLine
from .errors import ItemUnavailableError


@dataclass(frozen=True)
class CartState:
    """Immutable cart contents in insertion order"""
    lines: Tuple[CartLine, ...] = ()

    def find_line(self, item_id: str) -> Optional[CartLine]:
        for line in self.lines:
            if line.menu_item.id == item_id:
                return line
        return None


@dataclass(frozen=True)
class AddItem:
    menu_item: MenuItem
    quantity: int = 1
    special_instructions: Optional[str] = None


@dataclass(frozen=True)
class RemoveItem:
    item_id: str


@dataclass(frozen=True)
class SetQuantity:
    item_id: str
    quantity: int


@dataclass(frozen=True)
class SetInstructions:
    item_id: str
    instructions: Optional[str]


@dataclass(frozen=True)
class ClearCart:
    pass


CartCommand = Union[AddItem, RemoveItem, SetQuantity, SetInstructions, ClearCart]


def _without(state: CartState, item_id: str) -> CartState:
    return CartState(tuple(line for line in state.lines if line.menu_item.id != item_id))


def _replace_line(state: CartState, item_id: str, **changes) -> CartState:
    return CartState(tuple(
        replace(line, **changes) if line.menu_item.id == item_id else line
        for line in state.lines
    ))


def reduce_cart(state: CartState, command: CartCommand) -> CartState:
    """Return the cart state after applying ``command``.

    Commands that target a missing line leave the state untouched. Adding an
    unavailable item raises ItemUnavailableError.
    """
    if isinstance(command, AddItem):
        item = command.menu_item
        if not item.is_available:
            raise ItemUnavailableError(f"{item.name} is not available")
        quantity = max(command.quantity, 1)
        existing = state.find_line(item.id)
        if existing:
            # a repeat add keeps the first instructions
            return _replace_line(state, item.id, quantity=existing.quantity + quantity)
        new_line = CartLine(item, quantity, command.special_instructions)
        return CartState(state.lines + (new_line,))

    if isinstance(command, RemoveItem):
        return _without(state, command.item_id)

    if isinstance(command, SetQuantity):
        if command.quantity <= 0:
            return _without(state, command.item_id)
        return _replace_line(state, command.item_id, quantity=command.quantity)

    if isinstance(command, SetInstructions):
        return _replace_line(state, command.item_id, special_instructions=command.instructions)

    if isinstance(command, ClearCart):
        return CartState()

    raise TypeError(f"Unsupported cart command: {command!r}")
