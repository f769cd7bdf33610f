#!/usr/bin/env python3
"""symenum Order Example.

This example demonstrates the basic usage of symenum:
- Scalar enum field (state) stored as an integer code
- Array enum field (tags) stored as a list of codes
- Predicates, mutators and scopes generated per value
- Hooking persistence and queries into a Model subclass

Usage:
    uv run python examples/order_example.py
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from symenum import ConfigurationError, Model, ValidationError, symbolic_enum

# =============================================================================
# Model Definition
# =============================================================================


@symbolic_enum({"tags": {"gift": 1, "fragile": 2, "express": 3}, "array": True, "disable_scopes": True})
@symbolic_enum("state", {"pending": 1, "paid": 2, "shipped": 3, "cancelled": 9})
class Order(Model):
    """Order entity.

    ``save()`` keeps a copy of the raw row in ``Order.table`` and
    ``where()`` filters that table, standing in for a real database.
    """

    table: ClassVar[dict[int, dict[str, Any]]] = {}

    def __init__(self, id: int, **attributes: Any) -> None:
        super().__init__(id=id, **attributes)

    def save(self) -> bool:
        self.table[self.read_attribute("id")] = dict(self._attributes)
        return True

    @classmethod
    def where(cls, **conditions: Any) -> list[dict[str, Any]]:
        return [row for row in cls.table.values() if all(row.get(k) == v for k, v in conditions.items())]


# =============================================================================
# Walkthrough
# =============================================================================


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    print("Order.states =", dict(Order.states))
    print("Order.tags   =", dict(Order.tags))

    first = Order(1, state="pending", tags=["gift", "fragile"])
    first.save()
    second = Order(2, state="paid")
    second.save()

    print("first.state =", first.state, "| raw =", first.read_attribute("state"))
    print("first.tags  =", first.tags, "| raw =", first.read_attribute("tags"))
    print("first.is_pending() =", first.is_pending())

    first.set_shipped()
    print("after set_shipped():", first.state, first.is_shipped())

    print("Order.shipped() =", Order.shipped())
    print("Order.paid()    =", Order.paid())

    try:
        first.state = "lost"
    except ValidationError as exc:
        print("ValidationError:", exc)

    try:
        first.tags = "gift"
    except ValidationError as exc:
        print("ValidationError:", exc)

    try:

        @symbolic_enum("priority", {"low": 1, "high": 1})
        class Ticket(Model):
            pass

    except ConfigurationError as exc:
        print("ConfigurationError:", exc)


if __name__ == "__main__":
    main()
