"""Example suites for an in-memory inventory.

Run the automatic suites:

    suite-harness run --module inventory_suites

Run the manual stress suite on demand:

    suite-harness run --module inventory_suites --suite inventory-stress
"""

from typing import Dict

from suite_harness import Suite, check, define_suite

stock: Dict[str, int] = {}


def load_catalog() -> None:
    stock.update({"widget": 10, "gadget": 0})


def restock() -> None:
    stock["widget"] = 10


def clear_catalog() -> None:
    stock.clear()


inventory = define_suite(
    "inventory",
    before_all=load_catalog,
    before=restock,
    after_all=clear_catalog,
)


@inventory.test
def reserve_reduces_stock() -> None:
    stock["widget"] -= 3
    check(stock["widget"] == 7)


@inventory.test
def out_of_stock_items_are_listed() -> None:
    check(stock.get("gadget") == 0, "gadget should be out of stock")
    check("sprocket" not in stock)


class StressSuite(Suite):
    """Hammers the catalog; too slow for unattended runs."""

    def __init__(self) -> None:
        super().__init__(False, "inventory-stress")

    def before_all(self) -> None:
        load_catalog()

    def run(self) -> None:
        for round_number in range(3):
            self.run_test(f"reserve-round-{round_number}", self.reserve_everything)

    def before(self) -> None:
        restock()

    def reserve_everything(self) -> None:
        for _ in range(10):
            stock["widget"] -= 1
        check(stock["widget"] == 0)

    def after_all(self) -> None:
        clear_catalog()


StressSuite()
