"""Plain functions referenced from suites.yaml."""

from suite_harness import check

stock = {}


def load_catalog() -> None:
    stock.update({"widget": 10})


def restock() -> None:
    stock["widget"] = 10


def clear_catalog() -> None:
    stock.clear()


def reserve_reduces_stock() -> None:
    stock["widget"] -= 3
    check(stock["widget"] == 7)
