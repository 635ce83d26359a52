"""Build an order document, save it, and read it back."""

import sys
from pathlib import Path

import jason
from jason import Document


def main(path: Path) -> None:
    jason.configure_logging()

    order = Document().set(
        {
            "order.id": "1234567890",
            "order.items": [
                {"sku": "12345", "quantity": 3},
                {"sku": "67890", "quantity": 1},
            ],
            "customer.name": "Adeel Solangi",
        }
    )
    order.set("order.items.1.quantity", 2)
    order.to_file(path, overwrite=True, pretty=True)

    loaded = Document.from_file(path)
    jason.get_logger().info(
        "order %s for %s has %d items",
        loaded.get("order.id"),
        loaded.get("customer.name"),
        len(loaded.get("order.items", [])),
    )


if __name__ == "__main__":
    main(Path(sys.argv[1] if len(sys.argv) > 1 else "order.json"))
