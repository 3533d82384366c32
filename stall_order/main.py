"""Entry point for the stall-order Textual app."""

from __future__ import annotations

from stall_order.order_app import StallOrderApp


def main() -> None:
    StallOrderApp().run()


if __name__ == "__main__":
    main()
