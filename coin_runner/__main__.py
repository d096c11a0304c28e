from __future__ import annotations
import logging

from .app import App


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    App().run()


if __name__ == "__main__":
    main()
