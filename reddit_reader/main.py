from __future__ import annotations

import logging

from .config import load_config
from .errors import AuthenticationError, ConnectivityError
from .menu import Console
from .navigation import Navigator
from .session import Session


logger = logging.getLogger(__name__)


def main() -> int:
    console = Console()

    try:
        cfg = load_config()
    except RuntimeError as exc:
        console.write(str(exc))
        return 1

    # Logs go to stderr; stdout belongs to the menus.
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        try:
            session = Session.connect(cfg)
        except AuthenticationError:
            console.write("Please check your credentials")
            return 1
        except ConnectivityError:
            console.write("Please check your internet connection.")
            return 1

        console.write(f"Hello, {session.current_user_name}.")
        Navigator(session, console).run()
    except KeyboardInterrupt:
        logger.info("Interrupted; exiting")
        console.write()
        console.write("Goodbye.")

    logger.info("Shutdown complete.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
