from __future__ import annotations

import logging


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    logging.getLogger("syw_client").setLevel(level)
    # httpx/httpcore are chatty at INFO; follow the client's verbosity
    logging.getLogger("httpx").setLevel(level)
    logging.getLogger("httpcore").setLevel(level)
