"""Logging setup for the command-line front end."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(*, verbose: bool = False) -> None:
    """Send log records to stderr, keeping stdout for command output.

    Calling this again only adjusts the level.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    if getattr(root, "_ue_angelscript_configured", False):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
    )
    root.addHandler(handler)
    root._ue_angelscript_configured = True  # type: ignore[attr-defined]
