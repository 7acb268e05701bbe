"""Logging setup for agents embedding node_diag.

The helpers only log through module loggers under "node_diag"; the host
process calls setup_logging() once at startup to route them somewhere.
"""
import logging
import os


def setup_logging() -> None:
    """Configure the root logger from LOG_LEVEL.

    NODE_DIAG_LOG_LEVEL, when set, overrides the level of the "node_diag"
    logger only, e.g. DEBUG start-time traces on an otherwise quiet agent.
    """
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(handler)
    root.setLevel(level)

    pkg_level_name = os.environ.get("NODE_DIAG_LOG_LEVEL", "").upper()
    if pkg_level_name:
        pkg_level = getattr(logging, pkg_level_name, level)
        logging.getLogger("node_diag").setLevel(pkg_level)


__all__ = ["setup_logging"]
