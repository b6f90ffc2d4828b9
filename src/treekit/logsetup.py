"""
Logging set-up for the treekit package logger.

Modules log through ``logging.getLogger(__name__)``; nothing is emitted
until an application configures handlers. configure_logging is a
convenience that applies the ``logging`` section of Settings.
"""

from __future__ import annotations

import logging as _logging

import treekit.config as config_module

PACKAGE_LOGGER = "treekit"

# Marks the handler installed here so repeated calls replace it
_HANDLER_ATTR = "_treekit_handler"


def configure_logging(
    settings: config_module.Settings | None = None,
) -> _logging.Logger:
    """
    Apply logging settings to the treekit logger.

    Sets the level and installs one stream handler using the configured
    format. Calling it again replaces that handler instead of adding a
    second one.

    Args:
        settings: Settings to read; loaded from the environment if None.

    Returns:
        The configured package logger.
    """
    if settings is None:
        settings = config_module.Settings()

    logger = _logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(settings.logging.level)

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)

    handler = _logging.StreamHandler()
    handler.setFormatter(_logging.Formatter(settings.logging.format))
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)

    return logger
