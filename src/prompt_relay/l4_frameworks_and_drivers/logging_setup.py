"""Logging setup for the ``prelay`` logger hierarchy."""

from __future__ import annotations

import logging
from pathlib import Path

from prompt_relay.l4_frameworks_and_drivers.infra_config import LoggingConfig

_HANDLER_NAME = 'prelay'


def setup_logging(config: LoggingConfig) -> None:
    """Attach one handler (file or stderr) to the ``prelay`` logger. Safe to call twice."""
    root = logging.getLogger('prelay')
    root.setLevel(config.level.upper())
    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler: logging.Handler
    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding='utf-8')
    else:
        handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
    root.addHandler(handler)
    root.debug('Logging started → %s', config.file or 'stderr')
