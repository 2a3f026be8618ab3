from __future__ import annotations
import logging
from typing import Union


def configure_logging(level: Union[str, int] = logging.WARNING) -> logging.Logger:
    """Configure root logging for the application.

    Accepts a level name (``"INFO"``) or number. Unknown names fall back
    to WARNING. Existing root handlers are replaced so repeated calls
    (tests, re-configuration) do not stack handlers.
    """
    if isinstance(level, str):
        numeric = getattr(logging, level.upper(), None)
        level = numeric if isinstance(numeric, int) else logging.WARNING

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s [%(name)s]: %(message)s')
    logging.log(100, f'[fakestore]: Log level set to: {logging.getLevelName(level)}')

    return logging.getLogger(__name__)
