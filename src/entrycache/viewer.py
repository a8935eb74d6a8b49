"""Hand cached files to an external viewer."""

from __future__ import annotations

import logging
import webbrowser
from pathlib import Path

from entrycache.errors.exceptions import ViewerError

logger = logging.getLogger(__name__)


def open_in_viewer(path: Path, viewer: str | None = None) -> None:
    """Open a cached file in a browser.

    ``viewer`` is a ``webbrowser`` browser name; None uses the system default.
    The viewer reads the file asynchronously, so the owning cache must stay
    open until the user is done with it.
    """
    path = Path(path).absolute()
    try:
        browser = webbrowser.get(viewer)
    except webbrowser.Error as e:
        raise ViewerError(f"No usable viewer '{viewer}': {e}", path=path, viewer=viewer) from e

    logger.info("Opening %s", path)
    if not browser.open(path.as_uri()):
        raise ViewerError(f"Viewer refused to open {path}", path=path, viewer=viewer)
