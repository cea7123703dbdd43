import logging
from contextlib import redirect_stdout
from io import StringIO

import webview

from glyph_editor.backend.server import server

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    stream = StringIO()
    with redirect_stdout(stream):
        window = webview.create_window(  # type: ignore
            "Glyph Editor 5x8",
            server,
            width=900,
            height=760,
        )

        def _on_closing():
            logger.info("Window is closing...")
            try:
                for open_window in webview.windows:
                    open_window.destroy()
            except Exception as e:
                logger.error(f"Error while closing windows: {e}")

        if window:
            window.events.closed += _on_closing
        webview.start(gui="qt")


if __name__ == "__main__":
    main()
