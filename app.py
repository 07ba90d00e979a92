import os

from stats_browser.logging_config import configure_logging
from stats_browser.server import find_free_port
from stats_browser.ui.dash_app import create_dash_app

configure_logging()

app = create_dash_app()
server = app.server


if __name__ == "__main__":
    preferred_port = int(os.getenv("PORT", "8050"))
    port = find_free_port(preferred_port)
    debug = os.getenv("DEBUG", "0") == "1"

    if port != preferred_port:
        print(f"Port {preferred_port} is busy, serving the calculator on {port}")

    app.run(host="0.0.0.0", port=port, debug=debug)
