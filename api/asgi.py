"""
ASGI entrypoint: `uvicorn asgi:app`.

Settings are loaded from the environment at import time, so a missing
required variable stops the server before it accepts connections.
"""

from main import create_app

app = create_app()
