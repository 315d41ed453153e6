"""Entry point for the Kasir API.

Starts the FastAPI application under uvicorn on ``HOST:PORT``
(``0.0.0.0:8080`` by default).  Configuration such as ``PORT``,
``DB_CONN`` and ``STORAGE_BACKEND`` may be placed in a ``.env`` file in
the working directory.  See ``.env.example`` for the supported
variables.

Usage:
    python run.py
"""
from kasir_api.app.main import run


if __name__ == "__main__":
    try:
        run()
    except KeyboardInterrupt:
        pass
