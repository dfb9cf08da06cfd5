"""run_dev.py — Start the Event Service API in development mode.

Equivalent CLI command (run from backend/):
    uvicorn api.main:app --reload --host 0.0.0.0 --port 8000

The --reload flag watches for file changes and restarts automatically.
Host and port can be overridden with the HOST / PORT environment variables.
"""

import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "api.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=True,
        log_level="debug",
    )
