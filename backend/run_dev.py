"""run_dev.py — Start the Event Manager API in development mode.

Equivalent CLI command (run from backend/):
    uvicorn api.main:app --reload --host 0.0.0.0 --port 5000

PORT from the environment (or .env) overrides the port.
"""

import uvicorn

from core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=True,
        log_level="debug",
    )
