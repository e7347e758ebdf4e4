# gunicorn.conf.py — Production server configuration.
#
# Run from backend/ with:
#   NODE_ENV=production gunicorn api.main:app -c gunicorn.conf.py

import os

# Each worker opens its own MongoClient in the app lifespan
workers = int(os.environ.get("WEB_CONCURRENCY", "4"))
worker_class = "uvicorn.workers.UvicornWorker"

# Bind
bind = f"0.0.0.0:{os.environ.get('PORT', '5000')}"

# Logging — stdout/stderr for the process manager; app logs are JSON (core/logging.py)
accesslog = "-"
errorlog  = "-"
loglevel  = "info"

# Timeouts
timeout          = 60    # seconds before a worker is killed and restarted
keepalive        = 5     # seconds to wait for the next request on a keep-alive connection
graceful_timeout = 30    # seconds to finish in-flight requests on SIGTERM
