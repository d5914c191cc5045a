# gunicorn.conf.py
import os
import logging
import sys

# Configure logging to stdout
accesslog = '-'
errorlog = '-'
loglevel = 'info'

# Get PORT from environment or use default
port = os.getenv('PORT', '3000')
bind = f"0.0.0.0:{port}"

# The JSON store serializes writes with an in-process lock, so a single
# worker process must own requests.json. Concurrency comes from threads.
workers = 1
threads = 4

# Log configuration on startup
def on_starting(server):
    logger = logging.getLogger('gunicorn.error')
    logger.setLevel(logging.INFO)
    logger.addHandler(logging.StreamHandler(sys.stdout))
    logger.info(f"Starting gunicorn with {workers} worker and {threads} threads on port {port}")

timeout = 30
keepalive = 5
worker_class = "gthread"

# Process naming
proc_name = "daily_verse"
default_proc_name = "daily_verse"

# Graceful server restart
graceful_timeout = 30  # Give workers 30 seconds to finish serving requests
