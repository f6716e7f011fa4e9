"""
Acme Dashboard - Gunicorn WSGI Server Configuration

Run with: gunicorn acme.wsgi -c gunicorn.conf.py
"""

import multiprocessing
import os
import logging

IS_PRODUCTION = os.getenv("PRODUCTION") == "true"

logging.basicConfig(
    level=logging.INFO if IS_PRODUCTION else logging.DEBUG,
    format='[%(asctime)s] %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# =============================================================================
# SERVER BINDING
# =============================================================================

PORT = int(os.getenv("PORT", 5000))
bind = [f"0.0.0.0:{PORT}"]

# =============================================================================
# WORKERS
# =============================================================================

def calculate_workers():
    cpu_count = multiprocessing.cpu_count()
    return min((cpu_count * 2) + 1, 9)


workers = int(os.getenv("WEB_CONCURRENCY", calculate_workers()))
# Dashboard pages fan reads out to a thread pool; gthread keeps request threads cheap.
worker_class = "gthread"
threads = int(os.getenv("GUNICORN_THREADS", 4))

max_requests = int(os.getenv("GUNICORN_MAX_REQUESTS", 1000))
max_requests_jitter = int(os.getenv("GUNICORN_MAX_REQUESTS_JITTER", 100))

timeout = 60
graceful_timeout = int(os.getenv("GUNICORN_GRACEFUL_TIMEOUT", 10))
keepalive = 5

limit_request_line = 8190
limit_request_fields = 100
limit_request_field_size = 8190

preload_app = True

forwarded_allow_ips = os.getenv("FORWARDED_ALLOW_IPS", "*")
if IS_PRODUCTION:
    secure_scheme_headers = {"X-FORWARDED-PROTO": "https"}

# =============================================================================
# LOGGING
# =============================================================================

accesslog = "-"
errorlog = "-"
loglevel = "info" if IS_PRODUCTION else "debug"
capture_output = True

access_log_format = (
    '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s '
    '"%(f)s" "%(a)s" response_time=%(D)s_us worker_id=%(p)s'
)

proc_name = "acme-dashboard"


def when_ready(server):
    logger.info(f"Gunicorn ready at {server.address} with {workers} workers")


def post_fork(server, worker):
    """Open the database connection before the first request hits the worker."""
    import django
    django.setup()
    from django.db import connection
    from django.db.utils import OperationalError

    try:
        connection.ensure_connection()
    except OperationalError as e:
        logger.warning(f"Worker {worker.pid}: Failed to pre-warm DB connection: {e}")
    else:
        logger.info(f"Worker {worker.pid}: Database connection pre-warmed")
