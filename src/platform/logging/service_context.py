"""
Service context extraction for logging.

Identifies the running process so interleaved log lines from several
drivers (demo script, test workers) can be told apart.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'cinema-ticketing')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Use PYTEST_XDIST_WORKER when running under xdist, PID otherwise
    worker_id = os.getenv('PYTEST_XDIST_WORKER') or str(os.getpid())

    return f'{service_name}@{deploy_env}:{worker_id}'
