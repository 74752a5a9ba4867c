"""
Service context extraction for logging.

Identifies the running process in log lines so output from several local
instances can be told apart.
"""

import os
from functools import lru_cache
import socket

from src.platform.config.core_setting import settings


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = settings.SERVICE_NAME
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    host = socket.gethostname().split('.')[0] or 'localhost'

    return f'{service_name}@{deploy_env}:{host}:{os.getpid()}'
