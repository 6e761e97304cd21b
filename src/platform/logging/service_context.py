"""
Service context extraction for log traceability.

Tags every log line with the service name, deploy environment and process id.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'movie-ticket')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    instance_id = os.getenv('HOSTNAME') or str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance_id}'
