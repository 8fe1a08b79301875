"""
Service context extraction for logging.

Identifies which service instance emitted a log line so that logs from
several replicas can be told apart once collected.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'ticket-service')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    instance_id = os.getenv('HOSTNAME', '') or str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance_id}'
