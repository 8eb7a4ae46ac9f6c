from functools import lru_cache

from aws_lambda_powertools import Logger


@lru_cache(maxsize=None)
def get_logger(service_name: str) -> Logger:
    """Structured JSON logger for one bounded context

    Modules of the same context share one instance. Level comes from
    POWERTOOLS_LOG_LEVEL.
    """
    return Logger(service=service_name)
