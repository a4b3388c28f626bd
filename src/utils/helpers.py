import logging

from typing_extensions import NoReturn

from src.core.exceptions import StorageError


def handle_service_error(error: Exception, service_name: str, operation: str) -> NoReturn:
    logger = logging.getLogger(service_name)
    logger.error(f"Error in {service_name} - {operation}: {str(error)}")

    if isinstance(error, StorageError):
        raise error

    raise StorageError(message=str(error), operation=operation) from error
