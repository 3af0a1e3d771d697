"""Synchronous command processing for the HTTP routes.

A command handler only registers its writes with the unit of work; the store
is touched when the unit of work commits, after the handler has returned. Store
failures at that point are reported here as ``RemoteError``, while domain
errors (validation, missing records, invalid operations) pass through as-is.
"""

from protean.exceptions import DatabaseError, ProteanException, TransactionError
from protean.utils.globals import current_domain

from shared.exceptions import RemoteError
from shared.utils.logging import get_logger

logger = get_logger(__name__)


def process_write(command, operation: str):
    """Process ``command`` synchronously and return the handler's result."""
    try:
        return current_domain.process(command, asynchronous=False)
    except RemoteError:
        raise
    except (DatabaseError, TransactionError) as exc:
        logger.error("Write rejected by store", operation=operation, error=str(exc))
        raise RemoteError(operation, str(exc)) from exc
    except ProteanException:
        raise
    except Exception as exc:
        logger.error("Write rejected by store", operation=operation, error=str(exc))
        raise RemoteError(operation, str(exc)) from exc
