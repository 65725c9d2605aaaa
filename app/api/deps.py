"""Dependency injection (ledger service)"""

from functools import lru_cache

from app.services.ledger_service import LedgerService


@lru_cache()
def get_ledger_service() -> LedgerService:
    """
    Get the process-wide ledger service.

    State lives in memory only, so every request must share one instance.
    Tests override this dependency with a fresh service.

    Returns:
        LedgerService singleton
    """
    return LedgerService()
