"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from account_server.core.config import Settings, get_settings
from account_server.infrastructure.database.session import get_engine, get_session_factory
from account_server.modules.transactions import TransactionService


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings

    def init_infrastructure(self) -> None:
        """Ensure infrastructure singletons (database engine, etc.) are initialised."""
        get_engine()

    def transaction_service(self) -> TransactionService:
        return TransactionService.with_session_factory(
            get_session_factory(),
            cancel_window_years=self.settings.cancel_window_years,
        )


@lru_cache()
def get_container() -> ApplicationContainer:
    container = ApplicationContainer(settings=get_settings())
    container.init_infrastructure()
    return container


__all__ = ["ApplicationContainer", "get_container"]
