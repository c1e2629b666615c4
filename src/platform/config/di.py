"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.driven_adapter.repo.booking_query_repo_impl import BookingQueryRepoImpl
from src.service.booking.driven_adapter.repo.session_query_repo_impl import SessionQueryRepoImpl
from src.service.booking.driven_adapter.repo.ticket_query_repo_impl import TicketQueryRepoImpl
from src.service.booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager with settings from config_service)
    database = providers.Singleton(Database)

    # Repositories (stateless - use session_factory per-request)
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )
    ticket_query_repo = providers.Singleton(
        TicketQueryRepoImpl, session_factory=database.provided.session
    )
    session_query_repo = providers.Singleton(
        SessionQueryRepoImpl, session_factory=database.provided.session
    )

    # One Unit of Work per use case invocation
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=database.provided.session
    )

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth)

    # Prometheus collectors register once per process
    booking_metrics = providers.Object(metrics)


container = Container()


def setup() -> None:
    container.config_service()
    container.database()


def cleanup() -> None:
    container.reset_singletons()
