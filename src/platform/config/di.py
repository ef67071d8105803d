"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.database.database_initializer import DatabaseInitializer
from src.platform.database.orm_db_setting import Database
from src.service.train_booking.driven_adapter.repo.train_schedule_command_repo_impl import (
    TrainScheduleCommandRepoImpl,
)
from src.service.train_booking.driven_adapter.repo.train_schedule_query_repo_impl import (
    TrainScheduleQueryRepoImpl,
)
from src.service.train_booking.driven_adapter.repo.user_command_repo_impl import (
    UserCommandRepoImpl,
)
from src.service.train_booking.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.train_booking.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.train_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Database (engine is created lazily on first use)
    database = providers.Singleton(Database)

    # Creates the schema once per process; invoked from the app lifespan
    database_initializer = providers.Singleton(DatabaseInitializer, database=database)

    # Security
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    jwt_auth = providers.Singleton(JwtAuth)

    # Repositories (stateless - use session_factory per-request)
    user_command_repo = providers.Singleton(
        UserCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl,
        session_factory=database.provided.session,
        password_hasher=password_hasher,
    )
    train_schedule_command_repo = providers.Singleton(
        TrainScheduleCommandRepoImpl, session_factory=database.provided.session
    )
    train_schedule_query_repo = providers.Singleton(
        TrainScheduleQueryRepoImpl, session_factory=database.provided.session
    )


container = Container()
