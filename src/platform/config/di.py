"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.movie_ticket.driven_adapter.notification.logging_email_sender_impl import (
    LoggingEmailSenderImpl,
)
from src.service.movie_ticket.driven_adapter.notification.purchase_notification_dispatcher_impl import (
    PurchaseNotificationDispatcherImpl,
)
from src.service.movie_ticket.driven_adapter.notification.smtp_email_sender_impl import (
    SmtpEmailSenderImpl,
)
from src.service.movie_ticket.driven_adapter.repo.customer_query_repo_impl import (
    CustomerQueryRepoImpl,
)
from src.service.movie_ticket.driven_adapter.repo.movie_query_repo_impl import MovieQueryRepoImpl
from src.service.movie_ticket.driven_adapter.repo.ticket_purchase_query_repo_impl import (
    TicketPurchaseQueryRepoImpl,
)
from src.service.movie_ticket.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.movie_ticket.driven_adapter.storage.s3_image_storage_impl import (
    S3ImageStorageImpl,
)
from src.service.movie_ticket.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Object(settings)

    # Database (uses AsyncEngineManager with settings from config_service)
    database = providers.Singleton(Database)

    # Background task group (set by main.py lifespan)
    # Used for fire-and-forget notification delivery
    task_group = providers.Object(None)

    # Unit of Work (new instance per use case; opens a fresh session per `async with`)
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=database.provided.session
    )

    # Query repositories (stateless - use session_factory per call)
    customer_query_repo = providers.Singleton(
        CustomerQueryRepoImpl, session_factory=database.provided.session
    )
    movie_query_repo = providers.Singleton(
        MovieQueryRepoImpl, session_factory=database.provided.session
    )
    ticket_purchase_query_repo = providers.Singleton(
        TicketPurchaseQueryRepoImpl, session_factory=database.provided.session
    )

    # Security
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    jwt_auth = providers.Singleton(JwtAuth)

    # Email delivery, selected by EMAIL_BACKEND ('log' | 'smtp')
    email_sender = providers.Selector(
        config_service.provided.EMAIL_BACKEND,
        log=providers.Singleton(LoggingEmailSenderImpl),
        smtp=providers.Singleton(
            SmtpEmailSenderImpl,
            host=config_service.provided.SMTP_HOST,
            port=config_service.provided.SMTP_PORT,
            username=config_service.provided.SMTP_USERNAME,
            password=config_service.provided.SMTP_PASSWORD,
            use_tls=config_service.provided.SMTP_USE_TLS,
            mail_from=config_service.provided.MAIL_FROM,
            timeout_seconds=config_service.provided.NOTIFICATION_TIMEOUT_SECONDS,
        ),
    )

    purchase_notification_dispatcher = providers.Singleton(
        PurchaseNotificationDispatcherImpl,
        email_sender=email_sender,
        task_group_provider=task_group.provider,
        max_attempts=config_service.provided.NOTIFICATION_MAX_ATTEMPTS,
        backoff_seconds=config_service.provided.NOTIFICATION_BACKOFF_SECONDS,
        timeout_seconds=config_service.provided.NOTIFICATION_TIMEOUT_SECONDS,
    )

    # Object storage for movie images
    image_storage = providers.Singleton(
        S3ImageStorageImpl,
        bucket=config_service.provided.AWS_S3_BUCKET,
        region=config_service.provided.AWS_REGION,
        access_key_id=config_service.provided.AWS_ACCESS_KEY_ID,
        secret_access_key=config_service.provided.AWS_SECRET_ACCESS_KEY,
        max_size_bytes=config_service.provided.IMAGE_MAX_SIZE_BYTES,
        allowed_content_types=config_service.provided.IMAGE_ALLOWED_CONTENT_TYPES,
    )


container = Container()


def cleanup() -> None:
    container.reset_singletons()
