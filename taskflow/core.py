from dependency_injector import containers, providers

from taskflow.application.session.use_cases.task_session_use_case import TaskSessionUseCase
from taskflow.application.task.use_cases.load_task_use_case import LoadTaskUseCase
from taskflow.config import Settings, get_settings
from taskflow.domain.task.services.flow_flattener import FlowFlattener
from taskflow.domain.task.services.task_integrity_checker import TaskIntegrityChecker
from taskflow.infrastructure.session.repositories import InMemorySessionRepository
from taskflow.infrastructure.task.mappers import FlowItemMapper, TaskPackageMapper
from taskflow.infrastructure.task.sources import FileTaskSource, HttpTaskSource


def _task_source_kind(settings: Settings) -> str:
    return settings.TASK_SOURCE


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # Mappers
    task_package_mapper = providers.Factory(TaskPackageMapper)
    flow_item_mapper = providers.Factory(FlowItemMapper)

    # Task sources, picked by settings.TASK_SOURCE
    task_source = providers.Selector(
        providers.Callable(_task_source_kind, settings),
        file=providers.Factory(
            FileTaskSource,
            path=settings.provided.TASK_FILE_PATH,
            mapper=task_package_mapper,
        ),
        http=providers.Factory(
            HttpTaskSource,
            url=settings.provided.TASK_URL,
            timeout=settings.provided.TASK_FETCH_TIMEOUT,
            mapper=task_package_mapper,
        ),
    )

    # Session storage lives for the whole process
    session_repository = providers.Singleton(
        InMemorySessionRepository,
        idle_timeout=settings.provided.SESSION_IDLE_TIMEOUT,
    )

    # Domain services (pure domain logic)
    flow_flattener = providers.Factory(FlowFlattener)
    task_integrity_checker = providers.Factory(TaskIntegrityChecker)

    # Task module, application use cases
    load_task_use_case = providers.Factory(
        LoadTaskUseCase,
        task_source=task_source,
        flattener=flow_flattener,
        integrity_checker=task_integrity_checker,
    )

    # Session module, application use cases
    task_session_use_case = providers.Factory(
        TaskSessionUseCase,
        session_repository=session_repository,
        load_task_use_case=load_task_use_case,
        flattener=flow_flattener,
    )


# Initialize container
container = Container()
