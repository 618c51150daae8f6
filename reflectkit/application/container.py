from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Sequence, TypeVar

from ..domain import FieldAccessor, FieldDescriptor, InstanceFactory, MethodInvoker
from ..infrastructure import ClassFieldScanner, InMemoryFieldCache, RecordHydrator, load_type
from ..infrastructure.metrics import metrics
from ..infrastructure.sqlite import SQLiteDatabase, SQLiteRecordsRepository
from .metrics import configure_metrics_logger, release_metrics_logger

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ReflectionConfig:
    log_level: str = "INFO"
    metrics_log_path: str | None = None
    db_path: str | None = None
    records_key: str = "records"


class ReflectionContainer:
    """Owns one field cache and the services built on it.

    Hand the container (or the services) to the code that needs reflection;
    two containers never share cached lookups.
    """

    def __init__(
        self,
        *,
        config: ReflectionConfig,
        cache: InMemoryFieldCache,
        accessor: FieldAccessor,
        invoker: MethodInvoker,
        factory: InstanceFactory,
        hydrator: RecordHydrator,
        records_repo: SQLiteRecordsRepository | None = None,
    ):
        self.config = config
        self.cache = cache
        self.accessor = accessor
        self.invoker = invoker
        self.factory = factory
        self.hydrator = hydrator
        self.records_repo = records_repo
        self._metrics_logger: logging.Logger | None = None

    def resolve(self, owner: type, field_name: str) -> Optional[FieldDescriptor]:
        return self.cache.resolve(owner, field_name)

    def fields(self, owner: type) -> tuple[FieldDescriptor, ...]:
        return self.cache.fields(owner)

    def get(self, instance: Any, field_name: str) -> Any:
        return self.accessor.get(instance, field_name)

    def set(self, instance: Any, field_name: str, value: Any) -> None:
        self.accessor.set(instance, field_name, value)

    def invoke(self, instance: Any, method_name: str) -> Any:
        return self.invoker.invoke(instance, method_name)

    def instantiate(self, cls: type[T]) -> T:
        return self.factory.instantiate(cls)

    def hydrate(self, cls: type[T], row: Mapping[str, Any]) -> T:
        return self.hydrator.hydrate(cls, row)

    def hydrate_many(self, cls: type[T], rows: Iterable[Mapping[str, Any]]) -> list[T]:
        return self.hydrator.hydrate_many(cls, rows)

    def load_type(self, qualified_name: str) -> type:
        return load_type(qualified_name)

    async def fetch_all(self, cls: type[T], sql: str, params: Sequence[Any] = ()) -> list[T]:
        if self.records_repo is None:
            raise RuntimeError("DB_PATH is not configured")
        return await self.records_repo.fetch_all(cls, sql, params)

    def init_resources(self) -> None:
        if self.config.metrics_log_path:
            self._metrics_logger = configure_metrics_logger(self.config.metrics_log_path)
            metrics.configure(self._metrics_logger)
            logger.info("Metrics written to %s", self.config.metrics_log_path)

    def close(self) -> None:
        if self._metrics_logger is not None:
            release_metrics_logger(self._metrics_logger)
            self._metrics_logger = None


def create_container(config: ReflectionConfig | None = None) -> ReflectionContainer:
    config = config or ReflectionConfig()
    scanner = ClassFieldScanner()
    cache = InMemoryFieldCache(scanner)
    accessor = FieldAccessor(cache)
    factory = InstanceFactory(scanner)
    hydrator = RecordHydrator(factory, accessor)

    records_repo = None
    if config.db_path:
        records_repo = SQLiteRecordsRepository(SQLiteDatabase(config.db_path), hydrator)
    else:
        logger.debug("DB_PATH not set; SQLite records disabled")

    return ReflectionContainer(
        config=config,
        cache=cache,
        accessor=accessor,
        invoker=MethodInvoker(),
        factory=factory,
        hydrator=hydrator,
        records_repo=records_repo,
    )
