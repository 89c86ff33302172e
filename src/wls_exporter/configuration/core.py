"""
Core exporter configuration class.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from ..infrastructure.exceptions import InvalidConfigurationValue
from .models import ConnectionSettings, DEFAULT_HOST, DEFAULT_PORT
from .selector import MBeanSelector, parse_queries
from .serializer import ConfigSerializer

logger = logging.getLogger(__name__)


class ExporterConfig:
    """
    Connection settings plus the ordered list of selector trees ("queries")
    to scrape from the managed server.

    Instances are created by :meth:`load_config`. :meth:`append` and
    :meth:`replace` mutate the receiver's query list in place and never touch
    its connection settings. No internal locking is done; callers must not
    mutate an instance while another thread reads it.
    """

    HOST = "host"
    PORT = "port"
    USERNAME = "username"
    PASSWORD = "password"
    START_DELAY_SECONDS = "startDelaySeconds"
    QUERIES = "queries"

    DEFAULT_HOST = DEFAULT_HOST
    DEFAULT_PORT = DEFAULT_PORT

    SCALAR_KEYS = (HOST, PORT, USERNAME, PASSWORD, START_DELAY_SECONDS)
    KNOWN_KEYS = SCALAR_KEYS + (QUERIES,)

    def __init__(self, settings: Optional[ConnectionSettings] = None, queries: Optional[List[MBeanSelector]] = None):
        self._settings = settings or ConnectionSettings()
        self._queries: List[MBeanSelector] = list(queries or [])

    @classmethod
    def load_config(cls, document: Optional[Mapping[str, Any]]) -> "ExporterConfig":
        """
        Build a configuration from a parsed document.

        Args:
            document: Mapping produced by the YAML parser, or None when no
                configuration was supplied

        Returns:
            A fully populated ExporterConfig; missing keys take their defaults

        Raises:
            InvalidConfigurationValue: If a value cannot be coerced or the
                query structure is malformed. Nothing is returned in that case.
        """
        if not document:
            return cls()
        if not isinstance(document, Mapping):
            raise InvalidConfigurationValue(
                f"Configuration document must be a mapping, got {type(document).__name__}",
                value=document,
            )

        for key in document:
            if key not in cls.KNOWN_KEYS:
                logger.warning(f"Unknown configuration key: {key}")

        settings = cls._load_settings(document)
        queries = parse_queries(document.get(cls.QUERIES))
        logger.debug(f"Loaded configuration for {settings.host}:{settings.port} with {len(queries)} queries")
        return cls(settings, queries)

    @staticmethod
    def _load_settings(document: Mapping[str, Any]) -> ConnectionSettings:
        scalars = {
            key: document[key]
            for key in ExporterConfig.SCALAR_KEYS
            if document.get(key) is not None
        }
        try:
            return ConnectionSettings.model_validate(scalars)
        except ValidationError as e:
            error = e.errors()[0]
            field_name = ".".join(str(loc) for loc in error.get('loc', ()))
            raise InvalidConfigurationValue(
                f"Invalid value for '{field_name}': {error.get('msg', 'validation failed')}",
                field_name=field_name,
                value=error.get('input'),
                context={"validation_errors": [err.get('msg') for err in e.errors()]},
                cause=e,
            ) from e

    @property
    def settings(self) -> ConnectionSettings:
        return self._settings

    @property
    def host(self) -> str:
        return self._settings.host

    @property
    def port(self) -> int:
        return self._settings.port

    @property
    def user_name(self) -> str:
        return self._settings.user_name

    @property
    def password(self) -> str:
        return self._settings.password

    @property
    def start_delay_seconds(self) -> int:
        return self._settings.start_delay_seconds

    @property
    def queries(self) -> List[MBeanSelector]:
        """The query trees, in order. Returns a new list; the trees are shared."""
        return list(self._queries)

    def append(self, other: "ExporterConfig") -> None:
        """
        Add the queries of another configuration after this one's.

        Queries are concatenated as whole trees; a query with the same top
        name as an existing one is kept as a separate tree, not merged.
        """
        added = [query.copy() for query in other._queries]
        self._queries.extend(added)
        logger.debug(f"Appended {len(added)} queries, now {len(self._queries)}")

    def replace(self, other: "ExporterConfig") -> None:
        """Discard this configuration's queries in favor of another's."""
        self._queries = [query.copy() for query in other._queries]
        logger.debug(f"Replaced queries, now {len(self._queries)}")

    def to_document(self) -> Dict[str, Any]:
        return ConfigSerializer.to_document(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExporterConfig):
            return NotImplemented
        return self._settings == other._settings and self._queries == other._queries

    __hash__ = None

    def __str__(self) -> str:
        return ConfigSerializer.dump(self)

    def __repr__(self) -> str:
        return (
            f"ExporterConfig(host={self.host!r}, port={self.port!r}, "
            f"user_name={self.user_name!r}, start_delay_seconds={self.start_delay_seconds!r}, "
            f"queries={[q.query_name for q in self._queries]!r})"
        )
