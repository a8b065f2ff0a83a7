"""Case-insensitive lookup of per-source configuration."""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import ClassVar

import structlog
from pydantic import ValidationError

from src.config.constants import COMPONENT_SCORING
from src.config.defaults import default_sources_config
from src.config.errors import ConfigurationError, errors_from_pydantic
from src.config.schemas.base import ContentCategory
from src.config.schemas.sources import SourceConfig, SourcesConfig


logger = structlog.get_logger()


class SourceConfigRegistry:
    """Read-only map from source name to SourceConfig.

    Built once from an ordered source list; names are matched ignoring
    case. Construction either succeeds completely or raises
    ConfigurationError, so a partially built registry is never visible.
    """

    _default: ClassVar["SourceConfigRegistry | None"] = None

    def __init__(self, sources: Iterable[SourceConfig]) -> None:
        """Build the registry.

        Args:
            sources: Source configurations in priority order.

        Raises:
            ConfigurationError: If two sources share a name ignoring case.
        """
        ordered = tuple(sources)
        by_key: dict[str, SourceConfig] = {}
        errors: list[dict[str, str]] = []
        for index, source in enumerate(ordered):
            if source.key in by_key:
                errors.append(
                    {
                        "loc": f"sources.{index}.name",
                        "msg": f"Duplicate source name '{source.name}'",
                        "type": "value_error",
                    }
                )
                continue
            by_key[source.key] = source
        if errors:
            raise ConfigurationError(errors, "source registry")

        self._sources = ordered
        self._by_key: Mapping[str, SourceConfig] = MappingProxyType(by_key)
        logger.debug(
            "registry_built",
            component=COMPONENT_SCORING,
            subcomponent="registry",
            source_count=len(ordered),
        )

    @classmethod
    def from_config(cls, sources_config: SourcesConfig) -> "SourceConfigRegistry":
        """Build from an already validated SourcesConfig."""
        return cls(sources_config.sources)

    @classmethod
    def from_mappings(
        cls, entries: Iterable[Mapping[str, object]]
    ) -> "SourceConfigRegistry":
        """Validate plain records and build the registry.

        Args:
            entries: Records with name, category, baseline_score and tier.

        Returns:
            The registry.

        Raises:
            ConfigurationError: If any record is malformed or names collide.
        """
        try:
            config = SourcesConfig.model_validate({"sources": list(entries)})
        except ValidationError as e:
            raise ConfigurationError(errors_from_pydantic(e), "source list") from e
        return cls.from_config(config)

    @classmethod
    def default(cls) -> "SourceConfigRegistry":
        """Registry over the built-in source table, created on first use."""
        if cls._default is None:
            cls._default = cls.from_config(default_sources_config())
        return cls._default

    @property
    def sources(self) -> tuple[SourceConfig, ...]:
        """All sources in construction order."""
        return self._sources

    def lookup(self, name: str) -> SourceConfig | None:
        """Get a source configuration by name, ignoring case.

        Args:
            name: Source name as it appears on a post.

        Returns:
            SourceConfig if configured, None otherwise.
        """
        return self._by_key.get(name.lower())

    def category_for(self, name: str) -> ContentCategory:
        """Get the category of a source, OTHER when unconfigured."""
        config = self.lookup(name)
        return config.category if config else ContentCategory.OTHER

    def by_category(self, category: ContentCategory) -> list[SourceConfig]:
        """Sources tagged with a category, in construction order."""
        return [s for s in self._sources if s.category == category]

    def __len__(self) -> int:
        return len(self._sources)

    def __iter__(self) -> Iterator[SourceConfig]:
        return iter(self._sources)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._by_key
