"""Effective configuration combining all validated configs."""

import hashlib
import json
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from src.config.schemas.base import ContentCategory
from src.config.schemas.scoring import ScoringConfig
from src.config.schemas.sources import SourceConfig, SourcesConfig


class EffectiveConfig(BaseModel):
    """Immutable configuration for one process.

    Attributes:
        sources: Validated source table.
        scoring: Validated scoring constants with overrides applied.
        file_checksums: SHA-256 checksums of the files read.
        run_id: Identifier of the run that loaded this config.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    sources: SourcesConfig
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    file_checksums: Annotated[dict[str, str], Field(default_factory=dict)]
    run_id: str

    def to_normalized_json(self) -> str:
        """Serialize with sorted keys so equal configs give equal text.

        Returns:
            Compact JSON string.
        """
        data = self.model_dump(mode="json", exclude={"file_checksums", "run_id"})
        return json.dumps(data, sort_keys=True, separators=(",", ":"))

    def compute_checksum(self) -> str:
        """Compute SHA-256 checksum of the normalized configuration.

        Returns:
            Hex-encoded SHA-256 checksum.
        """
        normalized = self.to_normalized_json()
        return hashlib.sha256(normalized.encode("utf-8")).hexdigest()

    def get_sources_by_category(self, category: ContentCategory) -> list[SourceConfig]:
        """Get every configured source in a category, in file order.

        Args:
            category: Category to filter by.

        Returns:
            Matching source configurations.
        """
        return [s for s in self.sources.sources if s.category == category]

    def summary(self) -> dict[str, object]:
        """Get a summary of the effective configuration.

        Returns:
            Dictionary with summary information.
        """
        return {
            "run_id": self.run_id,
            "sources_count": len(self.sources.sources),
            "categories": sorted({s.category.value for s in self.sources.sources}),
            "scoring": self.scoring.model_dump(mode="json"),
            "config_checksum": self.compute_checksum(),
            "file_checksums": self.file_checksums,
        }
