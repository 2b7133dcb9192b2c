"""Asset Loaders (prompts, guidance catalog)."""

from apps.identify.infrastructure.asset_loader.prompt_repository_impl import (
    FilePromptRepository,
)
from apps.identify.infrastructure.asset_loader.yaml_guidance_catalog import (
    YamlGuidanceCatalog,
)

__all__ = ["FilePromptRepository", "YamlGuidanceCatalog"]
