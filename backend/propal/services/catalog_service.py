"""
Speech-to-text catalog loading and agent display name derivation.
"""
import json
import logging
from functools import lru_cache
from pathlib import Path

from propal.config import get_settings
from propal.models.account import AgentConfiguration
from propal.schemas.agent import AgentSelection
from propal.schemas.catalog import SpeechCatalog

logger = logging.getLogger(__name__)


def load_catalog(path: Path) -> SpeechCatalog:
    """
    Load the catalog JSON resource.

    Args:
        path: Location of a ``{"stt": [...]}`` document

    Returns:
        Parsed SpeechCatalog

    Raises:
        OSError: If the file cannot be read
        pydantic.ValidationError: If the document has the wrong shape
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    catalog = SpeechCatalog.model_validate(data)
    logger.info("Loaded speech catalog with %d providers from %s", len(catalog.stt), path)
    return catalog


@lru_cache
def get_catalog() -> SpeechCatalog:
    """Get the cached catalog configured in settings."""
    return load_catalog(Path(get_settings().stt_catalog_path))


def display_name_for(catalog: SpeechCatalog, selection: AgentSelection) -> str:
    """Derive ``Agent in <language name>``, falling back to the raw value."""
    language = catalog.find_language(selection.provider, selection.model, selection.language)
    label = language.name if language and language.name else selection.language
    return f"Agent in {label}"


def build_agent_configuration(
    catalog: SpeechCatalog, selection: AgentSelection
) -> AgentConfiguration:
    """Turn a page selection into the configuration that gets persisted."""
    return AgentConfiguration(
        provider=selection.provider,
        model=selection.model,
        language=selection.language,
        display_name=display_name_for(catalog, selection),
    )
