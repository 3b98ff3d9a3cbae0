"""
Speech-to-text catalog schemas (provider -> model -> language).
"""
from typing import Optional

from pydantic import BaseModel, Field


class Language(BaseModel):
    name: str
    value: str


class Model(BaseModel):
    name: str
    value: str
    languages: list[Language] = Field(default_factory=list)


class STTProvider(BaseModel):
    name: str
    value: str
    models: list[Model] = Field(default_factory=list)


class SpeechCatalog(BaseModel):
    """Static reference data shown on the agent configuration page."""
    stt: list[STTProvider] = Field(default_factory=list)

    def find_language(self, provider: str, model: str, language: str) -> Optional[Language]:
        """Look up a language entry; None when any level is unknown."""
        for stt_provider in self.stt:
            if stt_provider.value != provider:
                continue
            for stt_model in stt_provider.models:
                if stt_model.value != model:
                    continue
                for entry in stt_model.languages:
                    if entry.value == language:
                        return entry
        return None
