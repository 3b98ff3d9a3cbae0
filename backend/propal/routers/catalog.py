"""
Catalog router exposing the speech-to-text options.
"""
from fastapi import APIRouter, Depends

from propal.dependencies.services import get_speech_catalog
from propal.schemas.catalog import SpeechCatalog

router = APIRouter(prefix="/catalog", tags=["Catalog"])


@router.get(
    "/stt",
    response_model=SpeechCatalog,
    summary="List speech-to-text providers, models and languages",
)
async def get_stt_catalog(catalog: SpeechCatalog = Depends(get_speech_catalog)):
    return catalog
