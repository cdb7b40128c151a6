"""Direct text translation endpoint."""

from fastapi import APIRouter, Request

from app.api.v1.dependencies import TranslationServiceDep
from app.core.limiter import limit_translate
from app.schemas.translation import TranslateRequest, TranslateResponse

router = APIRouter()


@router.post("", response_model=TranslateResponse)
@limit_translate
async def translate_text(
    request: Request,
    body: TranslateRequest,
    service: TranslationServiceDep,
) -> TranslateResponse:
    """Translate one string. Returns the original text when the backend fails."""
    translated = await service.translate(
        body.text, body.target_lang, source_lang=body.source_lang
    )
    return TranslateResponse(translated_text=translated)
