"""Presentation-layer dependencies.

The translation service is built once in lifespan and stored on app.state;
routes receive it through Depends(get_translation_service).
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from app.application.services.translation_service import TranslationService


def get_translation_service(request: Request) -> TranslationService:
    """Return the app-wide TranslationService; 503 before startup completes."""
    service = getattr(request.app.state, "translation_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Translation service not initialized")
    return service


TranslationServiceDep = Annotated[TranslationService, Depends(get_translation_service)]
