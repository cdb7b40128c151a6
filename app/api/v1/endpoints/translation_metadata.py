"""Field metadata API: translated field labels per registered entity.

Lets clients build forms and tables with headers in the user's language
without shipping per-language label files.
"""

from fastapi import APIRouter, Query

from app.api.v1.dependencies import TranslationServiceDep
from app.domain.exceptions import EntityNotFoundException, ValidationException
from app.domain.value_objects import validate_language
from app.schemas.health import CacheStatsResponse, TranslationHealthResponse

router = APIRouter()


@router.get("/entities", response_model=list[str])
def list_entities(service: TranslationServiceDep) -> list[str]:
    """Registered entity names, sorted."""
    return service.registered_entities()


@router.get("/health", response_model=TranslationHealthResponse)
def translation_health(service: TranslationServiceDep) -> TranslationHealthResponse:
    """Translation configuration, registered entities and local cache counters."""
    entities = service.registered_entities()
    return TranslationHealthResponse(
        enabled=service.enabled,
        source_language=service.source_language,
        field_names_language=service.identifier_language,
        entities_count=len(entities),
        entities=entities,
        cache=CacheStatsResponse(**service.cache_stats().as_dict()),
    )


@router.get("/{entity}", response_model=dict[str, str])
async def entity_metadata(
    entity: str,
    service: TranslationServiceDep,
    lang: str | None = Query(
        default=None,
        description="Target language (defaults to the content language)",
    ),
) -> dict[str, str]:
    """Map of field name to label in lang.

    404 when the entity is unknown or has no translatable field; {} when
    translation is disabled.
    """
    target = (lang or service.source_language).strip().lower()
    try:
        validate_language(target, "lang")
    except ValueError as e:
        raise ValidationException(str(e), field="lang") from e
    if not service.enabled:
        return {}
    labels = await service.metadata_for(entity, target)
    if not labels:
        raise EntityNotFoundException(entity)
    return labels
