"""Tests for the TranslationService facade."""

from pydantic import BaseModel

from app.application.services.translation_service import TranslationService
from app.domain.schema import SchemaRegistry
from conftest import FakeBackend, User, UserRole, make_settings


async def test_translate_text_and_source_override(service: TranslationService) -> None:
    assert await service.translate("Bonjour le monde", "en") == "Hello world"
    assert await service.translate("Bio", "fr", source_lang="en") == "Biographie"


async def test_translate_object_uses_json_field_names(service: TranslationService) -> None:
    user = User(
        id="u1",
        firstName="Jean",
        bio="Passionné de technologie",
        role=UserRole.ADMIN,
    )
    out = await service.translate_object(user, "en", "User")
    assert out == {
        "id": "u1",
        "firstName": "Jean",
        "bio": "Technology enthusiast",
        "role": "ADMIN",
        "roleLabel": "Administrator",
        "createdAt": None,
    }


async def test_translate_object_list(service: TranslationService) -> None:
    users = [
        User(id="u1", firstName="Jean", role=UserRole.VIEWER),
        User(id="u2", firstName="Marie", role=UserRole.ADMIN),
    ]
    out = await service.translate_object(users, "fr", "User")
    assert [u["roleLabel"] for u in out] == ["Lecteur", "Administrateur système"]


async def test_disabled_service_is_pass_through(backend: FakeBackend) -> None:
    registry = SchemaRegistry()
    registry.register_model("User", User)
    service = TranslationService.build(
        make_settings(translate_enabled=False), backend, registry=registry
    )
    tree = {"bio": "Bonjour le monde", "role": "ADMIN"}
    assert await service.translate("Bonjour le monde", "en") == "Bonjour le monde"
    assert await service.translate_tree(tree, "en", "User") == tree
    assert await service.metadata_for("User", "fr") == {}
    assert service.registered_entities() == []
    assert backend.calls == []


async def test_runs_without_shared_tier(backend: FakeBackend) -> None:
    service = TranslationService.build(make_settings(), backend)
    assert await service.translate("Bonjour le monde", "en") == "Hello world"
    assert service.cache_stats().size == 1


async def test_tree_failure_returns_original(service: TranslationService, monkeypatch) -> None:
    async def broken(*args, **kwargs):
        raise RuntimeError("walker bug")

    monkeypatch.setattr(service._trees, "translate_tree", broken)
    tree = {"bio": "Bonjour le monde"}
    assert await service.translate_tree(tree, "en") is tree


def test_schema_from_model_reads_markers_and_enums() -> None:
    class Ticket(BaseModel):
        code: str
        role: UserRole | None = None

    registry = SchemaRegistry()
    schema = registry.register_model("Ticket", Ticket)
    assert [f.name for f in schema.fields] == ["code", "role"]
    assert schema.enum_type("role") == "UserRole"
    assert not schema.is_protected("code")

    user_schema = registry.register_model("User", User)
    assert user_schema.is_protected("firstName")
    assert registry.names() == ["Ticket", "User"]
    assert "User" in registry
    assert registry.get(None) is None
