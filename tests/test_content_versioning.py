"""Версионирование контента, параллельные сохранения и каскадные удаления."""
import asyncio
import uuid

import pytest

from editorcraft.core.errors import InvalidInput, NotFound
from editorcraft.domains.editors.embed import generate_embed_code
from editorcraft.domains.editors.services import EditorConfigService, EditorContentService
from editorcraft.domains.identity.schemas import UserCreate
from editorcraft.domains.identity.services import IdentityService

SCRIPT_URL = "https://cdn.test/editorcraft-embed.js"


async def make_user(session, email="owner@x.com"):
    _, user = await IdentityService(session).register_user(
        UserCreate(name="Owner", email=email, password="secret123")
    )
    return user


async def make_config(session, user, name="Editor"):
    return await EditorConfigService(session, SCRIPT_URL).create_config(
        user.uuid, name, {"theme": "dark"}
    )


class TestSequentialSaves:

    async def test_versions_start_at_one(self, db_session):
        user = await make_user(db_session)
        config = await make_config(db_session, user)
        service = EditorContentService(db_session)

        assert await service.get_latest(config.uuid) is None
        assert await service.save(config.uuid, {"html": "<p>1</p>"}) == 1
        assert await service.save(config.uuid, {"html": "<p>2</p>"}) == 2
        assert await service.save(config.uuid, "plain text") == 3

        latest = await service.get_latest(config.uuid)
        assert latest.version == 3
        assert latest.content_data == "plain text"
        assert await service.list_versions(config.uuid) == [1, 2, 3]

    async def test_versions_are_per_config(self, db_session):
        user = await make_user(db_session)
        first = await make_config(db_session, user, "First")
        second = await make_config(db_session, user, "Second")
        service = EditorContentService(db_session)

        await service.save(first.uuid, {"n": 1})
        await service.save(first.uuid, {"n": 2})

        assert await service.save(second.uuid, {"n": 1}) == 1

    async def test_missing_config(self, db_session):
        with pytest.raises(NotFound):
            await EditorContentService(db_session).save(uuid.uuid4(), {"html": "x"})

    async def test_none_rejected(self, db_session):
        user = await make_user(db_session)
        config = await make_config(db_session, user)

        with pytest.raises(InvalidInput):
            await EditorContentService(db_session).save(config.uuid, None)


class TestConcurrentSaves:

    async def test_parallel_saves_get_distinct_consecutive_versions(self, session_maker):
        async with session_maker() as session:
            user = await make_user(session)
            config = await make_config(session, user)

        async def save(n):
            async with session_maker() as session:
                return await EditorContentService(session).save(config.uuid, {"n": n})

        versions = await asyncio.gather(*(save(n) for n in range(10)))

        assert sorted(versions) == list(range(1, 11))
        async with session_maker() as session:
            assert await EditorContentService(session).list_versions(config.uuid) == list(range(1, 11))


class TestCascades:

    async def test_deleting_config_removes_its_content_only(self, db_session):
        user = await make_user(db_session)
        doomed = await make_config(db_session, user, "Doomed")
        sibling = await make_config(db_session, user, "Sibling")
        content = EditorContentService(db_session)

        await content.save(doomed.uuid, {"html": "a"})
        await content.save(doomed.uuid, {"html": "b"})
        await content.save(sibling.uuid, {"html": "c"})

        await EditorConfigService(db_session, SCRIPT_URL).delete_config(user.uuid, doomed.uuid)

        assert await content.get_latest(doomed.uuid) is None
        assert await content.list_versions(doomed.uuid) == []
        assert (await content.get_latest(sibling.uuid)).version == 1

    async def test_deleting_user_removes_configs_and_content(self, db_session):
        owner = await make_user(db_session, "owner@x.com")
        other = await make_user(db_session, "other@x.com")
        owned = await make_config(db_session, owner)
        kept = await make_config(db_session, other)
        content = EditorContentService(db_session)
        await content.save(owned.uuid, {"html": "a"})
        await content.save(kept.uuid, {"html": "b"})

        assert await IdentityService(db_session).delete_user(owner.uuid)

        configs = EditorConfigService(db_session, SCRIPT_URL)
        assert await configs.list_configs(owner.uuid) == []
        assert await content.list_versions(owned.uuid) == []
        assert [c.uuid for c in await configs.list_configs(other.uuid)] == [kept.uuid]
        assert (await content.get_latest(kept.uuid)).version == 1


class TestEmbedCodeInvariant:

    async def test_update_keeps_embed_code_in_sync(self, db_session):
        user = await make_user(db_session)
        service = EditorConfigService(db_session, SCRIPT_URL)
        config = await make_config(db_session, user)
        assert config.embed_code == generate_embed_code({"theme": "dark"}, SCRIPT_URL)

        updated = await service.update_config(user.uuid, config.uuid, "Renamed", {"theme": "light"})

        assert updated.embed_code == generate_embed_code({"theme": "light"}, SCRIPT_URL)
        stored = await service.get_public_config(config.uuid)
        assert stored.embed_code == updated.embed_code
        assert stored.config_data == {"theme": "light"}

    async def test_invalid_definition(self, db_session):
        user = await make_user(db_session)
        service = EditorConfigService(db_session, SCRIPT_URL)

        with pytest.raises(InvalidInput):
            await service.create_config(user.uuid, "", {"theme": "dark"})
        with pytest.raises(InvalidInput):
            await service.create_config(user.uuid, "Editor", None)
