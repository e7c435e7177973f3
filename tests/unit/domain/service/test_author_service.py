"""Unit tests for AuthorEnrichmentService."""

import asyncio
from unittest.mock import patch

import pytest

from showtalk.adapter.clerk.client import MockIdentityProvider
from showtalk.domain.service import (
    AuthorEnrichmentService,
    IdentityProfile,
    IdentityProvider,
    TreeAssembler,
    collect_author_ids,
)
from showtalk.domain.value import UserId
from tests.conftest import make_record
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _tree(records):
    return TreeAssembler().build_tree(records)


class TestCollectAuthorIds:
    def test_distinct_ids_across_nested_replies(self):
        tree = _tree(
            [
                make_record(1, author_id="alice"),
                make_record(2, parent_path="000001", author_id="bob"),
                make_record(3, parent_path="000001.000002", author_id="alice"),
                make_record(4, author_id="carol"),
            ]
        )

        assert collect_author_ids(tree) == ["alice", "bob", "carol"]

    def test_empty_tree(self):
        assert collect_author_ids([]) == []


class TestEnrich:
    """Tests for avatar enrichment."""

    @pytest.mark.asyncio
    async def test_one_lookup_per_distinct_author(self, unit_env):
        identity = await unit_env.get(MockIdentityProvider)
        service = await unit_env.get(AuthorEnrichmentService)
        identity.register(UserId("prolific"), "https://img.example/prolific.png")
        tree = _tree(
            [
                make_record(1, author_id="prolific"),
                make_record(2, parent_path="000001", author_id="prolific"),
                make_record(3, parent_path="000001.000002", author_id="prolific"),
                make_record(4, author_id="prolific"),
                make_record(5, parent_path="000004", author_id="prolific"),
            ]
        )

        enriched = await service.enrich(tree)

        assert identity.calls == ["prolific"]
        avatars = [
            enriched[0].author.image_url,
            enriched[0].replies[0].author.image_url,
            enriched[0].replies[0].replies[0].author.image_url,
            enriched[1].author.image_url,
            enriched[1].replies[0].author.image_url,
        ]
        assert avatars == ["https://img.example/prolific.png"] * 5

    @pytest.mark.asyncio
    async def test_failed_lookup_only_affects_that_author(self, unit_env):
        identity = await unit_env.get(MockIdentityProvider)
        service = await unit_env.get(AuthorEnrichmentService)
        identity.register(UserId("alice"), "https://img.example/alice.png")
        identity.fail_for(UserId("broken"))
        tree = _tree(
            [
                make_record(1, author_id="broken"),
                make_record(2, parent_path="000001", author_id="alice"),
            ]
        )

        with patch("showtalk.domain.service.author_service.logfire.warn") as mock_warn:
            enriched = await service.enrich(tree)

        assert enriched[0].author.image_url is None
        assert enriched[0].replies[0].author.image_url == "https://img.example/alice.png"
        mock_warn.assert_called_once()
        assert mock_warn.call_args.kwargs["author_id"] == "broken"
        assert "mock failure" in mock_warn.call_args.kwargs["error"]

    @pytest.mark.asyncio
    async def test_preserves_tree_shape_and_scores(self, unit_env):
        service = await unit_env.get(AuthorEnrichmentService)
        tree = _tree(
            [
                make_record(1, author_id="a"),
                make_record(2, parent_path="000001", author_id="b"),
                make_record(3, author_id="c"),
            ]
        )

        enriched = await service.enrich(tree)

        assert [c.id for c in enriched] == [1, 3]
        assert [r.id for r in enriched[0].replies] == [2]
        assert enriched[0].score == tree[0].score

    @pytest.mark.asyncio
    async def test_empty_tree_makes_no_lookups(self, unit_env):
        identity = await unit_env.get(MockIdentityProvider)
        service = await unit_env.get(AuthorEnrichmentService)

        assert await service.enrich([]) == []
        assert identity.calls == []

    @pytest.mark.asyncio
    async def test_enrich_one(self, unit_env):
        identity = await unit_env.get(MockIdentityProvider)
        service = await unit_env.get(AuthorEnrichmentService)
        identity.register(UserId("solo"), "https://img.example/solo.png")

        enriched = await service.enrich_one(_tree([make_record(1, author_id="solo")])[0])

        assert enriched.author.image_url == "https://img.example/solo.png"


class _SlowIdentityProvider(IdentityProvider):
    """Records how many lookups overlap."""

    def __init__(self) -> None:
        self.in_flight = 0
        self.peak = 0

    async def get_profile(self, user_id: UserId) -> IdentityProfile:
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        await asyncio.sleep(0.01)
        self.in_flight -= 1
        return IdentityProfile(user_id=user_id, image_url=f"https://img.example/{user_id}")


class TestConcurrency:
    @pytest.mark.asyncio
    async def test_lookups_run_concurrently_up_to_the_limit(self):
        identity = _SlowIdentityProvider()
        service = AuthorEnrichmentService(identity, max_concurrency=3)
        tree = _tree([make_record(i, author_id=f"user_{i}") for i in range(1, 9)])

        enriched = await service.enrich(tree)

        assert identity.peak == 3
        assert all(c.author.image_url for c in enriched)
