"""Tests for recipe visibility and ownership rules."""

import pytest

from keto_recipes.config import OperatingMode
from keto_recipes.domain.actors import ANONYMOUS, AuthenticatedUser
from keto_recipes.domain.recipes import ListScope
from keto_recipes.errors import UnauthorizedError
from keto_recipes.services.access import (
    CommunityAccessPolicy,
    RecipeQuery,
    SingleTenantAccessPolicy,
    build_access_policy,
)
from tests.conftest import ALICE_ID, BOB_ID, make_recipe

ALICE = AuthenticatedUser(id=ALICE_ID)
BOB = AuthenticatedUser(id=BOB_ID)


def test_build_access_policy_per_mode() -> None:
    community = build_access_policy(OperatingMode.COMMUNITY)
    single = build_access_policy(OperatingMode.SINGLE_TENANT)

    assert isinstance(community, CommunityAccessPolicy)
    assert isinstance(single, SingleTenantAccessPolicy)
    assert community.ownership_enabled
    assert not single.ownership_enabled


def test_community_public_scope_lists_only_public_recipes() -> None:
    policy = CommunityAccessPolicy()
    public = make_recipe(created_by=BOB_ID, is_public=True)
    private = make_recipe(created_by=BOB_ID)

    assert policy.list_query(ANONYMOUS, ListScope.PUBLIC) == RecipeQuery(is_public=True)
    assert policy.is_listable(public, ALICE, ListScope.PUBLIC)
    assert not policy.is_listable(private, ALICE, ListScope.PUBLIC)
    assert not policy.is_listable(private, BOB, ListScope.PUBLIC)


def test_community_mine_scope_lists_owned_recipes() -> None:
    policy = CommunityAccessPolicy()
    mine = make_recipe(created_by=ALICE_ID)
    theirs = make_recipe(created_by=BOB_ID, is_public=True)

    assert policy.list_query(ALICE, ListScope.MINE) == RecipeQuery(created_by=ALICE_ID)
    assert policy.is_listable(mine, ALICE, ListScope.MINE)
    assert not policy.is_listable(theirs, ALICE, ListScope.MINE)


def test_community_mine_scope_is_empty_for_anonymous() -> None:
    policy = CommunityAccessPolicy()

    assert policy.list_query(ANONYMOUS, ListScope.MINE) is None
    assert not policy.is_listable(make_recipe(), ANONYMOUS, ListScope.MINE)


def test_community_only_owner_can_mutate() -> None:
    policy = CommunityAccessPolicy()
    recipe = make_recipe(created_by=ALICE_ID, is_public=True)

    assert policy.can_mutate(recipe, ALICE)
    assert not policy.can_mutate(recipe, BOB)
    assert not policy.can_mutate(recipe, ANONYMOUS)


def test_community_ownerless_recipes_are_not_mutable() -> None:
    policy = CommunityAccessPolicy()
    legacy = make_recipe(created_by=None, is_public=True)

    assert not policy.can_mutate(legacy, ALICE)
    assert not policy.is_listable(legacy, ALICE, ListScope.MINE)
    assert policy.is_listable(legacy, ALICE, ListScope.PUBLIC)


def test_community_private_recipes_readable_by_id() -> None:
    policy = CommunityAccessPolicy()

    assert policy.can_read(make_recipe(created_by=BOB_ID), ANONYMOUS)


def test_community_writers_must_sign_in() -> None:
    policy = CommunityAccessPolicy()

    with pytest.raises(UnauthorizedError, match="You must be signed in to create"):
        policy.require_writer(ANONYMOUS, "create recipes")
    policy.require_writer(ALICE, "create recipes")
    assert policy.owner_for_new(ALICE) == ALICE_ID
    assert policy.owner_for_new(ANONYMOUS) is None


def test_single_tenant_allows_everything() -> None:
    policy = SingleTenantAccessPolicy()
    recipe = make_recipe(created_by=None)

    assert policy.list_query(ANONYMOUS, ListScope.MINE) == RecipeQuery()
    assert policy.is_listable(recipe, ANONYMOUS, ListScope.PUBLIC)
    assert policy.can_read(recipe, ANONYMOUS)
    assert policy.can_mutate(recipe, ANONYMOUS)
    policy.require_writer(ANONYMOUS, "create recipes")
    assert policy.owner_for_new(ALICE) is None
