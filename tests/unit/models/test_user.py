"""Tests for the user models."""

from datetime import UTC, datetime

import pytest

from superhub.models import LinkedDiscord, LinkedVK, Referral, User


@pytest.mark.unit
def test_user_from_dict(user_payload):
    user = User.from_dict(user_payload)

    assert user.id == 7
    assert user.email == "player@example.net"
    assert user.name == "player"
    assert user.balance == 120.5
    assert user.has_mfa_enabled is True
    assert user.had_test_server is False
    assert user.created_at == datetime(2022, 11, 20, 8, 15, tzinfo=UTC)
    assert user.updated_at is None


@pytest.mark.unit
def test_linked_accounts(user_payload):
    user = User.from_dict(user_payload)

    assert user.discord == LinkedDiscord(id=None, acquired_link_bonus=False)
    assert not user.has_linked_discord
    assert user.vk == LinkedVK(id=123456, acquired_link_bonus=True, acquired_feedback_bonus=False)
    assert user.has_linked_vk


@pytest.mark.unit
def test_discord_id_is_kept_as_string(user_payload):
    user_payload["discord"] = {"id": "284379981234765824", "linkBonus": True}

    user = User.from_dict(user_payload)

    assert user.discord.id == "284379981234765824"
    assert user.has_linked_discord


@pytest.mark.unit
def test_referral(user_payload):
    user = User.from_dict(user_payload)

    assert user.referral == Referral(code="PLAYER7", acquired_bonus=True, user_id=None)
    assert not user.has_referral


@pytest.mark.unit
def test_registered_with_referral_code(user_payload):
    user_payload["referral"]["userId"] = 3

    user = User.from_dict(user_payload)

    assert user.referral.user_id == 3
    assert user.has_referral


@pytest.mark.unit
def test_missing_nested_objects(user_payload):
    for key in ("discord", "vk", "referral"):
        del user_payload[key]

    user = User.from_dict(user_payload)

    assert not user.has_linked_discord
    assert not user.has_linked_vk
    assert not user.has_referral
    assert user.referral.code == ""


@pytest.mark.unit
def test_missing_email(user_payload):
    del user_payload["email"]

    with pytest.raises(KeyError):
        User.from_dict(user_payload)


@pytest.mark.unit
@pytest.mark.parametrize("key", ["hasMfaEnabled", "hadTestServer"])
def test_flags_must_be_boolean(user_payload, key):
    user_payload[key] = "false"

    with pytest.raises(TypeError):
        User.from_dict(user_payload)


@pytest.mark.unit
def test_null_flags_are_false(user_payload):
    user_payload["hasMfaEnabled"] = None
    user_payload["vk"]["linkBonus"] = None

    user = User.from_dict(user_payload)

    assert user.has_mfa_enabled is False
    assert user.vk.acquired_link_bonus is False
