"""Tests for the actor token helpers."""

from datetime import timedelta

import pytest

from notification_hub.domain.entities import Actor
from notification_hub.infrastructure.security import (
    actor_from_claims,
    create_access_token,
    create_actor_token,
    decode_access_token,
)


def test_actor_round_trips_through_token():
    actor = Actor(id=9, first_name="Grace", last_name="Hopper", avatar="g.png")

    decoded = actor_from_claims(decode_access_token(create_actor_token(actor)))

    assert decoded == actor


def test_expired_token_is_rejected():
    token = create_actor_token(Actor(id=9), expires_delta=timedelta(minutes=-1))

    with pytest.raises(ValueError):
        decode_access_token(token)


def test_token_without_numeric_subject_is_rejected():
    claims = decode_access_token(create_access_token({"sub": "grace"}))

    with pytest.raises(ValueError):
        actor_from_claims(claims)
