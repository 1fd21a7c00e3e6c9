"""Tests for the user repository: lookups, soft delete and email uniqueness."""

from __future__ import annotations

import uuid

import pytest
from sqlalchemy.exc import IntegrityError

from app.models.user import User
from app.repositories.user_repo import UserRepository
from conftest import create_user

repo = UserRepository()


def test_lookup_by_email_and_id(session):
    user = create_user(session, "lookup@shop.io")

    assert repo.get_by_email(session, "lookup@shop.io").id == user.id
    assert repo.get_by_id(session, user.id).email == "lookup@shop.io"
    assert repo.get_by_id(session, uuid.uuid4()) is None
    assert repo.email_exists(session, "lookup@shop.io")
    assert not repo.email_exists(session, "nobody@shop.io")


def test_new_user_defaults(session):
    user = create_user(session, "defaults@shop.io")

    assert user.role == "customer"
    assert user.email_verified is False
    assert user.deleted_at is None


def test_soft_deleted_user_is_hidden_but_kept(session):
    user = create_user(session, "gone@shop.io")
    repo.soft_delete(session, user)

    assert repo.get_by_id(session, user.id) is None
    assert repo.get_by_email(session, "gone@shop.io") is None
    assert repo.list(session) == []
    assert session.get(User, user.id).deleted_at is not None


def test_duplicate_live_email_violates_store_constraint(session):
    create_user(session, "dup@shop.io")

    with pytest.raises(IntegrityError):
        repo.create(
            session,
            User(email="dup@shop.io", password_hash="x", first_name="A", last_name="B"),
        )


def test_email_reusable_after_soft_delete(session):
    first = create_user(session, "again@shop.io")
    repo.soft_delete(session, first)

    second = create_user(session, "again@shop.io")

    assert second.id != first.id
    assert repo.get_by_email(session, "again@shop.io").id == second.id


def test_list_paginates(session):
    for i in range(3):
        create_user(session, f"user{i}@shop.io")

    assert len(repo.list(session, skip=0, limit=2)) == 2
    assert len(repo.list(session, skip=2, limit=2)) == 1


def test_failed_update_rolls_back_session(session):
    create_user(session, "taken@shop.io")
    other = create_user(session, "other@shop.io")

    other.email = "taken@shop.io"
    with pytest.raises(IntegrityError):
        repo.update(session, other)

    assert repo.get_by_id(session, other.id).email == "other@shop.io"
    assert repo.get_by_email(session, "taken@shop.io") is not None
