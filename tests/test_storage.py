from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import select

from resume_studio.constants.defaults import EMPTY_RESUME_DATA, INITIAL_RESUME_DATA
from resume_studio.data.db import Database
from resume_studio.data.models import ResumeVersionRecord, User
from resume_studio.services.auth import hash_password, verify_password
from resume_studio.services.editing import update_profile
from resume_studio.services.storage import INITIAL_VERSION_NAME, SqlPersistenceGateway


def test_password_hash_is_salted_and_verifiable() -> None:
    first = hash_password("s3cret")
    second = hash_password("s3cret")

    assert first != second
    assert "s3cret" not in first
    assert verify_password("s3cret", first)
    assert not verify_password("wrong", first)
    assert not verify_password("s3cret", "not-a-hash")


def test_register_seeds_initial_draft(gateway: SqlPersistenceGateway) -> None:
    assert gateway.register("alex", "pw")

    (version,) = gateway.list_versions("alex")
    assert version.name == INITIAL_VERSION_NAME
    assert version.owner == "alex"
    assert version.data == INITIAL_RESUME_DATA


def test_register_stores_hash_not_password(
    gateway: SqlPersistenceGateway, database: Database
) -> None:
    gateway.register("alex", "plaintext-pw")
    with database.session() as session:
        user = session.scalars(select(User).where(User.username == "alex")).one()
        assert user.password_hash != "plaintext-pw"


def test_duplicate_registration_is_refused(gateway: SqlPersistenceGateway) -> None:
    assert gateway.register("alex", "pw")
    assert gateway.user_exists("alex")
    assert not gateway.register("alex", "other")
    assert gateway.last_error == "User exists"
    assert len(gateway.list_versions("alex")) == 1


def test_register_rejects_blank_credentials(gateway: SqlPersistenceGateway) -> None:
    assert not gateway.register("   ", "pw")
    assert not gateway.register("alex", "")


def test_login(gateway: SqlPersistenceGateway) -> None:
    gateway.register("alex", "pw")
    assert gateway.login("alex", "pw")
    assert not gateway.login("alex", "nope")
    assert not gateway.login("nobody", "pw")


def test_create_then_list_round_trip(gateway: SqlPersistenceGateway) -> None:
    gateway.register("alex", "pw")
    document = update_profile(EMPTY_RESUME_DATA, "fullName", "Alex <b>Chen</b>")

    created = gateway.create_version("alex", "v1", document)
    assert created is not None

    listed = {version.id: version for version in gateway.list_versions("alex")}
    assert listed[created.id].name == "v1"
    assert listed[created.id].data == document


def test_update_replaces_name_and_data(gateway: SqlPersistenceGateway) -> None:
    gateway.register("alex", "pw")
    created = gateway.create_version("alex", "v1", EMPTY_RESUME_DATA)
    changed = update_profile(EMPTY_RESUME_DATA, "email", "a@b.c")

    updated = gateway.update_version("alex", created.id, "v2", changed)
    assert updated is not None

    stored = next(v for v in gateway.list_versions("alex") if v.id == created.id)
    assert stored.name == "v2"
    assert stored.data == changed
    assert stored.timestamp >= created.timestamp


def test_update_missing_or_foreign_version_returns_none(gateway: SqlPersistenceGateway) -> None:
    gateway.register("alex", "pw")
    gateway.register("sam", "pw")
    created = gateway.create_version("alex", "v1", EMPTY_RESUME_DATA)

    assert gateway.update_version("alex", "missing", "x", EMPTY_RESUME_DATA) is None
    assert gateway.update_version("sam", created.id, "x", EMPTY_RESUME_DATA) is None


def test_default_version_names_count_existing(gateway: SqlPersistenceGateway) -> None:
    gateway.register("alex", "pw")
    second = gateway.create_version("alex", None, EMPTY_RESUME_DATA)
    third = gateway.create_version("alex", "", EMPTY_RESUME_DATA)

    assert second.name == "Version 2"
    assert third.name == "Version 3"


def test_versions_listed_newest_first(gateway: SqlPersistenceGateway) -> None:
    gateway.register("alex", "pw")
    for name in ("a", "b", "c"):
        gateway.create_version("alex", name, EMPTY_RESUME_DATA)

    versions = gateway.list_versions("alex")
    timestamps = [version.timestamp for version in versions]
    assert timestamps == sorted(timestamps, reverse=True)
    assert versions[0].name == "c"


def test_delete_version(gateway: SqlPersistenceGateway) -> None:
    gateway.register("alex", "pw")
    gateway.register("sam", "pw")
    created = gateway.create_version("alex", "v1", EMPTY_RESUME_DATA)

    assert not gateway.delete_version("sam", created.id)
    assert gateway.delete_version("alex", created.id)
    assert not gateway.delete_version("alex", created.id)
    assert [v.name for v in gateway.list_versions("alex")] == [INITIAL_VERSION_NAME]


def test_versions_are_isolated_per_user(gateway: SqlPersistenceGateway) -> None:
    gateway.register("alex", "pw")
    gateway.register("sam", "pw")
    gateway.create_version("alex", "mine", EMPTY_RESUME_DATA)

    assert [v.name for v in gateway.list_versions("sam")] == [INITIAL_VERSION_NAME]


def test_create_for_unknown_user_returns_none(gateway: SqlPersistenceGateway) -> None:
    assert gateway.create_version("ghost", "v1", EMPTY_RESUME_DATA) is None


def test_session_requires_open_database(tmp_path: Path) -> None:
    database = Database(f"sqlite:///{(tmp_path / 'x.db').as_posix()}")
    with pytest.raises(RuntimeError, match="not open"), database.session():
        pass

    database.open()
    with database.session() as session:
        assert session.scalars(select(User)).all() == []
    database.close()
    assert not database.is_open


def test_usernames_are_normalised_on_every_operation(gateway: SqlPersistenceGateway) -> None:
    assert gateway.register(" alex ", "pw")
    assert gateway.login("alex", "pw")
    assert gateway.login(" alex ", "pw")

    created = gateway.create_version(" alex ", "v1", EMPTY_RESUME_DATA)
    assert created is not None
    assert created.owner == "alex"

    assert [v.name for v in gateway.list_versions(" alex ")] == ["v1", INITIAL_VERSION_NAME]
    assert gateway.list_versions("alex") == gateway.list_versions(" alex ")
    assert gateway.update_version("alex ", created.id, "v1b", EMPTY_RESUME_DATA) is not None
    assert gateway.delete_version(" alex", created.id)


def test_update_without_name_keeps_stored_name(gateway: SqlPersistenceGateway) -> None:
    gateway.register("alex", "pw")
    created = gateway.create_version("alex", "v1", EMPTY_RESUME_DATA)
    changed = update_profile(EMPTY_RESUME_DATA, "email", "a@b.c")

    updated = gateway.update_version("alex", created.id, None, changed)

    assert updated.name == "v1"
    assert updated.data == changed


def test_unreadable_stored_version_is_skipped(
    database: Database, gateway: SqlPersistenceGateway
) -> None:
    gateway.register("alex", "pw")
    with database.session() as session:
        session.add(
            ResumeVersionRecord(
                public_id="broken",
                name="broken",
                timestamp=1,
                data={"settings": {"marginTop": "wide"}},
                owner="alex",
            )
        )

    assert [v.name for v in gateway.list_versions("alex")] == [INITIAL_VERSION_NAME]
    assert gateway.update_version("alex", "broken", "x", EMPTY_RESUME_DATA) is not None
