import pytest

from talentscope.models import ProfileUpdate, RegistrationInput, Role
from talentscope.persistence import SESSION_KEY, SqliteKeyValueStore
from talentscope.results import ErrorKind
from talentscope.session import SessionStore


def _registration(**overrides) -> RegistrationInput:
    data = dict(
        username="ShadowStrike",
        email="shadow@example.com",
        password="hunter22",
        confirm_password="hunter22",
        region="Europe",
        primary_games=["CS:GO", "Valorant"],
        steam_id="7656119",
        agree_to_terms=True,
    )
    data.update(overrides)
    return RegistrationInput(**data)


class _RejectAll:
    def verify(self, email: str, password: str) -> bool:
        return False


@pytest.mark.anyio
async def test_register_commits_and_persists_identity(store, settings):
    session = SessionStore(store, settings=settings)
    result = await session.register(_registration())

    assert result.success
    identity = result.value
    assert identity.id.startswith("user_")
    assert store.get(SESSION_KEY) is not None

    current = session.current_identity()
    assert current is not None
    assert (current.username, current.email, current.region) == ("ShadowStrike", "shadow@example.com", "Europe")
    assert current.primary_games == ["CS:GO", "Valorant"]
    assert current.steam_id == "7656119"


@pytest.mark.anyio
async def test_register_rejects_password_mismatch_without_mutation(store, settings):
    session = SessionStore(store, settings=settings)
    result = await session.register(_registration(confirm_password="different"))

    assert result.kind is ErrorKind.VALIDATION
    assert session.current_identity() is None
    assert store.get(SESSION_KEY) is None


@pytest.mark.anyio
async def test_register_requires_terms_consent(store, settings):
    session = SessionStore(store, settings=settings)
    result = await session.register(_registration(agree_to_terms=False))

    assert result.kind is ErrorKind.CONSENT
    assert session.current_identity() is None


@pytest.mark.anyio
async def test_registered_ids_are_unique(store, settings):
    session = SessionStore(store, settings=settings)
    first = (await session.register(_registration())).value
    second = (await session.register(_registration())).value
    assert first.id != second.id


@pytest.mark.anyio
@pytest.mark.parametrize("email,password", [("", "secret"), ("a@b.c", ""), ("", "")])
async def test_login_requires_both_fields(store, settings, email, password):
    session = SessionStore(store, settings=settings)
    result = await session.login(email, password)
    assert result.kind is ErrorKind.VALIDATION
    assert session.current_identity() is None


@pytest.mark.anyio
async def test_login_binds_placeholder_identity_to_email(store, settings):
    session = SessionStore(store, settings=settings)
    result = await session.login("scout@example.com", "pw")
    assert result.success
    assert result.value.email == "scout@example.com"
    assert session.current_identity() == result.value


@pytest.mark.anyio
async def test_login_with_rejecting_verifier_fails_with_auth_error(store, settings):
    session = SessionStore(store, settings=settings, verifier=_RejectAll())
    result = await session.login("scout@example.com", "wrong")
    assert result.kind is ErrorKind.AUTH
    assert store.get(SESSION_KEY) is None


@pytest.mark.anyio
async def test_session_survives_restart(tmp_path, settings):
    db_path = tmp_path / "talentscope.sqlite"
    first = SessionStore(SqliteKeyValueStore(db_path), settings=settings)
    identity = (await first.register(_registration())).value
    first.set_role(Role.PLAYER)

    restarted = SessionStore(SqliteKeyValueStore(db_path), settings=settings)
    hydrated = restarted.current_identity()
    assert hydrated is not None
    assert hydrated.id == identity.id
    assert hydrated.role is Role.PLAYER

    restarted.logout()
    assert SessionStore(SqliteKeyValueStore(db_path), settings=settings).current_identity() is None


def test_current_identity_ignores_unreadable_record(store, settings):
    store.set(SESSION_KEY, "{not json")
    assert SessionStore(store, settings=settings).current_identity() is None


def test_set_role_requires_active_identity(store, settings):
    session = SessionStore(store, settings=settings)
    result = session.set_role("scout")
    assert result.kind is ErrorKind.AUTH


@pytest.mark.anyio
async def test_set_role_merges_and_keeps_id(store, settings):
    session = SessionStore(store, settings=settings)
    identity = (await session.register(_registration())).value

    result = session.set_role("scout")
    assert result.success
    assert result.value.id == identity.id
    assert result.value.role is Role.SCOUT
    assert session.set_role("coach").kind is ErrorKind.VALIDATION


@pytest.mark.anyio
async def test_update_profile(store, settings):
    session = SessionStore(store, settings=settings)
    identity = (await session.register(_registration())).value

    updated = await session.update_profile(ProfileUpdate(region="Asia", discord_id="shadow#1"))
    assert updated.success
    assert updated.value.id == identity.id
    assert updated.value.region == "Asia"
    assert updated.value.username == "ShadowStrike"

    blank = await session.update_profile(ProfileUpdate(username=" "))
    assert blank.kind is ErrorKind.VALIDATION
    assert session.current_identity().username == "ShadowStrike"


@pytest.mark.anyio
async def test_change_password_rules(store, settings):
    session = SessionStore(store, settings=settings)
    assert (await session.change_password("a", "bcdefg", "bcdefg")).kind is ErrorKind.AUTH

    await session.login("p@example.com", "pw")
    assert (await session.change_password("pw", "abcdef", "abcdeg")).kind is ErrorKind.VALIDATION
    assert (await session.change_password("pw", "abc", "abc")).kind is ErrorKind.VALIDATION
    assert (await session.change_password("pw", "abcdef", "abcdef")).success


@pytest.mark.anyio
async def test_forgot_password(store, settings):
    session = SessionStore(store, settings=settings)
    assert (await session.forgot_password("")).kind is ErrorKind.VALIDATION
    result = await session.forgot_password("me@example.com")
    assert result.value == "Password reset instructions sent to me@example.com"


@pytest.mark.anyio
async def test_delete_account_runs_hooks_and_logs_out(store, settings):
    session = SessionStore(store, settings=settings)
    identity = (await session.register(_registration())).value
    deleted: list[str] = []
    session.on_account_deleted(deleted.append)

    assert (await session.delete_account()).success
    assert deleted == [identity.id]
    assert session.current_identity() is None
    assert (await session.delete_account()).kind is ErrorKind.AUTH


@pytest.mark.anyio
@pytest.mark.parametrize("email,password", [("", "secret1"), ("   ", "secret1"), ("a@b.c", "")])
async def test_register_requires_email_and_password(store, settings, email, password):
    session = SessionStore(store, settings=settings)
    result = await session.register(_registration(email=email, password=password, confirm_password=password))

    assert result.kind is ErrorKind.VALIDATION
    assert session.current_identity() is None
    assert store.get(SESSION_KEY) is None
