import pytest

from talentscope.models import ConnectionRequest, RegistrationInput
from talentscope.persistence import sharing_key, talent_flag_key
from talentscope.results import ErrorKind


def test_sharing_defaults_to_visible(services):
    assert services.preferences.get_sharing("user_a") is True


@pytest.mark.anyio
async def test_sharing_round_trips_as_string_flag(services, store):
    assert (await services.preferences.set_sharing("user_a", False)).success
    assert services.preferences.get_sharing("user_a") is False
    assert store.get(sharing_key("user_a")) == "false"

    await services.preferences.set_sharing("user_a", True)
    assert services.preferences.get_sharing("user_a") is True
    assert services.preferences.get_sharing("user_b") is True


@pytest.mark.anyio
async def test_connection_request_requires_regions(services, store):
    request = ConnectionRequest(preferred_regions=[], availability="now")
    result = await services.preferences.submit_connection_request("user_a", request)

    assert result.kind is ErrorKind.VALIDATION
    assert store.get(talent_flag_key("user_a")) is None
    assert services.preferences.connection_request("user_a") is None


@pytest.mark.anyio
async def test_connection_request_requires_availability(services):
    request = ConnectionRequest(preferred_regions=["Europe"], availability="  ")
    result = await services.preferences.submit_connection_request("user_a", request)
    assert result.kind is ErrorKind.VALIDATION


@pytest.mark.anyio
async def test_failed_submission_keeps_previous_request(services):
    first = ConnectionRequest(
        preferred_regions=["Europe"],
        teams_of_interest="Any tier-2 roster",
        availability="Immediately",
        contact_method="discord",
    )
    assert (await services.preferences.submit_connection_request("user_a", first)).success

    bad = ConnectionRequest(preferred_regions=[], availability="")
    await services.preferences.submit_connection_request("user_a", bad)
    assert services.preferences.connection_request("user_a") == first


@pytest.mark.anyio
async def test_connection_request_overwrites_by_user(services):
    first = ConnectionRequest(preferred_regions=["Europe"], availability="Immediately")
    second = ConnectionRequest(preferred_regions=["Asia", "Oceania"], availability="Next season")
    await services.preferences.submit_connection_request("user_a", first)
    await services.preferences.submit_connection_request("user_a", second)
    assert services.preferences.connection_request("user_a") == second


@pytest.mark.anyio
async def test_account_deletion_clears_user_data(services, store):
    identity = (
        await services.session.register(
            RegistrationInput(
                username="AWPMaster",
                email="awp@example.com",
                password="secret1",
                confirm_password="secret1",
                region="Europe",
                agree_to_terms=True,
            )
        )
    ).value
    user_id = identity.id
    await services.preferences.set_sharing(user_id, False)
    await services.preferences.submit_connection_request(
        user_id, ConnectionRequest(preferred_regions=["Europe"], availability="Now")
    )
    await services.reports.authorize_providers(user_id, ["steam"], consent=True)
    await services.reports.generate(user_id)
    await services.shortlist.save_player(user_id, "1")
    await services.shortlist.request_contact(user_id, "3", "Open to a trial?")
    await services.shortlist.request_contact("other_scout", "3", "Keep this one")

    assert (await services.session.delete_account()).success

    assert services.preferences.get_sharing(user_id) is True
    assert services.preferences.connection_request(user_id) is None
    assert services.reports.authorization(user_id) is None
    assert (await services.reports.status(user_id)).value["status"] == "pending"
    assert services.shortlist.saved_players(user_id) == []
    assert store.keys() == ["contact_request_other_scout_3"]
