"""REST API exposing the TalentScope core services."""

from __future__ import annotations

from typing import Any, NoReturn, Optional

from fastapi import FastAPI, HTTPException

from talentscope.api.schemas import (
    AuthorizeRequest,
    ContactRequestPayload,
    FacetsResponse,
    ForgotPasswordRequest,
    LoginRequest,
    MessageResponse,
    PasswordChangeRequest,
    ReportStatusResponse,
    RoleRequest,
    SavePlayerRequest,
    SearchRequest,
    SearchResponse,
    SessionResponse,
    SharingRequest,
    SharingResponse,
)
from talentscope.config import Settings
from talentscope.models import (
    ConnectionRequest,
    Identity,
    PlayerRecord,
    ProfileUpdate,
    ProviderAuthorization,
    RegistrationInput,
    Report,
)
from talentscope.results import ErrorKind, ServiceResult
from talentscope.search import SearchFilters
from talentscope.services import TalentScopeServices


ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.AUTH: 401,
    ErrorKind.CONSENT: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.SERVICE_UNAVAILABLE: 503,
}


def _raise_for(result: ServiceResult[Any]) -> NoReturn:
    assert result.error is not None
    error = result.error
    raise HTTPException(
        status_code=ERROR_STATUS[error.kind],
        detail={"kind": error.kind.value, "message": error.message},
    )


def _value_or_raise(result: ServiceResult[Any]) -> Any:
    if not result.success:
        _raise_for(result)
    return result.value


def create_app(settings: Optional[Settings] = None, *, services: Optional[TalentScopeServices] = None) -> FastAPI:
    app = FastAPI(title="TalentScope core")
    services = services or TalentScopeServices.build(settings)
    app.state.services = services

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    # Session

    @app.post("/session/register", response_model=Identity)
    async def register(payload: RegistrationInput):
        return _value_or_raise(await services.session.register(payload))

    @app.post("/session/login", response_model=Identity)
    async def login(payload: LoginRequest):
        return _value_or_raise(await services.session.login(payload.email, payload.password))

    @app.get("/session", response_model=SessionResponse)
    async def current_session():
        identity = services.session.current_identity()
        return SessionResponse(authenticated=identity is not None, user=identity)

    @app.post("/session/role", response_model=Identity)
    async def set_role(payload: RoleRequest):
        return _value_or_raise(services.session.set_role(payload.role))

    @app.post("/session/logout", response_model=MessageResponse)
    async def logout():
        services.session.logout()
        return MessageResponse()

    @app.post("/session/forgot-password", response_model=MessageResponse)
    async def forgot_password(payload: ForgotPasswordRequest):
        message = _value_or_raise(await services.session.forgot_password(payload.email))
        return MessageResponse(message=message)

    @app.patch("/session/profile", response_model=Identity)
    async def update_profile(payload: ProfileUpdate):
        return _value_or_raise(await services.session.update_profile(payload))

    @app.post("/session/password", response_model=MessageResponse)
    async def change_password(payload: PasswordChangeRequest):
        _value_or_raise(
            await services.session.change_password(
                payload.current_password, payload.new_password, payload.confirm_password
            )
        )
        return MessageResponse(message="Your password has been updated successfully.")

    @app.delete("/session", response_model=MessageResponse)
    async def delete_account():
        _value_or_raise(await services.session.delete_account())
        return MessageResponse(message="Your account has been permanently deleted.")

    # Scout search

    @app.post("/players/search", response_model=SearchResponse)
    async def search_players(payload: SearchRequest):
        filters = SearchFilters(
            game=payload.game,
            region=payload.region,
            experience=payload.experience,
            availability=payload.availability,
        )
        players = _value_or_raise(await services.search.search(payload.query, filters))
        return SearchResponse(players=players, total=len(players))

    @app.get("/players/facets", response_model=FacetsResponse)
    async def facets():
        return FacetsResponse(**services.directory.facets())

    @app.post("/scouts/{scout_id}/saved", response_model=MessageResponse)
    async def save_player(scout_id: str, payload: SavePlayerRequest):
        _value_or_raise(await services.shortlist.save_player(scout_id, payload.player_id))
        return MessageResponse(message="Player added to your saved list.")

    @app.get("/scouts/{scout_id}/saved", response_model=list[PlayerRecord])
    async def saved_players(scout_id: str):
        return services.shortlist.saved_players(scout_id)

    @app.post("/scouts/{scout_id}/contact", response_model=MessageResponse)
    async def request_contact(scout_id: str, payload: ContactRequestPayload):
        _value_or_raise(
            await services.shortlist.request_contact(scout_id, payload.player_id, payload.message)
        )
        return MessageResponse(message="Your contact request has been sent to the player.")

    # Reports

    @app.post("/reports/{user_id}/authorize", response_model=ProviderAuthorization)
    async def authorize(user_id: str, payload: AuthorizeRequest):
        return _value_or_raise(
            await services.reports.authorize_providers(user_id, payload.provider_ids, payload.consent)
        )

    @app.get("/reports/{user_id}/status", response_model=ReportStatusResponse)
    async def report_status(user_id: str):
        return ReportStatusResponse(**_value_or_raise(await services.reports.status(user_id)))

    @app.post("/reports/{user_id}/generate", response_model=ReportStatusResponse)
    async def generate_report(user_id: str):
        _value_or_raise(await services.reports.generate(user_id))
        return ReportStatusResponse(**_value_or_raise(await services.reports.status(user_id)))

    @app.get("/reports/{user_id}", response_model=Report)
    async def fetch_report(user_id: str):
        return _value_or_raise(await services.reports.fetch(user_id))

    # Preferences

    @app.get("/preferences/{user_id}/sharing", response_model=SharingResponse)
    async def get_sharing(user_id: str):
        return SharingResponse(user_id=user_id, enabled=services.preferences.get_sharing(user_id))

    @app.put("/preferences/{user_id}/sharing", response_model=SharingResponse)
    async def set_sharing(user_id: str, payload: SharingRequest):
        _value_or_raise(await services.preferences.set_sharing(user_id, payload.enabled))
        return SharingResponse(user_id=user_id, enabled=services.preferences.get_sharing(user_id))

    @app.post("/preferences/{user_id}/connection-request", response_model=MessageResponse)
    async def connection_request(user_id: str, payload: ConnectionRequest):
        _value_or_raise(await services.preferences.submit_connection_request(user_id, payload))
        return MessageResponse(
            message="Scouts in your preferred regions will be notified of your interest."
        )

    return app
