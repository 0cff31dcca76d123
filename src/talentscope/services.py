"""Explicitly owned container wiring the core services to one store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from talentscope.config import Settings
from talentscope.directory import PlayerDirectory, default_directory
from talentscope.notifications import NotificationSink
from talentscope.persistence import KeyValueStore, SqliteKeyValueStore
from talentscope.preferences import PreferenceStore
from talentscope.reports import ReportPipeline
from talentscope.search import FailureStrategy, SearchEngine, Shortlist
from talentscope.session import CredentialVerifier, SessionStore


@dataclass
class TalentScopeServices:
    settings: Settings
    store: KeyValueStore
    directory: PlayerDirectory
    session: SessionStore
    search: SearchEngine
    shortlist: Shortlist
    reports: ReportPipeline
    preferences: PreferenceStore
    notifications: NotificationSink

    @classmethod
    def build(
        cls,
        settings: Optional[Settings] = None,
        *,
        store: Optional[KeyValueStore] = None,
        directory: Optional[PlayerDirectory] = None,
        failure: Optional[FailureStrategy] = None,
        verifier: Optional[CredentialVerifier] = None,
    ) -> "TalentScopeServices":
        settings = settings or Settings.from_env()
        store = store if store is not None else SqliteKeyValueStore(settings.db_path)
        directory = directory or default_directory()
        notifications = NotificationSink(settings=settings)
        session = SessionStore(store, settings=settings, verifier=verifier)
        shortlist = Shortlist(store, directory, settings=settings)
        reports = ReportPipeline(store, session, settings=settings, notifier=notifications)
        preferences = PreferenceStore(store, settings=settings)
        session.on_account_deleted(preferences.forget)
        session.on_account_deleted(reports.forget)
        session.on_account_deleted(shortlist.clear)
        return cls(
            settings=settings,
            store=store,
            directory=directory,
            session=session,
            search=SearchEngine(directory, settings=settings, failure=failure),
            shortlist=shortlist,
            reports=reports,
            preferences=preferences,
            notifications=notifications,
        )
