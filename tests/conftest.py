import pytest

from talentscope.config import Settings
from talentscope.persistence import MemoryKeyValueStore
from talentscope.search import NeverFail
from talentscope.services import TalentScopeServices


@pytest.fixture
def settings() -> Settings:
    return Settings(db_path=":memory:", search_failure_rate=0.0)


@pytest.fixture
def store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def services(settings: Settings, store: MemoryKeyValueStore) -> TalentScopeServices:
    return TalentScopeServices.build(settings, store=store, failure=NeverFail())


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
