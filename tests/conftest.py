import pytest


@pytest.fixture(autouse=True)
def use_test_database(tmp_path):
    """
    Isolate every test.

    - in-memory SQLite leaderboard, no Supabase credentials
    - config file under tmp_path instead of the home directory
    - fresh container singletons (game session, random source, mediator)
    """
    from addiction_network.configuration import config as config_module
    from addiction_network.configuration.config import Config
    from addiction_network.configuration.container import reset_container
    from addiction_network.configuration.settings import settings

    original = (settings.db_path, settings.supabase_url, settings.supabase_key)

    settings.db_path = ":memory:"
    settings.supabase_url = None
    settings.supabase_key = None
    config_module._config = Config(tmp_path / "config.json")
    reset_container()

    yield

    reset_container()
    config_module.reset_config()
    settings.db_path, settings.supabase_url, settings.supabase_key = original


@pytest.fixture
def context():
    """Shared context for BDD steps"""
    return {}


@pytest.fixture
def mediator():
    """Get mediator instance for testing"""
    from addiction_network.configuration.container import get_mediator
    return get_mediator()
