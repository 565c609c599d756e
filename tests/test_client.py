import logging

import pytest

from sgdb import DEFAULT_BASE_URL, SGDB, ClientConfig
from tests.conftest import make_response, sent


class TestConstruction:
    def test_key_sets_bearer_header(self, session):
        client = SGDB("abc123", session=session)
        assert client.headers["Authorization"] == "Bearer abc123"
        assert client.base_url == DEFAULT_BASE_URL

    def test_key_overrides_caller_authorization(self, session):
        client = SGDB("abc123", headers={"Authorization": "Basic nope", "X-Extra": "1"}, session=session)
        assert client.headers["Authorization"] == "Bearer abc123"
        assert client.headers["X-Extra"] == "1"

    def test_caller_headers_are_copied(self, session):
        headers = {"X-Extra": "1"}
        client = SGDB("abc123", headers=headers, session=session)
        headers["X-Extra"] = "2"
        assert client.headers["X-Extra"] == "1"
        assert "Authorization" not in headers

    def test_missing_key_warns(self, session, caplog):
        with caplog.at_level(logging.WARNING, logger="sgdb.client"):
            client = SGDB(session=session)
        assert client.key is None
        assert "API key not provided" in caplog.text

    def test_missing_key_still_requests_without_authorization(self, session):
        session.request.return_value = make_response({"success": True, "data": {"id": 1}})
        client = SGDB(session=session)

        assert client.get_game("id", 1) == {"id": 1}
        _, url, kwargs = sent(session)
        assert url == f"{DEFAULT_BASE_URL}/games/id/1"
        assert "Authorization" not in kwargs["headers"]

    def test_custom_base_url_and_timeout(self, session):
        client = SGDB("k", base_url="http://localhost:8000/api", timeout=5, session=session)
        client.get_game_by_id(7)
        _, url, kwargs = sent(session)
        assert url == "http://localhost:8000/api/games/id/7"
        assert kwargs["timeout"] == 5

    def test_default_timeout_is_left_to_transport(self, client, session):
        client.get_game_by_id(7)
        _, _, kwargs = sent(session)
        assert kwargs["timeout"] is None

    def test_headers_cannot_be_changed_after_construction(self, client, session):
        client.headers["Authorization"] = "Bearer hijacked"
        client.get_game_by_id(1)
        _, _, kwargs = sent(session)
        assert kwargs["headers"]["Authorization"] == "Bearer test-key"
        assert client.headers["Authorization"] == "Bearer test-key"

    def test_from_config(self, session):
        config = ClientConfig(key="cfg", headers={"User-Agent": "tests"}, base_url="http://x")
        client = SGDB.from_config(config, session=session)
        assert client.headers == {"User-Agent": "tests", "Authorization": "Bearer cfg"}
        assert client.base_url == "http://x"

    def test_context_manager_closes_session(self, session):
        with SGDB("k", session=session) as client:
            assert client.key == "k"
        session.close.assert_called_once()


class TestConfigFromEnv:
    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        # setenv then delenv so values written by load_dotenv are removed on teardown
        for name in ("SGDB_API_KEY", "SGDB_BASE_URL", "SGDB_TIMEOUT"):
            monkeypatch.setenv(name, "")
            monkeypatch.delenv(name)

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SGDB_API_KEY", "from-env")
        monkeypatch.setenv("SGDB_TIMEOUT", "2.5")
        config = ClientConfig.from_env(str(tmp_path / "missing.env"))
        assert config.key == "from-env"
        assert config.timeout == 2.5
        assert config.base_url == DEFAULT_BASE_URL

    def test_reads_dotenv_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("SGDB_API_KEY=dotenv-key\nSGDB_BASE_URL=http://dotenv\n")
        config = ClientConfig.from_env(str(env_file))
        assert config.key == "dotenv-key"
        assert config.base_url == "http://dotenv"
        assert config.timeout is None

    def test_environment_wins_over_dotenv(self, monkeypatch, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("SGDB_API_KEY=dotenv-key\n")
        monkeypatch.setenv("SGDB_API_KEY", "real-key")
        assert ClientConfig.from_env(str(env_file)).key == "real-key"

    def test_finds_dotenv_in_working_directory(self, monkeypatch, tmp_path):
        (tmp_path / ".env").write_text("SGDB_API_KEY=cwd-key\n")
        monkeypatch.chdir(tmp_path)
        assert ClientConfig.from_env().key == "cwd-key"

    def test_client_from_env(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("SGDB_API_KEY=dotenv-key\n")
        client = SGDB.from_env(str(env_file))
        assert client.headers["Authorization"] == "Bearer dotenv-key"


@pytest.mark.parametrize(
    "name",
    [
        "get_game", "get_game_by_id", "get_game_by_steam_app_id",
        "get_grids", "get_grids_by_id", "get_grids_by_steam_app_id",
        "vote_grid", "upvote_grid", "downvote_grid",
        "upload_grid", "delete_grids", "search_game",
    ],
)
def test_public_operations_document_their_endpoint(name):
    doc = getattr(SGDB, name).__doc__
    assert doc and "(" in doc and "/" in doc
