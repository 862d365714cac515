"""Tests for Pydantic models with exaroton API edge cases."""

from __future__ import annotations

import pytest

from exaclient.api.exceptions import ExarotonAPIError
from exaclient.api.models import (
    Account,
    AccountResponse,
    ConfigOption,
    CreditPool,
    FileInfo,
    GenericResponse,
    ListResponse,
    Players,
    Server,
    ServersResponse,
    ServerStatus,
    parse_response,
)
from exaclient.api.paths import file_path, pool_id, server_id


class TestCamelCaseAliases:
    """The API speaks camelCase; attributes are snake_case."""

    def test_file_info_flags(self):
        f = FileInfo.model_validate({
            "path": "/server.properties",
            "name": "server.properties",
            "isTextFile": True,
            "isConfigFile": True,
            "isWritable": True,
        })
        assert f.is_text_file is True
        assert f.is_config_file is True
        assert f.is_writable is True
        assert f.is_directory is False

    def test_credit_pool_fields(self, sample_pool_data):
        p = CreditPool.model_validate(sample_pool_data)
        assert p.is_owner is True
        assert p.own_share == 0.5

    def test_populate_by_name(self):
        p = CreditPool(id="x", name="pool", own_credits=5.0)
        assert p.own_credits == 5.0

    def test_players_list_alias(self):
        p = Players.model_validate({"max": 10, "count": 2, "list": ["Steve", "Alex"]})
        assert p.names == ["Steve", "Alex"]


class TestNoneToListCoercion:
    """The API may return null for list fields - models must handle it."""

    def test_players_list_none(self):
        p = Players.model_validate({"max": 10, "count": 0, "list": None})
        assert p.names == []

    def test_file_children_none(self):
        f = FileInfo.model_validate({"path": "/a", "name": "a", "children": None})
        assert f.children == []


class TestExtraFieldsIgnored:
    def test_server_ignores_extra(self, sample_server_data):
        s = Server.model_validate({**sample_server_data, "futureField": 1})
        assert s.id == sample_server_data["id"]
        assert not hasattr(s, "futureField")

    def test_account_ignores_extra(self):
        a = Account.model_validate({"name": "Steve", "plan": "free"})
        assert a.name == "Steve"


class TestServerModel:
    def test_minimal(self):
        s = Server(id="abc", name="test")
        assert s.status is ServerStatus.OFFLINE
        assert s.players.count == 0
        assert s.software is None
        assert s.is_online is False

    def test_full(self, sample_server_data):
        s = Server.model_validate(sample_server_data)
        assert s.status is ServerStatus.ONLINE
        assert s.is_online is True
        assert s.port == 25566
        assert s.players.names == ["Steve"]
        assert s.software.version == "1.20.4"

    @pytest.mark.parametrize("code,status", [
        (0, ServerStatus.OFFLINE),
        (2, ServerStatus.STARTING),
        (7, ServerStatus.CRASHED),
        (10, ServerStatus.PREPARING),
    ])
    def test_status_codes(self, code, status):
        s = Server(id="abc", name="test", status=code)
        assert s.status is status

    def test_unknown_status_code_is_kept(self, sample_server_data):
        s = Server.model_validate({**sample_server_data, "status": 11})
        assert s.status == 11
        assert isinstance(s.status, ServerStatus)
        assert s.status.name == "UNKNOWN_11"
        assert s.is_online is False

    def test_unknown_status_from_enum_call(self):
        assert ServerStatus(42).name == "UNKNOWN_42"
        assert ServerStatus(1) is ServerStatus.ONLINE


class TestConfigOption:
    def test_value_keeps_json_type(self):
        assert ConfigOption(key="pvp", value=True).value is True
        assert ConfigOption(key="max-players", value=20).value == 20
        assert ConfigOption(key="motd", value="hi").value == "hi"


class TestResponseEnvelope:
    def test_success_unwrap(self):
        r = AccountResponse.model_validate({
            "success": True, "error": None, "data": {"name": "Steve"},
        })
        assert r.unwrap().name == "Steve"

    def test_failure_unwrap_raises(self):
        r = AccountResponse.model_validate({
            "success": False, "error": "Invalid API key", "data": None,
        })
        assert r.data is None
        with pytest.raises(ExarotonAPIError, match="Invalid API key"):
            r.unwrap()

    def test_failure_without_message(self):
        r = GenericResponse.model_validate({"success": False})
        with pytest.raises(ExarotonAPIError, match="not successful"):
            r.unwrap()

    def test_generic_data_string(self):
        r = GenericResponse.model_validate({"success": True, "data": "ok"})
        assert r.data == "ok"

    def test_generic_data_null(self):
        r = GenericResponse.model_validate({"success": True, "error": None, "data": None})
        assert r.unwrap() is None

    def test_list_response(self):
        r = ListResponse.model_validate({"success": True, "data": ["whitelist", "ops"]})
        assert r.data == ["whitelist", "ops"]

    def test_servers_response(self, sample_server_data):
        r = ServersResponse.model_validate({"success": True, "data": [sample_server_data]})
        assert isinstance(r.data[0], Server)


class TestPaths:
    def test_server_id_from_str(self):
        assert server_id("abc") == "abc"

    def test_server_id_from_object(self, sample_server):
        assert server_id(sample_server) == sample_server.id

    def test_pool_id_from_object(self, sample_pool):
        assert pool_id(sample_pool) == sample_pool.id

    @pytest.mark.parametrize("raw,expected", [
        ("server.properties", "server.properties"),
        ("/plugins/", "plugins"),
        ("world/level.dat", "world/level.dat"),
        ("plugins/My Plugin/config.yml", "plugins/My%20Plugin/config.yml"),
    ])
    def test_file_path(self, raw, expected):
        assert file_path(raw) == expected


class TestParseResponse:
    def test_valid_payload(self, sample_server_data):
        r = parse_response(ServersResponse, {"success": True, "data": [sample_server_data]})
        assert r.data[0].name == "example"

    def test_empty_reply_is_success_without_data(self):
        r = parse_response(GenericResponse, {})
        assert r.success is True
        assert r.data is None
        assert r.unwrap() is None

    def test_mismatched_payload_raises_api_error(self):
        with pytest.raises(ExarotonAPIError, match="ServersResponse"):
            parse_response(ServersResponse, {"success": True, "data": [{"name": "no id"}]})

    def test_missing_success_raises_api_error(self):
        with pytest.raises(ExarotonAPIError):
            parse_response(AccountResponse, {"data": {"name": "Steve"}})
