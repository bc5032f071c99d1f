"""Unit tests for SecurityConfig entity."""

import pytest

from pipeguard.domain.entities import Policy, Role, SecurityConfig


def test_roles_for_principal(security_config: SecurityConfig) -> None:
    assert [r.name for r in security_config.roles_for("alice")] == ["env_viewer"]
    assert [r.name for r in security_config.roles_for("bob")] == ["env_admin"]
    assert security_config.roles_for("mallory") == ()


def test_find_is_case_insensitive(security_config: SecurityConfig) -> None:
    assert security_config.find("ENV_VIEWER").name == "env_viewer"
    assert security_config.find("missing") is None


def test_with_role_returns_new_snapshot(security_config: SecurityConfig) -> None:
    extended = security_config.with_role(Role.named("extra"))
    assert len(extended.roles) == 3
    assert len(security_config.roles) == 2


def test_validate_tree_valid_config(security_config: SecurityConfig) -> None:
    assert security_config.validate_tree() == {}


def test_validate_tree_reports_one_error_for_duplicate() -> None:
    config = SecurityConfig.of(Role.named("admin"), Role.named("admin"))

    result = config.validate_tree()

    assert list(result) == ["roles[1]:admin"]
    assert result["roles[1]:admin"].get("name") == [
        "Role names should be unique. Role with the same name exists."
    ]


def test_validate_tree_reports_one_format_error_per_role() -> None:
    config = SecurityConfig.of(Role.named(None), Role.named(".x"), Role.named("ok"))

    result = config.validate_tree()

    assert set(result) == {"roles[0]:null", "roles[1]:.x"}
    assert len(result["roles[0]:null"].get("name")) == 1
    assert "'null'" in result["roles[0]:null"].get("name")[0]
    assert len(result["roles[1]:.x"].get("name")) == 1


class TestFromMapping:
    """SecurityConfig.from_mapping builds a snapshot from parsed data."""

    def test_builds_roles(self) -> None:
        config, errors = SecurityConfig.from_mapping(
            {
                "roles": [
                    {
                        "name": "deployers",
                        "users": ["alice"],
                        "policy": [
                            {"effect": "allow", "action": "view", "type": "environment", "resource": "*"}
                        ],
                    },
                    {"name": "nobody"},
                ]
            }
        )
        assert errors == {}
        assert [r.name for r in config.roles] == ["deployers", "nobody"]
        assert config.roles[0].has_permission_for("view", "environment", "prod")
        assert config.roles[1].policy == Policy()

    def test_collects_directive_errors_per_role(self) -> None:
        config, errors = SecurityConfig.from_mapping(
            {
                "roles": [
                    {
                        "name": "broken",
                        "policy": [
                            {"effect": "allow", "action": "run", "type": "pipeline", "resource": "x"}
                        ],
                    }
                ]
            }
        )
        assert len(config.roles[0].policy) == 0
        assert errors["roles[0]:broken"].get("policy[0].action")

    def test_empty_mapping(self) -> None:
        config, errors = SecurityConfig.from_mapping({})
        assert config.roles == ()
        assert errors == {}

    def test_non_string_name_reports_format_error(self) -> None:
        config, _ = SecurityConfig.from_mapping({"roles": [{"name": 42}]})
        result = config.validate_tree()
        assert list(result) == ["roles[0]:42"]
        assert len(result["roles[0]:42"].get("name")) == 1

    @pytest.mark.parametrize("users", ["alice", None, ["alice", 7], {"alice": 1}])
    def test_malformed_users_are_reported(self, users) -> None:
        config, errors = SecurityConfig.from_mapping({"roles": [{"name": "ops", "users": users}]})
        assert config.roles[0].users == ()
        assert config.roles_for("a") == ()
        assert errors["roles[0]:ops"].get("users") == ["Users must be a list of user names."]


def test_find_unset_name_returns_none() -> None:
    config = SecurityConfig.of(Role.named(None), Role.named("admin"))
    assert config.find(None) is None
    assert config.find("ADMIN").name == "admin"
