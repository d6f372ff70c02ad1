"""Tests for the environment registry and environment checks."""

import pytest

from envirator import Environment, Envirator, EnvironmentRegistry
from envirator.exceptions import ConfigurationError


class TestEnvironmentRegistry:
    """Tests for EnvironmentRegistry."""

    def test_built_in_roles(self):
        """Test the four built-in roles and labels."""
        registry = EnvironmentRegistry()

        assert dict(registry) == {
            "development": "development",
            "production": "production",
            "staging": "staging",
            "test": "test",
        }

    def test_labels_are_normalised(self):
        """Test that labels are lower-cased and trimmed."""
        registry = EnvironmentRegistry({"production": "  Prod ", "qa": "QA"})

        assert registry.production == "prod"
        assert registry["qa"] == "qa"
        assert len(registry) == 5

    def test_later_overrides_win(self):
        """Test override precedence."""
        registry = EnvironmentRegistry({"development": "develop"}, {"development": "in-development"})

        assert registry.development == "in-development"

    def test_none_overrides_are_skipped(self):
        """Test that None override mappings are ignored."""
        assert EnvironmentRegistry(None, None).test == "test"

    def test_is_immutable(self):
        """Test that the registry cannot be modified."""
        registry = EnvironmentRegistry()

        with pytest.raises(TypeError):
            registry["production"] = "prod"  # type: ignore[index]

    def test_non_string_label_rejected(self):
        """Test that labels must be strings."""
        with pytest.raises(ConfigurationError):
            EnvironmentRegistry({"production": 1})  # type: ignore[dict-item]

    def test_label_for_and_classify(self):
        """Test lookups in both directions."""
        registry = EnvironmentRegistry({"staging": "staged"})

        assert registry.label_for("staging") == "staged"
        assert registry.label_for("unknown") is None
        assert registry.classify("STAGED") == "staging"
        assert registry.classify("nowhere") is None
        assert registry.classify(None) is None

    def test_default_label(self):
        """Test default label resolution."""
        registry = EnvironmentRegistry({"custom": "my_custom_env"})

        assert registry.default_label() == "development"
        assert registry.default_label(no_default_env=True) == ""
        assert registry.default_label(default_env="production") == "production"
        assert registry.default_label(default_env="custom") == "my_custom_env"
        assert registry.default_label(default_env="unknown") == "development"


class TestEnvironmentChecks:
    """Tests for is_production/is_development/is_staging/is_test."""

    @pytest.mark.parametrize(
        "label, expected",
        [
            (Environment.TEST, "is_test"),
            (Environment.PRODUCTION, "is_production"),
            (Environment.DEVELOPMENT, "is_development"),
            (Environment.STAGING, "is_staging"),
        ],
    )
    def test_exactly_one_check_is_true(self, make_env, label, expected):
        """Test that the matching check alone is true."""
        env = make_env()
        env.set_env("NODE_ENV", label)

        for check in ("is_test", "is_production", "is_development", "is_staging"):
            assert getattr(env, check) is (check == expected)

    def test_current_env_defaults_to_development(self, make_env):
        """Test the default environment when NODE_ENV is unset."""
        env = make_env()

        assert env.current_env == "development"
        assert env.is_development

    def test_current_env_is_normalised(self, make_env):
        """Test that the selector value is lower-cased and trimmed."""
        env = make_env()
        env.current_env = " Production "

        assert env.current_env == "production"
        assert env.is_production

    def test_current_env_setter_writes_selector(self, make_env, memory_store):
        """Test that assigning current_env writes the selector variable."""
        env = make_env(node_env="APP_ENV")
        env.current_env = "staging"

        assert memory_store.get("APP_ENV") == "staging"
        assert env.is_staging

    def test_environment_name_overrides(self, make_env):
        """Test renamed built-in environments."""
        env = make_env(
            environments={
                "test": "TESTs",
                "production": "Prod",
                "staging": "Stagings",
                "development": "DevelopMents",
            }
        )

        env.set_env("NODE_ENV", Environment.TEST)
        assert not env.is_test
        env.set_env("NODE_ENV", Environment.PRODUCTION)
        assert not env.is_production

        env.set_env("NODE_ENV", "Stagings")
        assert env.is_staging
        env.set_env("NODE_ENV", "DevelopMents")
        assert env.is_development
        env.set_env("NODE_ENV", "TESTs")
        assert env.is_test
        env.set_env("NODE_ENV", "Prod")
        assert env.is_production

    def test_is_environment_for_custom_role(self, make_env):
        """Test is_environment with a custom role."""
        env = make_env(environments={"qa": "quality"})
        env.current_env = "quality"

        assert env.is_environment("qa")
        assert not env.is_environment("unknown")


class CustomEnv(Envirator):
    """Envirator with an extra custom environment as its default."""

    def __init__(self, environments=None, **options):
        super().__init__(
            default_env="custom",
            environments={"custom": "my_custom_env", **(environments or {})},
            **options,
        )

    @property
    def is_custom(self) -> bool:
        return self.is_environment("custom")


class TestSubclassing:
    """Tests for extending Envirator with custom environments."""

    def test_is_envirator(self, memory_store):
        """Test the subclass relationship."""
        assert isinstance(CustomEnv(store=memory_store), Envirator)

    def test_default_environment_is_custom(self, memory_store):
        """Test that the custom default environment applies."""
        env = CustomEnv(store=memory_store)

        assert env.current_env == "my_custom_env"
        assert env.is_custom

    def test_other_checks_are_false(self, memory_store):
        """Test that built-in checks are false in the custom environment."""
        env = CustomEnv(store=memory_store)

        assert not env.is_development
        assert not env.is_production
        assert not env.is_staging
        assert not env.is_test


class TestStrictMode:
    """Tests for no_default_env."""

    def test_unset_selector_is_fatal(self, make_env, recording_logger, recording_terminator):
        """Test that reading current_env fails when NODE_ENV is unset."""
        env = make_env(no_default_env=True)

        assert env.current_env is None
        assert recording_logger.errors == ["[ENV ERROR]: Missing environment variable 'NODE_ENV'"]
        assert recording_terminator.codes == [1]

    def test_blank_selector_is_fatal(self, make_env, recording_logger, recording_terminator):
        """Test that a blank selector is treated as unset."""
        env = make_env(no_default_env=True, node_env="APP_ENV")
        env.current_env = "  "

        assert env.current_env is None
        assert recording_logger.errors == ["[ENV ERROR]: Missing environment variable 'APP_ENV'"]

    def test_fatal_even_with_warn_only(self, make_env, recording_logger, recording_terminator):
        """Test that warn_only does not soften a missing selector."""
        env = make_env(no_default_env=True, warn_only=True)

        assert not env.is_production
        assert recording_terminator.codes == [1]
        assert recording_logger.warnings == []

    def test_set_selector(self, make_env, recording_logger, recording_terminator):
        """Test that a set selector works normally."""
        env = make_env(no_default_env=True)
        env.current_env = "test"

        assert env.is_test
        assert recording_logger.records == []
        assert not recording_terminator.called
