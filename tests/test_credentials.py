"""Tests for credential resolution and sufficiency."""

import pytest

from twitter_sessions.credentials.models import (
    REQUIRED_FIELDS,
    CredentialField,
    CredentialSet,
    is_sufficient,
)
from twitter_sessions.credentials.resolver import (
    DEFAULT_SOURCES,
    CredentialResolver,
    character_secret,
    character_setting,
    runtime_setting,
)
from twitter_sessions.utils.sanitization import REDACTED

from helpers import make_runtime


class TestCredentialResolverPrecedence:
    """Tests for source precedence."""

    def test_runtime_setting_beats_character_setting(self):
        """Test runtime setting wins over character setting."""
        runtime = make_runtime(
            settings={"TWITTER_USERNAME": "a"},
            character_settings={"TWITTER_USERNAME": "b"},
        )
        creds = CredentialResolver().resolve(runtime)
        assert creds.username == "a"

    def test_character_setting_beats_secret(self):
        """Test character setting wins over character secret."""
        runtime = make_runtime(
            character_settings={"TWITTER_PASSWORD": "from-settings"},
            secrets={"TWITTER_PASSWORD": "from-secrets"},
        )
        creds = CredentialResolver().resolve(runtime)
        assert creds.password == "from-settings"

    def test_secret_used_when_nothing_else_defined(self):
        """Test character secret is the last fallback."""
        runtime = make_runtime(secrets={"TWITTER_EMAIL": "e@x.com"})
        creds = CredentialResolver().resolve(runtime)
        assert creds.email == "e@x.com"

    def test_fields_resolve_independently(self):
        """Test each field picks its own winning source."""
        runtime = make_runtime(
            settings={"TWITTER_USERNAME": "user"},
            character_settings={"TWITTER_PASSWORD": "pw"},
            secrets={"TWITTER_EMAIL": "mail@x.com", "TWITTER_2FA_SECRET": "otp"},
        )
        creds = CredentialResolver().resolve(runtime)
        assert creds.username == "user"
        assert creds.password == "pw"
        assert creds.email == "mail@x.com"
        assert creds.two_factor_secret == "otp"

    def test_empty_string_falls_through(self):
        """Test an empty runtime setting does not shadow a lower source."""
        runtime = make_runtime(
            settings={"TWITTER_USERNAME": ""},
            character_settings={"TWITTER_USERNAME": "fallback"},
        )
        creds = CredentialResolver().resolve(runtime)
        assert creds.username == "fallback"

    def test_later_sources_not_consulted(self):
        """Test lookups stop at the first defined value."""
        calls = []

        def first(runtime, key):
            calls.append(("first", key))
            return "value"

        def second(runtime, key):
            calls.append(("second", key))
            return "other"

        creds = CredentialResolver([first, second]).resolve(make_runtime())
        assert all(source == "first" for source, _ in calls)
        assert creds.username == "value"

    def test_missing_character_mappings(self):
        """Test characters with no settings/secrets resolve to nothing."""
        runtime = make_runtime()
        runtime.character.settings = None
        runtime.character.secrets = None
        creds = CredentialResolver().resolve(runtime)
        assert len(creds) == 0

    def test_default_sources_order(self):
        """Test default precedence order."""
        assert DEFAULT_SOURCES == (runtime_setting, character_setting, character_secret)

    def test_resolver_does_not_mutate_runtime(self):
        """Test resolution leaves runtime settings untouched."""
        runtime = make_runtime(secrets={"TWITTER_EMAIL": "e@x.com"})
        CredentialResolver().resolve(runtime)
        assert runtime.settings == {}


class TestCredentialSet:
    """Tests for CredentialSet."""

    def test_absent_fields_omitted(self):
        """Test None and empty values are dropped."""
        creds = CredentialSet({
            CredentialField.USERNAME: "a",
            CredentialField.PASSWORD: None,
            CredentialField.EMAIL: "",
        })
        assert CredentialField.USERNAME in creds
        assert CredentialField.PASSWORD not in creds
        assert CredentialField.EMAIL not in creds
        assert len(creds) == 1

    def test_accepts_setting_names(self):
        """Test keys may be given as setting names."""
        creds = CredentialSet({"TWITTER_USERNAME": "a"})
        assert creds[CredentialField.USERNAME] == "a"
        assert "TWITTER_USERNAME" in creds

    def test_unknown_key_not_contained(self):
        """Test membership for unknown keys is False."""
        creds = CredentialSet({"TWITTER_USERNAME": "a"})
        assert "NOT_A_FIELD" not in creds

    def test_non_string_values_converted(self):
        """Test non-string values are stored as strings."""
        creds = CredentialSet({"TWITTER_PASSWORD": 1234})
        assert creds.password == "1234"

    def test_to_dict_redacts_secrets(self):
        """Test to_dict hides password, email and 2FA secret."""
        creds = CredentialSet({
            "TWITTER_USERNAME": "agent_bot",
            "TWITTER_PASSWORD": "hunter2",
            "TWITTER_EMAIL": "bot@example.com",
            "TWITTER_2FA_SECRET": "otp",
        })
        data = creds.to_dict()
        assert data["TWITTER_PASSWORD"] == REDACTED
        assert data["TWITTER_EMAIL"] == REDACTED
        assert data["TWITTER_2FA_SECRET"] == REDACTED
        assert data["TWITTER_USERNAME"].startswith("ag")
        assert "agent_bot" not in data["TWITTER_USERNAME"]

    def test_to_dict_unredacted(self):
        """Test to_dict can return raw values."""
        creds = CredentialSet({"TWITTER_PASSWORD": "hunter2"})
        assert creds.to_dict(redact=False) == {"TWITTER_PASSWORD": "hunter2"}

    def test_repr_never_shows_password(self):
        """Test repr is safe to log."""
        creds = CredentialSet({"TWITTER_PASSWORD": "hunter2"})
        assert "hunter2" not in repr(creds)

    def test_equality(self):
        """Test sets with equal contents compare equal."""
        assert CredentialSet({"TWITTER_USERNAME": "a"}) == CredentialSet({CredentialField.USERNAME: "a"})


class TestSufficiency:
    """Tests for the sufficiency predicate."""

    def test_username_alone_insufficient(self):
        """Test username alone is not enough."""
        creds = CredentialSet({"TWITTER_USERNAME": "a"})
        assert not creds.is_sufficient
        assert creds.missing == [CredentialField.PASSWORD, CredentialField.EMAIL]

    def test_username_password_email_sufficient(self):
        """Test the three required fields are enough."""
        creds = CredentialSet({
            "TWITTER_USERNAME": "a",
            "TWITTER_PASSWORD": "p",
            "TWITTER_EMAIL": "e",
        })
        assert creds.is_sufficient
        assert creds.missing == []

    def test_two_factor_secret_does_not_matter(self):
        """Test 2FA secret never gates sufficiency."""
        base = {"TWITTER_USERNAME": "a", "TWITTER_PASSWORD": "p", "TWITTER_EMAIL": "e"}
        with_otp = CredentialSet({**base, "TWITTER_2FA_SECRET": "otp"})
        assert with_otp.is_sufficient
        assert is_sufficient(CredentialSet(base))

    @pytest.mark.parametrize("dropped", ["TWITTER_USERNAME", "TWITTER_PASSWORD", "TWITTER_EMAIL"])
    def test_any_required_field_missing(self, dropped):
        """Test dropping any required field makes it insufficient."""
        values = {"TWITTER_USERNAME": "a", "TWITTER_PASSWORD": "p", "TWITTER_EMAIL": "e"}
        del values[dropped]
        assert not is_sufficient(CredentialSet(values))

    def test_required_fields(self):
        """Test the required field set."""
        assert CredentialField.TWO_FACTOR_SECRET not in REQUIRED_FIELDS
        assert len(REQUIRED_FIELDS) == 3
