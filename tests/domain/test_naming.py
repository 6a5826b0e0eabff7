"""Tests for the default naming policy."""

import pytest

from crateguard.domain.naming import (
    DEFAULT_NAMING_POLICY,
    CratesNamingPolicy,
    NamingPolicy,
    valid_ident,
)


class TestValidIdent:
    @pytest.mark.parametrize("name", ["serde", "serde_json", "tokio-util", "a", "A1"])
    def test_accepts(self, name: str) -> None:
        assert valid_ident(name)

    @pytest.mark.parametrize("name", ["", "1password", "_private", "-dash", "has space", "café"])
    def test_rejects(self, name: str) -> None:
        assert not valid_ident(name)


class TestCratesNamingPolicy:
    def test_default_policy_satisfies_protocol(self) -> None:
        assert isinstance(DEFAULT_NAMING_POLICY, NamingPolicy)

    def test_name_length_limit(self) -> None:
        policy = CratesNamingPolicy(max_name_length=5)
        assert policy.valid_name("abcde")
        assert not policy.valid_name("abcdef")

    def test_default_length_is_64(self) -> None:
        assert DEFAULT_NAMING_POLICY.valid_name("a" * 64)
        assert not DEFAULT_NAMING_POLICY.valid_name("a" * 65)

    @pytest.mark.parametrize("keyword", ["cli", "http2", "no-std", "2d", "graphe"])
    def test_keyword_accepts(self, keyword: str) -> None:
        assert DEFAULT_NAMING_POLICY.valid_keyword(keyword)

    @pytest.mark.parametrize("keyword", ["", "-cli", "_x", "c++", "two words"])
    def test_keyword_rejects(self, keyword: str) -> None:
        assert not DEFAULT_NAMING_POLICY.valid_keyword(keyword)

    @pytest.mark.parametrize("feature", ["default", "std", "serde/derive", "tokio-full"])
    def test_feature_accepts(self, feature: str) -> None:
        assert DEFAULT_NAMING_POLICY.valid_feature_name(feature)

    @pytest.mark.parametrize("feature", ["", "/derive", "serde/", "a/b/c", "9lives"])
    def test_feature_rejects(self, feature: str) -> None:
        assert not DEFAULT_NAMING_POLICY.valid_feature_name(feature)
