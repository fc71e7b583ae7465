# Area: Shared Tests
"""Tests for the RSA credential."""

import pytest

from kgp_client._shared.credentials import Credential
from kgp_client.errors import AuthConfigError

# Textbook key: p=61, q=53
N, E, D = 3233, 17, 413


class TestCredential:
    """Tests for signing and verification."""

    @pytest.mark.parametrize("challenge", [0, 1, 65, 1234, 3232])
    def test_signature_verifies(self, challenge):
        credential = Credential(N, E, D)
        response = credential.sign(challenge)
        assert pow(response, E, N) == challenge
        assert credential.verify(challenge, response)

    def test_large_challenge_reduced(self):
        """Test that challenges above the modulus are reduced first."""
        credential = Credential(N, E, D)
        assert credential.sign(65 + N) == credential.sign(65)

    def test_wrong_response_fails_verification(self):
        credential = Credential(N, E, D)
        assert credential.verify(65, credential.sign(65) + 1) is False

    def test_repr_hides_private_exponent(self):
        assert "413" not in repr(Credential(N, E, D))


class TestFromOptional:
    """Tests for building a credential from optional config values."""

    def test_all_none_gives_none(self):
        assert Credential.from_optional(None, None, None) is None

    def test_complete_triple(self):
        assert Credential.from_optional(N, E, D) == Credential(N, E, D)

    def test_partial_triple_raises(self):
        with pytest.raises(AuthConfigError) as exc_info:
            Credential.from_optional(N, None, D)
        assert exc_info.value.missing == ["public_exponent"]

    def test_only_modulus_raises(self):
        with pytest.raises(AuthConfigError, match="public_exponent, private_exponent"):
            Credential.from_optional(N, None, None)
