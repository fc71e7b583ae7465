# Area: Shared
"""
kgp_client._shared.credentials — RSA challenge/response
=======================================================

The server sends an integer challenge; the client answers with
``challenge ** d mod N``. The server checks the answer with the public
key ``(N, e)``. Keys are supplied by the operator, never generated here.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..errors import AuthConfigError


@dataclass(frozen=True)
class Credential:
    """RSA key triple. Public key (modulus, public_exponent), private key (modulus, private_exponent)."""
    modulus: int
    public_exponent: int
    private_exponent: int

    @classmethod
    def from_optional(
        cls,
        modulus: Optional[int],
        public_exponent: Optional[int],
        private_exponent: Optional[int],
    ) -> Optional["Credential"]:
        """Build a Credential when all three parts are given, None when none are.

        Raises
        ------
        AuthConfigError
            If only some of the parts are given.
        """
        parts = {
            "modulus": modulus,
            "public_exponent": public_exponent,
            "private_exponent": private_exponent,
        }
        missing = [name for name, value in parts.items() if value is None]
        if len(missing) == len(parts):
            return None
        if missing:
            raise AuthConfigError(missing)
        return cls(modulus, public_exponent, private_exponent)

    def sign(self, challenge: int) -> int:
        """Answer a challenge: ``challenge ** private_exponent mod modulus``."""
        return pow(challenge % self.modulus, self.private_exponent, self.modulus)

    def verify(self, challenge: int, response: int) -> bool:
        """What the server checks: ``response ** public_exponent mod modulus == challenge``."""
        return pow(response, self.public_exponent, self.modulus) == challenge % self.modulus

    def __repr__(self) -> str:
        # keep the private exponent out of logs
        return f"Credential(modulus={self.modulus}, public_exponent={self.public_exponent})"
