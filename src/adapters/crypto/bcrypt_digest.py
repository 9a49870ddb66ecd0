"""
bcrypt digest adapter - Implements SecretVerifier and SecretDigester.

bcrypt.checkpw() compares in constant time and raises ValueError when the
stored digest is not a bcrypt hash; that error is left to propagate so a
corrupt digest is reported as a fault, not as a wrong password.
"""

import bcrypt


class BcryptPasswordDigest:
    """
    Implements SecretVerifier and SecretDigester protocols via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, cost: int = 10) -> None:
        """
        Args:
            cost: bcrypt work factor used for new digests
        """
        self._cost = cost

    def digest(self, plaintext: str) -> str:
        return bcrypt.hashpw(plaintext.encode(), bcrypt.gensalt(rounds=self._cost)).decode()

    def verify(self, plaintext: str, digest: str) -> bool:
        return bcrypt.checkpw(plaintext.encode(), digest.encode())
