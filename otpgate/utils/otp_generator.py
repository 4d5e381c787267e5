"""
OTP Generator
Generate numeric one-time passcodes
"""

import secrets
from typing import Callable


class OTPGenerator:
    """Zero-padded 6-digit OTP generation"""

    OTP_LENGTH = 6

    def __init__(self, randbelow: Callable[[int], int] = secrets.randbelow):
        """
        Args:
            randbelow: Random source returning an int in [0, n).
                Defaults to the cryptographically secure secrets.randbelow.
        """
        self._randbelow = randbelow

    def generate(self) -> str:
        """
        Generate a 6-digit OTP

        Returns:
            OTP string, uniform over 000000-999999
        """
        value = self._randbelow(10 ** self.OTP_LENGTH)
        return f"{value:0{self.OTP_LENGTH}d}"
