import secrets

from .errors import RandomnessError

DICE_PER_WORD = 5
DIE_SIDES = 6


class SecureDiceRoller:
    """Simulates five physical dice with the operating system's CSPRNG.

    No state is kept between calls, so one instance can be shared across
    threads.
    """

    def roll_dice(self) -> str:
        """Generate a 5-dice roll combination, e.g. ``"34521"``."""
        try:
            return "".join(
                str(secrets.randbelow(DIE_SIDES) + 1) for _ in range(DICE_PER_WORD)
            )
        except (OSError, NotImplementedError) as e:
            raise RandomnessError(f"Secure random source unavailable: {e}") from e
