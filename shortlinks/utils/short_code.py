import string
import random

from shortlinks.exceptions import AllocatorExhausted, InvalidShortcodeFormat, ShortcodeCollision


class ShortCodeGenerator:
    """Allocate short codes from the Base62 alphabet."""

    # Base62 character set (alphanumeric)
    CHARSET = string.ascii_letters + string.digits  # a-zA-Z0-9

    MIN_CUSTOM_LENGTH = 3
    MAX_CUSTOM_LENGTH = 10

    @staticmethod
    def generate_random(length=6, rng=None):
        """Draw a code uniformly from the Base62 alphabet."""
        rng = rng or random
        return ''.join(rng.choices(ShortCodeGenerator.CHARSET, k=length))

    @staticmethod
    def is_valid_custom_code(code, min_len=MIN_CUSTOM_LENGTH, max_len=MAX_CUSTOM_LENGTH):
        """Validate custom short code."""
        if not isinstance(code, str) or not code:
            return False

        # Only ASCII letters and digits
        if not all(c in ShortCodeGenerator.CHARSET for c in code):
            return False

        # Check length constraints
        if not (min_len <= len(code) <= max_len):
            return False

        return True

    @staticmethod
    def allocate(requested_code, exists, rng=None, length=6, max_attempts=1000,
                 min_len=MIN_CUSTOM_LENGTH, max_len=MAX_CUSTOM_LENGTH, reserved=()):
        """
        Pick the key for a new short URL.

        Args:
            requested_code: Optional caller-supplied code
            exists: Callable telling whether a code is currently live
            rng: Random source (``random.Random`` compatible)
            length: Length of generated codes
            max_attempts: Generation attempts before giving up
            reserved: Codes that clash with fixed routes and are never handed out

        Returns:
            str: The allocated code

        Raises:
            InvalidShortcodeFormat: requested code is malformed
            ShortcodeCollision: requested code is already live or reserved
            AllocatorExhausted: no free random code within max_attempts
        """
        if requested_code is not None and requested_code != '':
            if not ShortCodeGenerator.is_valid_custom_code(requested_code, min_len, max_len):
                raise InvalidShortcodeFormat(
                    f'Shortcode must be {min_len}-{max_len} alphanumeric characters'
                )
            if requested_code in reserved or exists(requested_code):
                raise ShortcodeCollision(f"Shortcode '{requested_code}' is already in use")
            return requested_code

        for _ in range(max_attempts):
            code = ShortCodeGenerator.generate_random(length, rng)
            if code not in reserved and not exists(code):
                return code

        raise AllocatorExhausted(
            f'No unique shortcode found after {max_attempts} attempts'
        )
