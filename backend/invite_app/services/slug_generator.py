"""Random slug generation for invitation URLs."""
import secrets

SLUG_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"
SLUG_LENGTH = 5  # 36^5 ≈ 60M possible slugs


def generate_slug(length: int = SLUG_LENGTH) -> str:
    """Return a random slug; uniqueness is the caller's job."""
    return "".join(secrets.choice(SLUG_ALPHABET) for _ in range(length))
