import uuid

KEY_PREFIX = "ldp_live_"


def generate_key() -> str:
    """Return a new API key: ldp_live_ followed by 32 lowercase hex chars."""
    return KEY_PREFIX + uuid.uuid4().hex


def mask_key(key: str) -> str:
    """Shortened form of a key that is safe to write to logs."""
    prefix = KEY_PREFIX if key.startswith(KEY_PREFIX) else ""
    return f"{prefix}****{key[-4:]}"
