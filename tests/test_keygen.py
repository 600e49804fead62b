import re

from keygen import generate_key, mask_key

KEY_RE = re.compile(r"^ldp_live_[0-9a-f]{32}$")


def test_generate_key_format():
    for _ in range(200):
        key = generate_key()
        assert KEY_RE.match(key), key
        assert "-" not in key


def test_generate_key_is_unique():
    keys = {generate_key() for _ in range(10000)}
    assert len(keys) == 10000


def test_mask_key_hides_the_secret_part():
    key = "ldp_live_0123456789abcdef0123456789abcdef"
    masked = mask_key(key)
    assert masked == "ldp_live_****cdef"
    assert "0123456789" not in masked
