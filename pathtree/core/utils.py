import base64

from Crypto.Random import get_random_bytes


def b64encode(data: bytes) -> str:
    """Encodes bytes to Base64 URL-safe without padding."""
    encoded = base64.b64encode(data).decode()
    encoded = encoded.replace('+', '-').replace('/', '_')
    encoded = encoded.rstrip('=')
    return encoded


def generate_handle(size: int = 6) -> str:
    """Generates a random node handle (8 characters for the default size)."""
    return b64encode(get_random_bytes(size))
