import base58

PUBLIC_KEY_LENGTH = 32


class InvalidAddressError(ValueError):
    pass


def parse_public_key(address: str) -> str:
    """
    Validate a base58 Solana public key and return it in canonical form.

    Raises InvalidAddressError when the text is not base58 or does not
    decode to a 32-byte key.
    """
    if not isinstance(address, str) or not address.strip():
        raise InvalidAddressError("Empty Solana address")
    s = address.strip()
    try:
        raw = base58.b58decode(s)
    except ValueError as e:
        raise InvalidAddressError(f"Invalid Solana address {s!r}: {e}") from e
    if len(raw) != PUBLIC_KEY_LENGTH:
        raise InvalidAddressError(
            f"Invalid Solana address {s!r}: decodes to {len(raw)} bytes, expected {PUBLIC_KEY_LENGTH}"
        )
    return base58.b58encode(raw).decode('utf-8')
