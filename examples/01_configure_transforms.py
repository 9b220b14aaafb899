#!/usr/bin/env python3
"""
Transform Configuration Example

Demonstrates building validated IPsec transform descriptors, handling
rejected parameters, and passing descriptors across a process boundary.
"""

import os

from ipsec_algorithm import (
    AUTH_CRYPT_AES_GCM,
    AUTH_HMAC_SHA256,
    CRYPT_AES_CBC,
    IpSecAlgorithm,
    ValidationError,
    decode,
    encode,
    get_supported_algorithms,
)


def main():
    print("IPsec Transform Configuration Example")
    print("=" * 50)

    # Example 1: Encryption + authentication pair
    print("\n1. Building an AES-CBC + HMAC-SHA256 transform pair...")
    crypt = IpSecAlgorithm(CRYPT_AES_CBC, os.urandom(16))
    auth = IpSecAlgorithm(AUTH_HMAC_SHA256, os.urandom(32), 128)
    print(f"   Crypt: {crypt}")
    print(f"   Auth:  {auth}")

    # Example 2: AEAD (key includes the 32-bit salt)
    print("\n2. Building an AES-GCM AEAD transform...")
    aead = IpSecAlgorithm(AUTH_CRYPT_AES_GCM, os.urandom(36), 128)
    print(f"   AEAD:  {aead}")

    # Example 3: Rejected parameters
    print("\n3. Rejected parameters...")
    for name, key, trunc in [
        ("rot13", os.urandom(16), None),
        (AUTH_HMAC_SHA256, os.urandom(32), None),
        (CRYPT_AES_CBC, os.urandom(48), None),
        (AUTH_HMAC_SHA256, os.urandom(32), 64),
    ]:
        try:
            IpSecAlgorithm(name, key, trunc)
        except ValidationError as e:
            print(f"   {e.kind.value}: {e}")

    # Example 4: Wire round trip
    print("\n4. Encoding for another process...")
    wire = encode(aead)
    restored = decode(wire)
    print(f"   Encoded: {len(wire)} bytes")
    assert restored == aead, "Round trip failed!"
    print("   Verification: PASSED")

    # Example 5: Platform support
    print("\n5. Algorithms supported on this build...")
    for algo in sorted(get_supported_algorithms()):
        print(f"   {algo}")


if __name__ == "__main__":
    main()
