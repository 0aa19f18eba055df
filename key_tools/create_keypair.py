"""
Tool for creating the RSA key pair used to sign payloads.
Writes <path> (private key) and <path>.pub (public key).
"""
import sys
from typing import List, Optional

from keystore import create_key_pair_files
from signing.config import KEY_SIZE
from signing.errors import CryptoError

from . import setup_logging


def create_keypair(private_key_path: str) -> None:
    """
    Create a new key pair on disk.

    Args:
        private_key_path: Where to save the private key; the public key
            is saved next to it with a ".pub" suffix
    """
    print("=" * 60)
    print("CREATING RSA KEY PAIR")
    print("=" * 60)

    print(f"\n[1/1] Generating {KEY_SIZE}-bit RSA key pair (this may take a while)...")
    private_path, public_path = create_key_pair_files(private_key_path)
    print(f"   ✓ Private key saved to: {private_path}")
    print(f"   ✓ Public key saved to: {public_path}")

    print(f"\n⚠️  IMPORTANT: Keep {private_path} secure!")
    print("   Anyone holding it can sign payloads in your name.\n")


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: python -m key_tools.create_keypair <private_key_path>")
        return 1

    setup_logging()
    try:
        create_keypair(args[0])
    except CryptoError as e:
        print(f"❌ {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
