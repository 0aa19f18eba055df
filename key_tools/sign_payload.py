"""
Tool for signing a payload file with a private key.
Prints the SHA-256 digest and the base64 signature of the file contents.
"""
import sys
from pathlib import Path
from typing import List, Optional

from keystore import load_private_key
from signing.digest import compute_digest, compute_digest_hex
from signing.errors import CryptoError, FileIOError
from signing.signatures import sign_digest_b64

from . import setup_logging


def sign_payload(private_key_path: str, payload_path: str) -> str:
    """
    Sign the contents of payload_path.

    Returns:
        The base64-encoded signature
    """
    private_key = load_private_key(private_key_path)
    try:
        payload = Path(payload_path).read_bytes()
    except OSError as e:
        raise FileIOError("sign_payload", f"reading {payload_path}: {e}", path=payload_path) from e

    print(f"Digest (sha256): {compute_digest_hex(payload)}")
    signature = sign_digest_b64(private_key, compute_digest(payload))
    print(f"Signature: {signature}")
    return signature


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print("Usage: python -m key_tools.sign_payload <private_key_path> <payload_file>")
        return 1

    setup_logging()
    try:
        sign_payload(args[0], args[1])
    except CryptoError as e:
        print(f"❌ {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
