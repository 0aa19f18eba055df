"""
Tool for checking a base64 signature over a payload file.
Exits with status 0 when the signature is valid and 1 otherwise.
"""
import sys
from pathlib import Path
from typing import List, Optional

from keystore import load_public_key
from signing.errors import CryptoError, FileIOError
from signing.signatures import verify_signature_b64

from . import setup_logging


def verify_payload(public_key_path: str, payload_path: str, signature_b64: str) -> None:
    """Raise a CryptoError unless signature_b64 is valid for the payload."""
    public_key = load_public_key(public_key_path)
    try:
        payload = Path(payload_path).read_bytes()
    except OSError as e:
        raise FileIOError("verify_payload", f"reading {payload_path}: {e}", path=payload_path) from e
    verify_signature_b64(public_key, signature_b64, payload)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 3:
        print("Usage: python -m key_tools.verify_payload <public_key_path> <payload_file> <signature_b64>")
        return 1

    setup_logging()
    try:
        verify_payload(args[0], args[1], args[2])
    except CryptoError as e:
        print(f"❌ Signature NOT valid: {e}")
        return 1
    print("✓ Signature valid")
    return 0


if __name__ == "__main__":
    sys.exit(main())
