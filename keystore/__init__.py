"""Keystore module for reading and writing PEM key files."""

from .files import (
    public_key_path,
    load_private_key,
    load_public_key,
    write_private_key,
    write_public_key,
    create_key_pair_files,
)

__all__ = [
    "public_key_path",
    "load_private_key",
    "load_public_key",
    "write_private_key",
    "write_public_key",
    "create_key_pair_files",
]
