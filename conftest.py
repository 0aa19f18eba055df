"""Shared key fixtures. 4096-bit generation is slow, so keys are made once per session."""
import pytest
from cryptography.hazmat.primitives.asymmetric import rsa

from signing.keys import generate_key_pair


@pytest.fixture(scope="session")
def key_pair():
    return generate_key_pair()


@pytest.fixture(scope="session")
def private_key(key_pair):
    return key_pair[0]


@pytest.fixture(scope="session")
def public_key(key_pair):
    return key_pair[1]


@pytest.fixture(scope="session")
def other_private_key():
    # Any RSA key works for the "wrong key" cases; 2048 bits keeps the suite fast
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)
