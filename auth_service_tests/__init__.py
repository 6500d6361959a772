"""
Tests for the auth_service package

- HTTP flows for registration, login and user info (`test_auth.py`)
- Database initialization (`test_db_init.py`)
- Padding, AES cipher and token utilities (`test_padding.py`, `test_crypto.py`, `test_tokens.py`)
- Redis cache client (`test_cache.py`)
"""
