"""Test suite for keyring-store.

- unit/: Unit tests with mocked boto3 clients and moto-backed Secrets Manager
"""
