"""keyring-store: persist XML key-ring documents in AWS Secrets Manager.

Usage:
    from keyring_store.core.container import get_xml_repository

    repository = get_xml_repository()
    documents = repository.list_all_documents()
"""
