from file_manager.backend.app.infrastructure.db.client import create_mongo_client

__all__ = ['create_mongo_client']
