from pymongo import AsyncMongoClient


def create_mongo_client(url: str) -> AsyncMongoClient:
    # tz_aware so uploadDate comes back comparable with utcnow()
    return AsyncMongoClient(url, tz_aware=True)
