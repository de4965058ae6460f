from .collection_repository import CollectionRepository as CollectionRepository
from .collection_repository import StoredRecord as StoredRecord
from .collection_store import CollectionStore as CollectionStore
from .dynamodb_key_value_storage import (
    DynamoDBKeyValueStorage as DynamoDBKeyValueStorage,
)
from .key_value_storage import InMemoryKeyValueStorage as InMemoryKeyValueStorage
from .key_value_storage import KeyValueStorage as KeyValueStorage
from .seed_data import SEED_DATA as SEED_DATA
