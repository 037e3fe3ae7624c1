import logging
from typing import Any, Dict, List, Optional, Type

from beanie import Document
from motor.motor_asyncio import AsyncIOMotorClient
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from src.config.database import startDB
from src.config.settings import Settings
from src.models.earlyAccessModel import COLLECTION_NAME, EarlyAccessModel
from src.schemas.earlyAccessSchema import InsertError, InsertResult

logger = logging.getLogger(__name__)

TABLES: Dict[str, Type[Document]] = {
    COLLECTION_NAME: EarlyAccessModel,
}


class ConfigurationError(RuntimeError):
    """Raised at boot when the database settings are incomplete."""


class EarlyAccessStore:
    """Insert-only access to the managed database."""

    def __init__(self, mongo_uri: Optional[str], database: Optional[str]):
        if not mongo_uri or not database:
            raise ConfigurationError("Missing MONGO_URI or MONGO_DATABASE")
        self.mongo_uri = mongo_uri
        self.database = database
        self.client: Optional[AsyncIOMotorClient] = None

    @classmethod
    def from_settings(cls, config: Settings) -> "EarlyAccessStore":
        return cls(config.MONGO_URI, config.MONGO_DATABASE)

    async def connect(self):
        self.client = await startDB(self.mongo_uri, self.database)
        logger.info(f"Connected to database '{self.database}'")

    def close(self):
        if self.client is not None:
            self.client.close()
            self.client = None

    async def insert(self, table_name: str, records: List[Dict[str, Any]]) -> InsertResult:
        """Insert every record into table_name; failures come back as an error descriptor."""
        model = TABLES.get(table_name)
        if model is None:
            return InsertResult(error=InsertError(message=f"Unknown table: {table_name}", code="unknown_table"))
        if self.client is None:
            return InsertResult(error=InsertError(message="Database is not connected", code="not_connected"))

        inserted = []
        try:
            for record in records:
                doc = model(**record)
                await doc.insert()
                inserted.append(doc.model_dump(mode="json", exclude={"revision_id"}))
        except ValidationError as e:
            return InsertResult(error=InsertError(message=f"Invalid record: {e.error_count()} field error(s)",
                                                  code="invalid_record"))
        except PyMongoError as e:
            return InsertResult(error=InsertError(message=str(e), code=e.__class__.__name__))

        logger.info(f"Inserted {len(inserted)} row(s) into {table_name}")
        return InsertResult(data=inserted)
