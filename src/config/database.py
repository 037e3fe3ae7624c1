from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie
from src.models.earlyAccessModel import EarlyAccessModel


# Call this from within your event loop to get beanie setup.
async def startDB(mongo_uri: str, database_name: str) -> AsyncIOMotorClient:
    # Create Motor client
    client = AsyncIOMotorClient(mongo_uri, uuidRepresentation="standard")
    database = client[database_name]

    # Init beanie with the early access document class
    await init_beanie(database=database, document_models=[EarlyAccessModel])
    return client
