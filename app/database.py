# app/database.py
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING
from pymongo.errors import PyMongoError
from app.config import get_settings
from app.utils.logger import get_logger

settings = get_settings()
logger = get_logger(__name__)

STAFF_COLLECTION = "staff"
VEHICLE_COLLECTION = "vehicles"

class Database:
    client: AsyncIOMotorClient = None
    db = None

db = Database()

async def connect_to_mongo():
    db.client = AsyncIOMotorClient(settings.MONGODB_URI)
    db.db = db.client[settings.MONGODB_DB_NAME]
    logger.info("Connected to MongoDB: %s", settings.MONGODB_DB_NAME)

async def close_mongo_connection():
    if db.client:
        db.client.close()
        db.client = None
        db.db = None
        logger.info("Closed MongoDB connection")

async def get_database():
    return db.db

async def init_db():
    if not db.client:
        await connect_to_mongo()
    try:
        # Create collections
        collections = await db.db.list_collection_names()
        if STAFF_COLLECTION not in collections:
            await db.db.create_collection(STAFF_COLLECTION)
        if VEHICLE_COLLECTION not in collections:
            await db.db.create_collection(VEHICLE_COLLECTION)

        # Identity keys are unique; duplicate inserts fail at the index
        await db.db[STAFF_COLLECTION].create_index([("staffNumber", ASCENDING)], unique=True)
        await db.db[VEHICLE_COLLECTION].create_index([("vin", ASCENDING)], unique=True)

        logger.info("Database initialized successfully")
        return True
    except PyMongoError as e:
        # Startup fails without the unique indexes
        logger.error("Database initialization failed: %s", e)
        raise
