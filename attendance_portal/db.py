"""MongoDB connection, shared application context and Beanie document registration."""
from dataclasses import dataclass

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from attendance_portal.config import Settings
from attendance_portal.models import Attendance, SchoolClass, Student, Teacher

DOCUMENT_MODELS = [
    Student,
    Teacher,
    SchoolClass,
    Attendance,
]


@dataclass(frozen=True)
class AppContext:
    """Process-wide handle on the store, shared by every request.

    The Motor client is thread-safe and pools its own connections, so the
    context only carries references and is never copied per request.
    """

    client: AsyncIOMotorClient
    database: AsyncIOMotorDatabase


def connect(settings: Settings) -> AppContext:
    """Build the client from MONGO_URI. No network I/O happens until first use."""
    client = AsyncIOMotorClient(str(settings.mongo_uri))
    return AppContext(client=client, database=client[settings.mongo_db_name])


async def init_store(ctx: AppContext) -> None:
    """Bind document models to the context's database and create their indexes."""
    await init_beanie(database=ctx.database, document_models=DOCUMENT_MODELS)


async def ping(ctx: AppContext) -> None:
    await ctx.database.command("ping")


def close(ctx: AppContext) -> None:
    ctx.client.close()
