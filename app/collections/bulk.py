import logging
from itertools import islice
from typing import Iterable

from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import BaseModel

from app.core.config import settings

logger = logging.getLogger(__name__)


async def insert_in_batches(
    collection: AsyncIOMotorCollection,
    documents: Iterable[BaseModel],
    batch_size: int | None = None,
) -> int:
    """Bulk insert models in fixed-size batches, returning the inserted count."""
    batch_size = batch_size or settings.DEMO_SEED_BATCH_SIZE
    iterator = iter(documents)
    inserted = 0
    while True:
        batch = [
            doc.model_dump(mode="json", exclude_none=True, by_alias=True)
            for doc in islice(iterator, batch_size)
        ]
        if not batch:
            break
        result = await collection.insert_many(batch, ordered=False)
        inserted += len(result.inserted_ids)
        logger.info(
            "Inserted batch of %d into '%s' (%d total)",
            len(result.inserted_ids),
            collection.name,
            inserted,
        )
    return inserted
