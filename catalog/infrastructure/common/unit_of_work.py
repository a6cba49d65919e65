"""SQLAlchemy implementation of the unit of work."""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.common.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Unit of work bound to the request's database session."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def commit(self) -> None:
        await self.db.commit()

    async def rollback(self) -> None:
        logger.info("rolling_back_transaction")
        await self.db.rollback()
