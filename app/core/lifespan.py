from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import get_settings
from app.db import database


@asynccontextmanager
async def lifespan(app: FastAPI):
    await database.connect(get_settings())
    yield
    await database.disconnect()
