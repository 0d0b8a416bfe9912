# gardens/deps.py
from fastapi import Request

from gardens.repository import GardenRepository


# FastAPI dep
def get_repository(request: Request) -> GardenRepository:
    return request.app.state.repository
