from fastapi import FastAPI, APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse
from typing import List, Optional
from gardens import schemas
from gardens.config import Settings, load_settings
from gardens.deps import get_repository
from gardens.exceptions import StorageError
from gardens.ingest_service import GardenSeedService
from gardens.logs import configure_logging, get_logger
from gardens.repository import GardenRepository

logger = get_logger(__name__)

router = APIRouter()


@router.get("", response_model=List[schemas.GardenOut])
def list_gardens(repo: GardenRepository = Depends(get_repository)):
    return repo.get_all()

@router.get("/{garden_id}", response_model=schemas.GardenOut)
def get_garden(garden_id: int, repo: GardenRepository = Depends(get_repository)):
    obj = repo.get_by_id(garden_id)
    if not obj:
        raise HTTPException(404, "Garden not found")
    return obj

@router.post("", response_model=schemas.GardenOut, status_code=status.HTTP_201_CREATED)
def create_garden(payload: schemas.GardenIn, repo: GardenRepository = Depends(get_repository)):
    obj = repo.create(payload)
    if not obj:
        # inserted but the read-back came up empty
        raise HTTPException(500, "Garden was created but could not be read back")
    return obj

@router.put("/{garden_id}", response_model=schemas.GardenOut)
def update_garden(
    garden_id: int,
    payload: schemas.GardenIn,
    repo: GardenRepository = Depends(get_repository),
):
    obj = repo.update(garden_id, payload)
    if not obj:
        raise HTTPException(404, "Garden not found")
    return obj

@router.delete("/{garden_id}", response_model=schemas.DeleteResult)
def delete_garden(garden_id: int, repo: GardenRepository = Depends(get_repository)):
    changes = repo.delete(garden_id)
    if changes == 0:
        raise HTTPException(404, "Garden not found")
    return {"changes": changes}


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[GardenRepository] = None,
) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Community Gardens API (SQLite)")
    app.state.settings = settings
    app.state.repository = repository or GardenRepository.from_url(settings.database_url)

    # Schema failures abort startup; seeding problems are logged and tolerated
    @app.on_event("startup")
    def _init_db():
        repo: GardenRepository = app.state.repository
        logger.info("Connected to database at: %s", repo.engine.url)
        repo.init_schema()
        if settings.seed_on_startup:
            app.state.seed_result = GardenSeedService(repo).seed_if_empty(settings.seed_path)

    @app.exception_handler(StorageError)
    async def _storage_error(request: Request, exc: StorageError):
        return JSONResponse(status_code=500, content={"detail": f"Database error in {exc.operation}"})

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(router, prefix=settings.api_prefix, tags=["gardens"])
    return app


app = create_app()
