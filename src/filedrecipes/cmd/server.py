import logging

import uvicorn
from fastapi import FastAPI

from filedrecipes.config import get_settings
from filedrecipes.lib.repository import RecipeRepository
from filedrecipes.web.routes import router

logger = logging.getLogger(__name__)


def create_app(repository: RecipeRepository | None = None) -> FastAPI:
    if repository is None:
        repository = RecipeRepository(get_settings().recipes_path)
        if repository.path.exists():
            repository.load()
        else:
            logger.warning(f"No recipe file at {str(repository.path)!r}, starting empty")

    app = FastAPI(title="Filed Recipes API")
    app.state.repository = repository

    app.include_router(router)

    return app


def main():
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run(
        "filedrecipes.cmd.server:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    main()
