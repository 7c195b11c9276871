from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from filedrecipes.lib.errors import (
    MalformedRecipeFileError,
    RecipeFileIOError,
    RecipeIndexError,
    RecipeNotFoundError,
)
from filedrecipes.lib.repository import RecipeRepository
from filedrecipes.web.models import (
    RecipeListResponse,
    RecipeModel,
    RecipeResponse,
    StatusResponse,
)

router = APIRouter()


def get_repository(request: Request) -> RecipeRepository:
    return request.app.state.repository


def _status(repository: RecipeRepository) -> StatusResponse:
    return StatusResponse(count=repository.count, is_modified=repository.is_modified)


@router.get("/recipes", response_model=RecipeListResponse)
async def list_recipes(repository: RecipeRepository = Depends(get_repository)):
    recipes = [RecipeModel.model_validate(r) for r in repository.get_all()]
    return RecipeListResponse(recipes=recipes, is_modified=repository.is_modified)


@router.get("/recipes/{index}", response_model=RecipeResponse)
async def get_recipe(index: int, repository: RecipeRepository = Depends(get_repository)):
    try:
        recipe = repository.get_at(index)
    except RecipeIndexError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return RecipeResponse(recipe=RecipeModel.model_validate(recipe))


@router.post("/recipes", response_model=RecipeResponse, status_code=201)
async def add_recipe(
    recipe: RecipeModel, repository: RecipeRepository = Depends(get_repository)
):
    try:
        repository.add(recipe.to_recipe())
    except MalformedRecipeFileError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return RecipeResponse(recipe=recipe)


@router.delete("/recipes/{index}", status_code=204)
async def delete_recipe(
    index: int, repository: RecipeRepository = Depends(get_repository)
):
    try:
        repository.delete_at(index)
    except RecipeIndexError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/recipes/delete", status_code=204)
async def delete_matching_recipe(
    recipe: RecipeModel, repository: RecipeRepository = Depends(get_repository)
):
    try:
        repository.delete(recipe.to_recipe())
    except RecipeNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/recipes/save", response_model=StatusResponse)
async def save_recipes(repository: RecipeRepository = Depends(get_repository)):
    try:
        repository.save()
    except MalformedRecipeFileError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except RecipeFileIOError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return _status(repository)


@router.post("/recipes/load", response_model=StatusResponse)
async def load_recipes(repository: RecipeRepository = Depends(get_repository)):
    try:
        repository.load()
    except MalformedRecipeFileError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except RecipeFileIOError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return _status(repository)
