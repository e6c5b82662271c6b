from fastapi import APIRouter, Depends
from starlette import status

from vocabdeck.application.learning.use_cases.unit_management_use_case import (
    UnitManagementUseCase,
)
from vocabdeck.core import container
from vocabdeck.infrastructure.common.di import inject_use_case
from vocabdeck.infrastructure.learning.mappers import UnitMapper
from vocabdeck.infrastructure.learning.schemas import (
    LessonResponse,
    NameRequest,
    UnitListResponse,
    UnitResponse,
)

router = APIRouter(prefix="/units", tags=["units"])

mapper = UnitMapper()


@router.get("", response_model=UnitListResponse, status_code=status.HTTP_200_OK)
def list_units(
    use_case: UnitManagementUseCase = Depends(
        inject_use_case(container.unit_management_use_case)
    ),
) -> UnitListResponse:
    """List units with their lessons."""
    return UnitListResponse(units=[mapper.to_response(u) for u in use_case.list_units()])


@router.post("", response_model=UnitResponse, status_code=status.HTTP_201_CREATED)
def create_unit(
    request: NameRequest,
    use_case: UnitManagementUseCase = Depends(
        inject_use_case(container.unit_management_use_case)
    ),
) -> UnitResponse:
    """Create an empty unit."""
    return mapper.to_response(use_case.create_unit(request.name))


@router.patch("/{unit_id}", response_model=UnitResponse, status_code=status.HTTP_200_OK)
def rename_unit(
    unit_id: str,
    request: NameRequest,
    use_case: UnitManagementUseCase = Depends(
        inject_use_case(container.unit_management_use_case)
    ),
) -> UnitResponse:
    """
    Rename a unit.

    Raises:
        HTTPException: 404 if the unit does not exist
    """
    return mapper.to_response(use_case.rename_unit(unit_id, request.name))


@router.delete("/{unit_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_unit(
    unit_id: str,
    use_case: UnitManagementUseCase = Depends(
        inject_use_case(container.unit_management_use_case)
    ),
) -> None:
    """Delete a unit and its lessons. Cards filed under them are kept."""
    use_case.delete_unit(unit_id)


@router.post(
    "/{unit_id}/lessons", response_model=LessonResponse, status_code=status.HTTP_201_CREATED
)
def add_lesson(
    unit_id: str,
    request: NameRequest,
    use_case: UnitManagementUseCase = Depends(
        inject_use_case(container.unit_management_use_case)
    ),
) -> LessonResponse:
    """Add a lesson to a unit."""
    return mapper.to_lesson_response(use_case.add_lesson(unit_id, request.name))


@router.patch(
    "/{unit_id}/lessons/{lesson_id}",
    response_model=LessonResponse,
    status_code=status.HTTP_200_OK,
)
def rename_lesson(
    unit_id: str,
    lesson_id: str,
    request: NameRequest,
    use_case: UnitManagementUseCase = Depends(
        inject_use_case(container.unit_management_use_case)
    ),
) -> LessonResponse:
    """
    Rename a lesson.

    Raises:
        HTTPException: 404 if the unit or lesson does not exist
    """
    return mapper.to_lesson_response(use_case.rename_lesson(unit_id, lesson_id, request.name))


@router.delete("/{unit_id}/lessons/{lesson_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_lesson(
    unit_id: str,
    lesson_id: str,
    use_case: UnitManagementUseCase = Depends(
        inject_use_case(container.unit_management_use_case)
    ),
) -> None:
    """Delete a lesson. Cards filed under it are kept."""
    use_case.delete_lesson(unit_id, lesson_id)
