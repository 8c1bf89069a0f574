from typing import Any, List

from fastapi import APIRouter, Depends, Response, status

from employee_records.api.deps import get_employee_service
from employee_records.schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from employee_records.services.employee_service import EmployeeService

router = APIRouter()


@router.get("", response_model=List[EmployeeResponse])
async def read_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> Any:
    """
    Retrieve all employees.
    """
    return await service.get_all_employees()


@router.get("/active", response_model=List[EmployeeResponse])
async def read_active_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> Any:
    return await service.get_active_employees()


@router.get("/department/{department}", response_model=List[EmployeeResponse])
async def read_employees_by_department(
    department: str,
    service: EmployeeService = Depends(get_employee_service),
) -> Any:
    """
    Retrieve employees whose department matches exactly (case-sensitive).
    """
    return await service.get_employees_by_department(department)


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def read_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> Any:
    """
    Get employee by ID.
    """
    return await service.get_employee_by_id(employee_id)


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> Any:
    return await service.create_employee(payload)


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: int,
    payload: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
) -> Any:
    """
    Update an employee. Fields left out of the body keep their current values.
    """
    return await service.update_employee(employee_id, payload)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> Response:
    await service.delete_employee(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
