"""Customer API router with CRUD operations."""

from fastapi import APIRouter, Depends, HTTPException, status

from library_lending.api.http.deps import get_customer_service
from library_lending.core.services import CustomerService
from library_lending.entities.customer import Customer, CustomerCreate, CustomerUpdate

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=list[Customer])
def list_customers(service: CustomerService = Depends(get_customer_service)) -> list[Customer]:
    return service.list_customers()


@router.get("/{customer_id}", response_model=Customer)
def get_customer(
    customer_id: int, service: CustomerService = Depends(get_customer_service)
) -> Customer:
    customer = service.get_customer(customer_id)
    if customer is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.post("", response_model=Customer, status_code=status.HTTP_201_CREATED)
def create_customer(
    customer: CustomerCreate, service: CustomerService = Depends(get_customer_service)
) -> Customer:
    """Register a customer. The response never includes the password."""
    return service.create_customer(customer)


@router.put("/{customer_id}", response_model=Customer)
def update_customer(
    customer_id: int,
    customer: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
) -> Customer:
    updated = service.update_customer(customer_id, customer)
    if updated is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    return updated


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(
    customer_id: int, service: CustomerService = Depends(get_customer_service)
) -> None:
    """Delete a customer together with their borrowing records."""
    if not service.delete_customer(customer_id):
        raise HTTPException(status_code=404, detail="Customer not found")
