# app/routers/billing/finance_router.py
from typing import List

from fastapi import APIRouter, Depends, status

from app.core.store import DataStore, get_store
from app.schemas.billing_schemas.finance_schemas import (
    ExpenseCreate,
    ExpenseOut,
    IncomeCreate,
    IncomeOut,
)
from app.schemas.response_schemas import SuccessResponse
from app.services.billing_services import finance_service

income_router = APIRouter(prefix="/income", tags=["Income"])
expenses_router = APIRouter(prefix="/expenses", tags=["Expenses"])


# --------------------------
# INCOME
# --------------------------
@income_router.get("", response_model=List[IncomeOut])
async def list_income_route(store: DataStore = Depends(get_store)):
    return await finance_service.list_income(store)


@income_router.post("", response_model=IncomeOut, status_code=status.HTTP_201_CREATED)
async def create_income_route(data: IncomeCreate, store: DataStore = Depends(get_store)):
    return await finance_service.create_income(store, data)


@income_router.delete("/{income_id}", response_model=SuccessResponse)
async def delete_income_route(income_id: int, store: DataStore = Depends(get_store)):
    return await finance_service.delete_income(store, income_id)


# --------------------------
# EXPENSES
# --------------------------
@expenses_router.get("", response_model=List[ExpenseOut])
async def list_expenses_route(store: DataStore = Depends(get_store)):
    return await finance_service.list_expenses(store)


@expenses_router.post("", response_model=ExpenseOut, status_code=status.HTTP_201_CREATED)
async def create_expense_route(data: ExpenseCreate, store: DataStore = Depends(get_store)):
    return await finance_service.create_expense(store, data)


@expenses_router.delete("/{expense_id}", response_model=SuccessResponse)
async def delete_expense_route(expense_id: int, store: DataStore = Depends(get_store)):
    return await finance_service.delete_expense(store, expense_id)
