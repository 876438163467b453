# 📄 File: app/modules/catalog/presentation/api/v1/swap.py
# 🧭 Purpose (Layman Explanation):
# The web endpoint listing plants that are up for trade.
# 🧪 Purpose (Technical Summary):
# FastAPI router for the public swap list.
# 🔗 Dependencies:
# FastAPI router, ListSwapInstancesQueryHandler
# 🔄 Connected Modules / Calls From:
# app.api.v1.router (mounted under /api/v1/swap)

from fastapi import APIRouter, Depends

from app.modules.catalog.application.dto.catalog_dto import SwapListDTO
from app.modules.catalog.application.handlers.query_handlers import ListSwapInstancesQueryHandler
from app.modules.catalog.application.queries.list_swap_instances import ListSwapInstancesQuery

swap_router = APIRouter()


@swap_router.get(
    "",
    response_model=SwapListDTO,
    summary="Swap list",
    description="Instances marked for swap, newest first, with type labels and card images",
)
async def list_swap(handler: ListSwapInstancesQueryHandler = Depends()) -> SwapListDTO:
    return await handler.handle(ListSwapInstancesQuery())
