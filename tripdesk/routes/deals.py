from datetime import date

from fastapi import APIRouter, Depends, Query

from tripdesk.routes.deps import get_query_service, get_today
from tripdesk.schemas.deals import DealsResponse, DealTab
from tripdesk.services.deal_service import list_deals
from tripdesk.services.query_service import QueryService

router = APIRouter()

@router.get("/deals", response_model=DealsResponse)
def get_deals(
    tab: DealTab = Query(DealTab.ALL),
    today: date = Depends(get_today),
    queries: QueryService = Depends(get_query_service),
):
    return list_deals(queries.list_hotels(), queries.list_flights(), tab, today)
