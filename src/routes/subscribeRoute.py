from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.models.earlyAccessModel import COLLECTION_NAME
from src.crud.subscriptionService import SubscriptionService
from src.schemas.earlyAccessSchema import ErrorResponse, SubscribeResponse

router = APIRouter()


# Dependency to get the subscription service
def get_subscription_service(request: Request) -> SubscriptionService:
    return SubscriptionService(
        store=request.app.state.store,
        table_name=COLLECTION_NAME
    )


@router.post(
    "/subscribe",
    response_model=SubscribeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def subscribe(
        request: Request,
        service: SubscriptionService = Depends(get_subscription_service)
):
    """
    Store an early access sign-up.
    The raw body is parsed by the service so malformed JSON becomes a 500 with a message, not a 422.
    """
    raw_body = await request.body()
    result = await service.handle(raw_body)
    status_code, content = service.to_http(result)
    return JSONResponse(status_code=status_code, content=content)
