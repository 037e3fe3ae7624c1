import json
import logging
from typing import Any, Dict, Tuple

from src.commonUtils.enumUtils import ErrorKind
from src.models.earlyAccessModel import COLLECTION_NAME
from src.schemas.earlyAccessSchema import SubmissionResult

logger = logging.getLogger(__name__)

MISSING_FIELDS_ERROR = "Missing name or email"

STATUS_BY_KIND = {
    ErrorKind.CLIENT: 400,
    ErrorKind.PERSISTENCE: 500,
    ErrorKind.TRANSPORT: 500,
}


class SubscriptionService:
    """Stateless handler behind POST /api/subscribe"""

    def __init__(self, store, table_name: str = COLLECTION_NAME):
        self.store = store
        self.table_name = table_name

    async def handle(self, raw_body: bytes) -> SubmissionResult:
        try:
            body = json.loads(raw_body) if raw_body and raw_body.strip() else None
            if not isinstance(body, dict):
                body = {}
            name, email, phone = body.get("name"), body.get("email"), body.get("phone")

            # Phone is optional here, the form client already checked it
            if not name or not email:
                return SubmissionResult(ok=False, kind=ErrorKind.CLIENT, message=MISSING_FIELDS_ERROR)

            result = await self.store.insert(self.table_name, [{"name": name, "email": email, "phone": phone}])

            if result.error is not None:
                logger.error(f"{self.table_name} insert error: {result.error.model_dump()}")
                return SubmissionResult(ok=False, kind=ErrorKind.PERSISTENCE, message=result.error.message)

            return SubmissionResult(ok=True, data=result.data or [])
        except Exception as e:
            logger.error(f"Subscribe handler error: {str(e)}", exc_info=True)
            return SubmissionResult(ok=False, kind=ErrorKind.TRANSPORT, message=str(e) or "Unknown error")

    @staticmethod
    def to_http(result: SubmissionResult) -> Tuple[int, Dict[str, Any]]:
        """Map a handled request onto (status_code, json body)."""
        if result.ok:
            return 200, {"ok": True, "data": result.data}
        return STATUS_BY_KIND.get(result.kind, 500), {"error": result.message or "Unknown error"}
