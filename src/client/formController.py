import logging
from typing import Optional

import httpx

from src.client.localFallbackStore import LocalFallbackStore
from src.commonUtils.enumUtils import ErrorKind, SubmissionStatus
from src.commonUtils.validationUtil import first_validation_error
from src.config.settings import Settings
from src.schemas.earlyAccessSchema import Submission, SubmissionResult

logger = logging.getLogger(__name__)

FIELDS = ("name", "email", "phone")
SERVER_ERROR = "Server error"
GENERIC_ERROR = "Something went wrong."


class SubscribeFormController:
    """
    State behind the early access form: the three text fields, a status and at most one error message.

    submit() validates name, email and phone in that order and stops at the first failure. Once
    everything passes it posts the trimmed payload to the endpoint, or writes it to the local
    fallback store when no endpoint is configured. While a request is in flight further submits
    are ignored.
    """

    def __init__(
            self,
            endpoint: Optional[str] = None,
            client: Optional[httpx.AsyncClient] = None,
            fallback_store: Optional[LocalFallbackStore] = None
    ):
        self.endpoint = endpoint
        self.client = client
        self.fallback_store = fallback_store

        self.name = ""
        self.email = ""
        self.phone = ""
        self.status = SubmissionStatus.IDLE
        self.error: Optional[str] = None

    @classmethod
    def from_settings(cls, config: Settings, client: Optional[httpx.AsyncClient] = None) -> "SubscribeFormController":
        return cls(
            endpoint=config.SUBSCRIBE_API_URL or None,
            client=client,
            fallback_store=LocalFallbackStore(config.FALLBACK_STORE_PATH)
        )

    @property
    def can_submit(self) -> bool:
        return self.status != SubmissionStatus.SENDING

    def update_field(self, field: str, value: str):
        if field not in FIELDS:
            raise ValueError(f"Unknown form field: {field}")
        setattr(self, field, value)

    async def submit(self) -> SubmissionResult:
        # Submit control is disabled while sending
        if not self.can_submit:
            return SubmissionResult(ok=False, kind=ErrorKind.VALIDATION, message="Submission already in progress")

        self.error = None

        message = first_validation_error(self.name, self.email, self.phone)
        if message:
            self.error = message
            return SubmissionResult(ok=False, kind=ErrorKind.VALIDATION, message=message)

        self.status = SubmissionStatus.SENDING
        payload = Submission(name=self.name.strip(), email=self.email.strip(), phone=self.phone.strip())

        try:
            if not self.endpoint:
                result = self._store_locally(payload)
            else:
                result = await self._post(payload)
        except Exception as e:
            logger.error(f"Subscribe submission failed: {str(e)}", exc_info=True)
            result = SubmissionResult(ok=False, kind=ErrorKind.TRANSPORT, message=str(e) or GENERIC_ERROR)

        if result.ok:
            self.status = SubmissionStatus.SUCCESS
            self.name = ""
            self.email = ""
            self.phone = ""
        else:
            self.status = SubmissionStatus.ERROR
            self.error = result.message
        return result

    async def _post(self, payload: Submission) -> SubmissionResult:
        body = payload.model_dump(exclude={"created_at"})
        try:
            if self.client is not None:
                response = await self.client.post(self.endpoint, json=body)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.post(self.endpoint, json=body)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Subscribe request to {self.endpoint} failed: {str(e)}")
            return SubmissionResult(ok=False, kind=ErrorKind.TRANSPORT, message=str(e) or GENERIC_ERROR)

        try:
            content = response.json()
        except ValueError as e:
            # A success status without a readable body does not confirm the row was stored
            if response.is_success:
                logger.error(f"Unreadable success response from {self.endpoint}: {str(e)}")
                return SubmissionResult(ok=False, kind=ErrorKind.TRANSPORT, message=str(e) or GENERIC_ERROR)
            content = None
        if not isinstance(content, dict):
            content = {}

        if not response.is_success:
            kind = ErrorKind.CLIENT if response.is_client_error else ErrorKind.PERSISTENCE
            return SubmissionResult(ok=False, kind=kind, message=content.get("error") or SERVER_ERROR)

        data = content.get("data")
        return SubmissionResult(ok=True, data=data if isinstance(data, list) else [])

    def _store_locally(self, payload: Submission) -> SubmissionResult:
        if self.fallback_store is None:
            return SubmissionResult(ok=False, kind=ErrorKind.PERSISTENCE, message="No subscribe endpoint configured")
        try:
            entry = self.fallback_store.append(payload.model_dump(exclude={"created_at"}))
        except OSError as e:
            logger.error(f"Local fallback write failed: {str(e)}")
            return SubmissionResult(ok=False, kind=ErrorKind.PERSISTENCE, message=str(e) or GENERIC_ERROR)
        return SubmissionResult(ok=True, data=[entry])
