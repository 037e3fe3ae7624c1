from enum import Enum


class SubmissionStatus(str, Enum):
    """
    Lifecycle of a single form instance.

    Flow:
    1. IDLE → fields being filled in, nothing sent yet
    2. SENDING → validation passed, request in flight (submit is disabled)
    3. SUCCESS → stored, fields cleared
    4. ERROR → request failed, fields kept for a retry (ERROR → SENDING)
    """
    IDLE = "idle"
    SENDING = "sending"
    SUCCESS = "success"
    ERROR = "error"


class ErrorKind(str, Enum):
    VALIDATION = "validation"  # User-correctable input defect, never reaches the network
    CLIENT = "client"  # 400 from the endpoint, incomplete payload
    PERSISTENCE = "persistence"  # Insert failed, 500
    TRANSPORT = "transport"  # Network failure, malformed JSON, anything unexpected
