from dataclasses import dataclass
from datetime import datetime

PASS_STATUS_ACTIVE = "active"
PASS_STATUS_EXPIRED = "expired"


@dataclass
class PassRecord:
    id: str  # ключ в хранилище (request_id или токен)
    request_id: str
    created_at: datetime
    valid_from: datetime
    valid_to: datetime

    visitor_name: str = ""
    visitor_email: str = ""
    visitor_phone: str = ""
    host_name: str = ""
    location: str = ""
    purpose: str = ""

    # Вычисляется при чтении, не является источником истины
    status: str = PASS_STATUS_ACTIVE

    @property
    def expires_at(self) -> datetime:
        return self.valid_to

    def __repr__(self):
        return f"<PassRecord(id={self.id}, request_id={self.request_id}, valid_to={self.valid_to.isoformat()}, status={self.status})>"
