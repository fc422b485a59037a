"""
Models for lead form submissions
"""
import json
from datetime import datetime, timezone
from typing import Dict, Optional
from pydantic import BaseModel, Field


class Submission(BaseModel):
    """Normalized view of one decoded form body"""
    name: str
    email: str
    phone: Optional[str] = None
    quantity: Optional[str] = None
    contribution: Optional[str] = None
    consent: bool = False
    form_type: str
    fields: Dict[str, str] = Field(default_factory=dict)

    def to_record(self, user_agent: str = "", ip: str = "") -> "LeadRecord":
        return LeadRecord(
            name=self.name,
            email=self.email,
            phone=self.phone,
            quantity=self.quantity,
            contribution=self.contribution,
            form_type=self.form_type,
            consent=self.consent,
            user_agent=user_agent,
            ip=ip,
            raw_data=json.dumps(self.fields, ensure_ascii=False),
        )


class LeadRecord(BaseModel):
    """One row of the leads table"""
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    name: str
    email: str
    phone: Optional[str] = None
    quantity: Optional[str] = None
    contribution: Optional[str] = None
    form_type: str
    consent: bool = True
    user_agent: str = ""
    ip: str = ""
    raw_data: str = "{}"

    def to_row(self) -> Dict:
        """JSON-ready dict for the insert call (created_at as ISO string)"""
        return self.model_dump(mode="json")
