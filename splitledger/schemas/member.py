from pydantic import BaseModel

class Member(BaseModel):
    id: str
    name: str
    # external user id once someone claims this member
    claimed_by: str | None = None

    class Config:
        frozen = True
        from_attributes = True
